"""OpenWeatherMap forecast API client."""

import logging

import httpx

from forecaster.config.defaults import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

FORECAST_PATH = "/data/2.5/forecast"
DEFAULT_USER_AGENT = "forecaster/0.1.0"


class OpenWeatherClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout

    def forecast_url(self, lat: str, lon: str) -> str:
        """Request URL without the appid parameter, for logging."""
        return f"{self.base_url}{FORECAST_PATH}?lat={lat}&lon={lon}"

    def get_forecast(self, lat: str, lon: str) -> bytes:
        """Fetch the 5-day / 3-hour forecast and return the raw body.

        Single attempt. The status code is not checked; raises
        httpx.HTTPError on transport failures only.
        """
        url = f"{self.base_url}{FORECAST_PATH}"
        params = {"lat": lat, "lon": lon, "appid": self.api_key}
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
        logger.info(
            "GET %s returned %d (%d bytes)",
            self.forecast_url(lat, lon), resp.status_code, len(resp.content),
        )
        return resp.content
