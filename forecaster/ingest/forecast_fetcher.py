"""Forecast fetcher: one request, one decoded forecast."""

import logging

import httpx
from pydantic import ValidationError

from forecaster.config.schema import ForecasterConfig
from forecaster.ingest.openweather_client import OpenWeatherClient
from forecaster.models.forecast import ForecastResponse, decode_forecast

logger = logging.getLogger(__name__)


class ForecastFetchError(Exception):
    """The forecast request failed, in transport or in decoding."""


class ForecastFetcher:
    def __init__(self, client: OpenWeatherClient):
        self.client = client

    def fetch(self, lat: str, lon: str) -> ForecastResponse:
        """Fetch and decode the forecast for a coordinate pair.

        ``lat`` and ``lon`` are sent as given. Nothing is retried; transport
        and decode failures both raise ForecastFetchError chained to the cause.
        """
        if not self.client.api_key:
            logger.warning("No OpenWeatherMap API key configured")

        try:
            body = self.client.get_forecast(lat, lon)
        # InvalidURL (bad base_url) is not an HTTPError subclass.
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("Forecast request failed for lat=%s lon=%s: %s", lat, lon, e)
            raise ForecastFetchError(f"request failed: {e}") from e

        try:
            forecast = decode_forecast(body)
        except ValidationError as e:
            logger.error(
                "Forecast response for lat=%s lon=%s did not decode: %d error(s)",
                lat, lon, e.error_count(),
            )
            raise ForecastFetchError(f"request failed: {e}") from e

        if len(forecast.list) != forecast.cnt:
            logger.debug(
                "cnt=%d but %d entries decoded", forecast.cnt, len(forecast.list)
            )
        logger.info(
            "Decoded %d forecast entries for %s", len(forecast.list), forecast.city.name
        )
        return forecast


def fetch_forecast(
    lat: str, lon: str, config: ForecasterConfig | None = None
) -> ForecastResponse:
    """Fetch the forecast for ``lat``/``lon`` using ``config`` (or defaults)."""
    config = config or ForecasterConfig()
    client = OpenWeatherClient(
        api_key=config.api_key,
        base_url=config.base_url,
        timeout=config.timeout_seconds,
    )
    return ForecastFetcher(client).fetch(lat, lon)
