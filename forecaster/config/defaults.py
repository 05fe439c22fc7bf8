"""Defaults and environment variable names."""

DEFAULT_BASE_URL = "https://api.openweathermap.org"

# Same as httpx's own default.
DEFAULT_TIMEOUT_SECONDS = 5.0

CONFIG_PATH_ENV = "FORECASTER_CONFIG"
API_KEY_ENV = "OPENWEATHER_API_KEY"
BASE_URL_ENV = "OPENWEATHER_BASE_URL"

# Environment variable -> config field. Environment wins over the YAML file.
ENV_OVERRIDES: dict[str, str] = {
    API_KEY_ENV: "api_key",
    BASE_URL_ENV: "base_url",
}
