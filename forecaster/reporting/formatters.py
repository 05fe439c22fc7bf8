"""Output formatters for decoded forecasts."""

from forecaster.models.forecast import ForecastResponse

FORECAST_PREFIX = "Forecast => "


def format_forecast_debug(forecast: ForecastResponse) -> str:
    """Debug representation, as printed by the CLI."""
    return f"{FORECAST_PREFIX}{forecast!r}"


def usage_line(prog: str) -> str:
    return f"Usage: {prog} LATITUDE LONGITUDE"
