"""CLI entry point for the forecast fetcher."""

import argparse
import logging
import sys

from forecaster.config.loader import default_config_path, load_config, redacted_config
from forecaster.ingest.forecast_fetcher import fetch_forecast
from forecaster.reporting.formatters import format_forecast_debug, usage_line

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, prog: str | None = None) -> int:
    # No -h and no abbreviations: anything unrecognised, dashed or not,
    # is a coordinate and is passed through as given.
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Fetch a 5-day / 3-hour OpenWeatherMap forecast",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--config", default=None, help="Config YAML path (default: $FORECASTER_CONFIG)"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Only log warnings and errors"
    )

    args, coords = parser.parse_known_args(argv)

    # Missing coordinates is not an error: print usage and exit 0.
    if len(coords) < 2:
        print(usage_line(parser.prog))
        return 0

    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    lat, lon = coords[0], coords[1]
    config = load_config(args.config or default_config_path())
    logger.info("Config: %s", redacted_config(config))

    forecast = fetch_forecast(lat, lon, config)
    print(format_forecast_debug(forecast))
    return 0


def run() -> None:
    sys.exit(main())
