"""CLI entry point for the weather report tool."""

import argparse
import logging
import sys

from dotenv import find_dotenv, load_dotenv

from weathercli.config.loader import load_app_config, resolve_api_key
from weathercli.config.schema import AppConfig, OutputFormat
from weathercli.errors import ConfigError, CredentialMissingError, WeatherCliError
from weathercli.ingest.location_resolver import resolve_location
from weathercli.ingest.weatherapi_client import WeatherApiClient
from weathercli.reporting.formatters import format_report_json, format_report_text

logger = logging.getLogger(__name__)

CREDENTIAL_MISSING_MESSAGE = "Error: ENVIRONMENT VARIABLE NOT FOUND"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weather",
        description="Current conditions, air quality and a 3-day forecast "
        "from WeatherAPI",
    )
    parser.add_argument(
        "location",
        nargs="?",
        help='City, "City, Region", IP, lat,lon or postal code '
        "(quote it if it contains spaces)",
    )
    # Negative "lat,lon" queries (-33.87,151.21) parse as unknown options.
    args, extra = parser.parse_known_args(argv)
    if args.location is None and len(extra) == 1:
        args.location = extra[0]
    elif extra:
        parser.error(
            f"unrecognized arguments: {' '.join(extra)} "
            '(use "" quotations if the location has whitespace)'
        )

    _load_env()

    try:
        config = load_app_config()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _setup_logging(config)

    try:
        api_key = resolve_api_key(config.api.api_key)
        query = resolve_location(args.location)
        client = WeatherApiClient(
            base_url=config.api.base_url,
            forecast_days=config.api.forecast_days,
            air_quality=config.api.air_quality,
        )
        report = client.get_report(api_key, query)
    except CredentialMissingError as e:
        logger.debug("Credential lookup failed: %s", e)
        print(CREDENTIAL_MISSING_MESSAGE, file=sys.stderr)
        return 1
    except WeatherCliError as e:
        logger.debug("Invocation failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if config.output.format == OutputFormat.JSON:
        print(format_report_json(report))
    else:
        print(format_report_text(report))
    return 0


def _load_env() -> str:
    """Load the nearest .env walking up from the working directory, if any."""
    dotenv_path = find_dotenv(usecwd=True)
    if dotenv_path:
        load_dotenv(dotenv_path, override=False)
    return dotenv_path


def _setup_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=config.logging.level.value,
        format=config.logging.format,
        stream=sys.stderr,
    )
    # httpx logs full request URLs at INFO, which include the API key.
    logging.getLogger("httpx").setLevel(logging.WARNING)
