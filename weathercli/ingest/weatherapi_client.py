"""WeatherAPI forecast client."""

import logging

import httpx

from weathercli.config.schema import WEATHERAPI_BASE_URL
from weathercli.errors import ApiError, MalformedResponseError, NetworkError
from weathercli.ingest.report_parser import parse_report
from weathercli.models.weather import Report

logger = logging.getLogger(__name__)

FORECAST_PATH = "/forecast.json"
DEFAULT_FORECAST_DAYS = 3  # free plan limit


class WeatherApiClient:
    """Single blocking GET against the forecast endpoint, no retries."""

    def __init__(
        self,
        base_url: str = WEATHERAPI_BASE_URL,
        forecast_days: int = DEFAULT_FORECAST_DAYS,
        air_quality: bool = True,
    ):
        self.base_url = base_url.rstrip("/")
        self.forecast_days = forecast_days
        self.air_quality = air_quality

    def get_forecast(self, api_key: str, query: str) -> dict:
        """Fetch the raw forecast payload for a location query.

        Raises NetworkError when no response arrives, ApiError on an error
        status and MalformedResponseError when the body is not a JSON object.
        """
        url = f"{self.base_url}{FORECAST_PATH}"
        params = {
            "key": api_key,
            "q": query,
            "days": self.forecast_days,
            "aqi": "yes" if self.air_quality else "no",
        }
        logger.debug("GET %s q=%s days=%d", url, query, self.forecast_days)

        try:
            resp = httpx.get(url, params=params)
        except httpx.RequestError as e:
            logger.error("WeatherAPI request failed: %s", e)
            raise NetworkError(f"Failed to fetch weather data: {e}") from e

        if resp.status_code >= 400:
            raise _api_error(resp)

        try:
            data = resp.json()
        except ValueError as e:
            raise MalformedResponseError("Response body is not valid JSON") from e
        if not isinstance(data, dict):
            raise MalformedResponseError("Response body is not a JSON object")
        return data

    def get_report(self, api_key: str, query: str) -> Report:
        return parse_report(self.get_forecast(api_key, query))


def _api_error(resp: httpx.Response) -> ApiError:
    """Build an ApiError from WeatherAPI's {"error": {"code", "message"}} body."""
    message = None
    code = None
    try:
        body = resp.json()
    except ValueError:
        body = None

    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        error = body["error"]
        if isinstance(error.get("message"), str) and error["message"].strip():
            message = error["message"].strip()
        if isinstance(error.get("code"), int):
            code = error["code"]

    if message is None:
        message = f"HTTP {resp.status_code}: {resp.reason_phrase or 'request failed'}"

    logger.error("WeatherAPI %d (code=%s): %s", resp.status_code, code, message)
    return ApiError(message, status_code=resp.status_code, code=code)
