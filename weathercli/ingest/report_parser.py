"""Map a WeatherAPI forecast payload onto Report.

Only location.name and current.temp_c are essential. Everything else
degrades to None, or to AirQualityUnavailable for the air-quality block,
when missing or of the wrong type.
"""

import logging
from typing import Any

from weathercli import units
from weathercli.errors import MalformedResponseError
from weathercli.models.weather import (
    AirQuality,
    AirQualityUnavailable,
    CurrentConditions,
    ForecastDay,
    Location,
    Report,
)

logger = logging.getLogger(__name__)


def parse_report(raw: dict) -> Report:
    location = _parse_location(raw.get("location"))
    current_raw = raw.get("current")
    current = _parse_current(current_raw)
    air_quality = _parse_air_quality(current_raw.get("air_quality"))
    forecast = _parse_forecast(raw.get("forecast"))
    return Report(
        location=location,
        current=current,
        air_quality=air_quality,
        forecast=forecast,
    )


def _parse_location(raw: Any) -> Location:
    if not isinstance(raw, dict):
        raise MalformedResponseError("Response has no 'location' object")
    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        raise MalformedResponseError("Response is missing 'location.name'")
    return Location(
        name=name,
        region=_text(raw, "region"),
        country=_text(raw, "country"),
        localtime=_text(raw, "localtime"),
        lat=_number(raw, "lat", signed=True),
        lon=_number(raw, "lon", signed=True),
        tz_id=_text(raw, "tz_id"),
    )


def _parse_current(raw: Any) -> CurrentConditions:
    if not isinstance(raw, dict):
        raise MalformedResponseError("Response has no 'current' object")
    temp_c = _number(raw, "temp_c", signed=True)
    if temp_c is None:
        raise MalformedResponseError("Response is missing 'current.temp_c'")

    temp_f = _number(raw, "temp_f", signed=True)
    if temp_f is None:
        temp_f = units.celsius_to_fahrenheit(temp_c)

    feelslike_c = _number(raw, "feelslike_c", signed=True)
    feelslike_f = _companion(
        _number(raw, "feelslike_f", signed=True), feelslike_c,
        units.celsius_to_fahrenheit,
    )
    dewpoint_c = _number(raw, "dewpoint_c", signed=True)
    dewpoint_f = _companion(
        _number(raw, "dewpoint_f", signed=True), dewpoint_c,
        units.celsius_to_fahrenheit,
    )
    wind_kph = _number(raw, "wind_kph")
    wind_mph = _companion(_number(raw, "wind_mph"), wind_kph, units.kph_to_mph)

    precip_mm = _number(raw, "precip_mm")
    if precip_mm is None:
        precip_in = _number(raw, "precip_in")
        if precip_in is not None:
            precip_mm = units.inches_to_mm(precip_in)
    else:
        precip_mm = units.precip_mm(precip_mm)

    wind_degree = _integer(raw, "wind_degree")
    wind_dir = _text(raw, "wind_dir")
    if not wind_dir and wind_degree is not None:
        wind_dir = units.compass_point(wind_degree)

    return CurrentConditions(
        condition_text=_condition_text(raw),
        temp_c=temp_c,
        temp_f=temp_f,
        feelslike_c=feelslike_c,
        feelslike_f=feelslike_f,
        uv=_number(raw, "uv"),
        humidity=_integer(raw, "humidity"),
        precip_mm=precip_mm,
        wind_kph=wind_kph,
        wind_mph=wind_mph,
        wind_dir=wind_dir,
        dewpoint_c=dewpoint_c,
        dewpoint_f=dewpoint_f,
        wind_degree=wind_degree,
    )


def _parse_air_quality(raw: Any) -> AirQuality | AirQualityUnavailable:
    if raw is None:
        return AirQualityUnavailable()
    if not isinstance(raw, dict):
        logger.warning("Ignoring air_quality block of type %s", type(raw).__name__)
        return AirQualityUnavailable(reason="unreadable")

    aq = AirQuality(
        us_epa_index=_integer(raw, "us-epa-index"),
        pm2_5=_number(raw, "pm2_5"),
        pm10=_number(raw, "pm10"),
        gb_defra_index=_integer(raw, "gb-defra-index"),
        co=_number(raw, "co"),
        no2=_number(raw, "no2"),
        o3=_number(raw, "o3"),
        so2=_number(raw, "so2"),
    )
    if aq.us_epa_index is None and aq.pm2_5 is None and aq.pm10 is None:
        return AirQualityUnavailable(reason="empty")
    return aq


def _parse_forecast(raw: Any) -> tuple[ForecastDay, ...]:
    if not isinstance(raw, dict):
        logger.warning("Response has no 'forecast' object")
        return ()
    entries = raw.get("forecastday")
    if not isinstance(entries, list):
        logger.warning("Response has no 'forecast.forecastday' list")
        return ()

    days: list[ForecastDay] = []
    for entry in entries:
        day = _parse_forecast_day(entry)
        if day is not None:
            days.append(day)
    days.sort(key=lambda d: d.date)
    return tuple(days)


def _parse_forecast_day(raw: Any) -> ForecastDay | None:
    if not isinstance(raw, dict):
        logger.warning("Skipping forecast entry of type %s", type(raw).__name__)
        return None
    date = raw.get("date")
    day = raw.get("day")
    if not isinstance(date, str) or not date or not isinstance(day, dict):
        logger.warning("Skipping forecast entry without date/day: %r", date)
        return None

    maxtemp_c = _number(day, "maxtemp_c", signed=True)
    mintemp_c = _number(day, "mintemp_c", signed=True)
    return ForecastDay(
        date=date,
        maxtemp_c=maxtemp_c,
        maxtemp_f=_companion(
            _number(day, "maxtemp_f", signed=True), maxtemp_c,
            units.celsius_to_fahrenheit,
        ),
        mintemp_c=mintemp_c,
        mintemp_f=_companion(
            _number(day, "mintemp_f", signed=True), mintemp_c,
            units.celsius_to_fahrenheit,
        ),
        condition_text=_condition_text(day),
        totalprecip_mm=_number(day, "totalprecip_mm"),
        uv=_number(day, "uv"),
    )


def _companion(value, source, convert):
    """Use the provider's second-unit value, else derive it from the first."""
    if value is not None:
        return value
    if source is None:
        return None
    return convert(source)


def _number(raw: dict, key: str, signed: bool = False) -> float | None:
    value = raw.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        if value is not None:
            logger.warning("Ignoring non-numeric %s=%r", key, value)
        return None
    if not signed and value < 0:
        logger.warning("Ignoring negative %s=%r", key, value)
        return None
    return float(value)


def _integer(raw: dict, key: str) -> int | None:
    value = _number(raw, key)
    if value is None:
        return None
    if not value.is_integer():
        logger.warning("Ignoring fractional %s=%r", key, value)
        return None
    return int(value)


def _text(raw: dict, key: str) -> str:
    value = raw.get(key)
    return value if isinstance(value, str) else ""


def _condition_text(raw: dict) -> str:
    condition = raw.get("condition")
    if isinstance(condition, dict):
        return _text(condition, "text")
    return ""
