"""Output formatters for weather reports."""

import json

from weathercli.models.weather import Report
from weathercli.units import round_display

RULE = "<>" + "-" * 70 + "<>"
NOT_AVAILABLE = "n/a"
UNAVAILABLE = "unavailable"
UNKNOWN_DIRECTION = "❓"

WIND_ARROWS: dict[str, str] = {
    "N": "⬆",
    "NNE": "↗",
    "NE": "↗",
    "ENE": "➡",
    "E": "➡",
    "ESE": "↘",
    "SE": "↘",
    "SSE": "⬇",
    "S": "⬇",
    "SSW": "↙",
    "SW": "↙",
    "WSW": "⬅",
    "W": "⬅",
    "WNW": "↖",
    "NW": "↖",
    "NNW": "⬆",
}


def wind_arrow(direction: str) -> str:
    return WIND_ARROWS.get(direction.strip().upper(), UNKNOWN_DIRECTION)


def _num(value: float | None) -> str:
    return NOT_AVAILABLE if value is None else f"{round_display(value):.1f}"


def _int(value: int | None) -> str:
    return NOT_AVAILABLE if value is None else str(value)


def format_report_text(r: Report) -> str:
    """Fixed-layout terminal report."""
    loc, cur = r.location, r.current
    lines = [
        RULE,
        f"{loc.name} ({loc.region}, {loc.country})",
        f"Local Time: {loc.localtime}",
        "",
        f"{cur.condition_text} | {_num(cur.temp_c)}°C / {_num(cur.temp_f)}°F"
        f"\tUV: {_num(cur.uv)}",
        "",
        f"Feels like: {_num(cur.feelslike_c)}°C / {_num(cur.feelslike_f)}°F"
        f"\tHumidity: {_int(cur.humidity)}%\tPrecip: {_num(cur.precip_mm)} mm",
        f"Wind: {wind_arrow(cur.wind_dir)} {_num(cur.wind_kph)}kph / "
        f"{_num(cur.wind_mph)}mph \tDew Point: {_num(cur.dewpoint_c)}°C / "
        f"{_num(cur.dewpoint_f)}°F",
    ]

    if r.has_air_quality:
        aq = r.air_quality
        lines.append(
            f"AQI: {aq.category}\tPM2.5: {_num(aq.pm2_5)} μg/m³"
            f"\tPM10: {_num(aq.pm10)} μg/m³"
        )
    else:
        lines.append(
            f"AQI: {UNAVAILABLE}\tPM2.5: {UNAVAILABLE}"
            f"\tPM10: {UNAVAILABLE}"
        )

    lines.append("")
    lines.append("▶ Forecast:")
    if not r.forecast:
        lines.append(f"  - {UNAVAILABLE}")
    for day in r.forecast:
        lines.append(
            f"  - {day.date}: {_num(day.maxtemp_c)}°C / {_num(day.maxtemp_f)}°F, "
            f"{day.condition_text} (Precip: {_num(day.totalprecip_mm)} mm, "
            f"UV: {_num(day.uv)})"
        )
    lines.append(RULE)
    return "\n".join(lines)


def format_report_json(r: Report) -> str:
    """JSON report for programmatic consumption."""
    if r.has_air_quality:
        aq = r.air_quality
        air_quality = {
            "available": True,
            "category": aq.category,
            "us_epa_index": aq.us_epa_index,
            "gb_defra_index": aq.gb_defra_index,
            "pm2_5": aq.pm2_5,
            "pm10": aq.pm10,
            "co": aq.co,
            "no2": aq.no2,
            "o3": aq.o3,
            "so2": aq.so2,
        }
    else:
        air_quality = {"available": False, "reason": r.air_quality.reason}

    cur = r.current
    data = {
        "location": {
            "name": r.location.name,
            "region": r.location.region,
            "country": r.location.country,
            "localtime": r.location.localtime,
            "lat": r.location.lat,
            "lon": r.location.lon,
            "tz_id": r.location.tz_id,
        },
        "current": {
            "condition": cur.condition_text,
            "temp_c": cur.temp_c,
            "temp_f": cur.temp_f,
            "feelslike_c": cur.feelslike_c,
            "feelslike_f": cur.feelslike_f,
            "uv": cur.uv,
            "humidity": cur.humidity,
            "precip_mm": cur.precip_mm,
            "wind_kph": cur.wind_kph,
            "wind_mph": cur.wind_mph,
            "wind_dir": cur.wind_dir,
            "wind_degree": cur.wind_degree,
            "dewpoint_c": cur.dewpoint_c,
            "dewpoint_f": cur.dewpoint_f,
        },
        "air_quality": air_quality,
        "forecast": [
            {
                "date": d.date,
                "maxtemp_c": d.maxtemp_c,
                "maxtemp_f": d.maxtemp_f,
                "mintemp_c": d.mintemp_c,
                "mintemp_f": d.mintemp_f,
                "condition": d.condition_text,
                "totalprecip_mm": d.totalprecip_mm,
                "uv": d.uv,
            }
            for d in r.forecast
        ],
    }
    return json.dumps(data, indent=2, ensure_ascii=False)
