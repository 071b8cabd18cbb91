"""Unit conversions used when the provider omits a companion value."""

KM_PER_MILE = 1.609344
MM_PER_INCH = 25.4

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    return (fahrenheit - 32) * 5 / 9


def kph_to_mph(kph: float) -> float:
    return kph / KM_PER_MILE


def mph_to_kph(mph: float) -> float:
    return mph * KM_PER_MILE


def precip_mm(mm: float) -> float:
    """Precipitation is stored and shown in millimetres as received."""
    return mm


def inches_to_mm(inches: float) -> float:
    return inches * MM_PER_INCH


def compass_point(degrees: float) -> str:
    """Map a bearing in degrees to the nearest of the 16 compass points."""
    index = int((degrees % 360) / 22.5 + 0.5) % 16
    return COMPASS_POINTS[index]


def round_display(value: float) -> float:
    """Round to the single decimal place used on screen; -0.0 becomes 0.0."""
    rounded = round(value, 1)
    if rounded == 0:
        return 0.0
    return rounded
