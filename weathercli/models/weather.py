"""WeatherAPI report models."""

from dataclasses import dataclass

US_EPA_INDEX_LABELS: dict[int, str] = {
    1: "Good",
    2: "Moderate",
    3: "Unhealthy for sensitive group",
    4: "Unhealthy",
    5: "Very Unhealthy",
    6: "Hazardous",
}

UNKNOWN_CATEGORY = "Unknown"


def epa_category(index: int | None) -> str:
    """Label for a US EPA index; anything outside 1-6 is Unknown."""
    if index is None or isinstance(index, bool):
        return UNKNOWN_CATEGORY
    return US_EPA_INDEX_LABELS.get(index, UNKNOWN_CATEGORY)


@dataclass(frozen=True)
class Location:
    name: str
    region: str
    country: str
    localtime: str
    lat: float | None = None
    lon: float | None = None
    tz_id: str = ""


@dataclass(frozen=True)
class CurrentConditions:
    condition_text: str
    temp_c: float
    temp_f: float
    feelslike_c: float | None
    feelslike_f: float | None
    uv: float | None
    humidity: int | None  # percent
    precip_mm: float | None
    wind_kph: float | None
    wind_mph: float | None
    wind_dir: str
    dewpoint_c: float | None
    dewpoint_f: float | None
    wind_degree: int | None = None


@dataclass(frozen=True)
class AirQuality:
    us_epa_index: int | None
    pm2_5: float | None
    pm10: float | None
    gb_defra_index: int | None = None
    co: float | None = None
    no2: float | None = None
    o3: float | None = None
    so2: float | None = None

    @property
    def category(self) -> str:
        return epa_category(self.us_epa_index)


@dataclass(frozen=True)
class AirQualityUnavailable:
    """Stands in for the air-quality block when the provider did not send one."""

    reason: str = "not provided"


@dataclass(frozen=True)
class ForecastDay:
    date: str  # YYYY-MM-DD
    maxtemp_c: float | None
    maxtemp_f: float | None
    mintemp_c: float | None
    mintemp_f: float | None
    condition_text: str
    totalprecip_mm: float | None
    uv: float | None


@dataclass(frozen=True)
class Report:
    location: Location
    current: CurrentConditions
    air_quality: AirQuality | AirQualityUnavailable
    forecast: tuple[ForecastDay, ...]

    @property
    def has_air_quality(self) -> bool:
        return isinstance(self.air_quality, AirQuality)
