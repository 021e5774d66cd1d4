"""Weather report models."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

DAY_DATE_CAPACITY = 11  # "YYYY-MM-DD" plus terminator


def _from_epoch_ms(value: int) -> datetime | None:
    if not value:
        return None
    return datetime.fromtimestamp(value / 1000, tz=UTC)


class CurrentWeather(BaseModel):
    """Current conditions at the queried location."""

    model_config = ConfigDict(frozen=True)

    time: int = 0
    icon: int = 0
    icon_v2: int = 0
    temperature: float = 0.0

    @property
    def observed_at(self) -> datetime | None:
        """Observation time as an aware datetime, or None if unset."""
        return _from_epoch_ms(self.time)


class ForecastEntry(BaseModel):
    """One forecast day."""

    model_config = ConfigDict(frozen=True)

    day_date: str = Field(default="", max_length=DAY_DATE_CAPACITY - 1)
    icon_day: int = 0
    icon_day_v2: int = 0
    temperature_max: float = 0.0
    temperature_min: float = 0.0
    precipitation: float = 0.0
    precipitation_min: float = 0.0
    precipitation_max: float = 0.0


class WeatherGraph(BaseModel):
    """Time series starting at ``start`` (10 min / 1 h steps) and
    ``start_low_resolution`` (3 h steps).

    Only ``precipitation10m`` is materialized. To expose another validated
    series, add a list field here, clear it in ``release`` and add one
    extraction call in ``meteoswiss._extract``.
    """

    start: int = 0
    start_low_resolution: int = 0
    precipitation10m: list[float] = Field(default_factory=list)

    @property
    def precipitation10m_count(self) -> int:
        return len(self.precipitation10m)

    @property
    def start_datetime(self) -> datetime | None:
        return _from_epoch_ms(self.start)

    def release(self) -> None:
        """Drop every owned series."""
        self.precipitation10m = []


class WeatherReport(BaseModel):
    """Full plzDetail result: current weather, forecast days and graph.

    Usage:
        report = meteoswiss.query(1201)
        print(report.current_weather.temperature)
        report.release()

        # Or release on exit:
        with meteoswiss.query(8001) as report:
            days = report.forecast
    """

    current_weather: CurrentWeather = Field(default_factory=CurrentWeather)
    forecast: list[ForecastEntry] = Field(default_factory=list)
    graph: WeatherGraph = Field(default_factory=WeatherGraph)

    def __enter__(self) -> WeatherReport:
        return self

    def __exit__(self, *args: object) -> None:
        self.release()

    @property
    def forecast_count(self) -> int:
        return len(self.forecast)

    def release(self) -> None:
        """Drop the forecast and all graph series. Safe to call repeatedly."""
        self.forecast = []
        self.graph.release()
