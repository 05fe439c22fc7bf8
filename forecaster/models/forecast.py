"""OpenWeatherMap 5-day / 3-hour forecast models (API version 2.5)."""

from pydantic import BaseModel, ConfigDict, Field

# Unknown keys are ignored: the API adds fields over time.
_WIRE = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Coord(BaseModel):
    model_config = _WIRE

    lat: float
    lon: float


class City(BaseModel):
    model_config = _WIRE

    id: int
    name: str
    coord: Coord
    country: str
    population: int
    timezone: int  # offset from UTC in seconds
    sunrise: int
    sunset: int


class Main(BaseModel):
    model_config = _WIRE

    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: int
    sea_level: int
    grnd_level: int
    humidity: int
    temp_kf: float


class WeatherCondition(BaseModel):
    model_config = _WIRE

    id: int
    main: str
    description: str
    icon: str


class Clouds(BaseModel):
    model_config = _WIRE

    all: int


class Wind(BaseModel):
    model_config = _WIRE

    speed: float
    deg: int
    gust: float


class Rain(BaseModel):
    model_config = _WIRE

    three_hours: float = Field(alias="3h")


class Sys(BaseModel):
    model_config = _WIRE

    pod: str  # "d" or "n"


class ForecastEntry(BaseModel):
    model_config = _WIRE

    dt: int
    main: Main
    weather: list[WeatherCondition]
    clouds: Clouds
    wind: Wind
    visibility: int
    pop: float
    rain: Rain | None = None
    sys: Sys
    dt_txt: str


class ForecastResponse(BaseModel):
    """Top-level forecast document.

    ``cnt`` is reported by the API and is not checked against ``len(list)``.
    """

    model_config = _WIRE

    cod: str
    message: float
    cnt: int
    list: list[ForecastEntry]
    city: City


def decode_forecast(body: bytes | str) -> ForecastResponse:
    """Parse and validate a forecast JSON document.

    Raises pydantic.ValidationError on malformed JSON, a missing required
    field or a value of the wrong type.
    """
    return ForecastResponse.model_validate_json(body)


def encode_forecast(response: ForecastResponse) -> str:
    """Serialize back to the wire shape, omitting ``rain`` where absent."""
    return response.model_dump_json(by_alias=True, exclude_none=True)
