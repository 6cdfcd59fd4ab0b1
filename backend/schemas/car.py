import json
from datetime import date, datetime
from decimal import Decimal
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, HttpUrl, TypeAdapter

from backend.db.models import Transmission, FuelType

_http_url = TypeAdapter(HttpUrl)


def _check_http_url(value: str) -> str:
    _http_url.validate_python(value)
    return value


def _check_year(value: int) -> int:
    max_year = date.today().year + 1
    if not 1900 <= value <= max_year:
        raise ValueError(f"year must be between 1900 and {max_year}")
    return value


def _check_features(value: str) -> str:
    """Features are stored as a JSON array of strings."""
    try:
        parsed = json.loads(value)
    except ValueError:
        raise ValueError("features must be a JSON array of strings") from None
    if not isinstance(parsed, list) or not all(isinstance(f, str) for f in parsed):
        raise ValueError("features must be a JSON array of strings")
    return value


NonEmpty = Annotated[str, Field(min_length=1)]
Year = Annotated[int, AfterValidator(_check_year)]
ImageUrl = Annotated[str, AfterValidator(_check_http_url)]
Price = Annotated[Decimal, Field(gt=0, max_digits=10, decimal_places=2)]
Seats = Annotated[int, Field(ge=1, le=20)]
Features = Annotated[str, AfterValidator(_check_features)]


class CarCreate(BaseModel):
    name: NonEmpty
    brand: NonEmpty
    model: NonEmpty
    year: Year
    image_url: ImageUrl
    rental_price_per_day: Price
    transmission: Transmission
    fuel_type: FuelType
    seats: Seats
    description: str | None = None
    features: Features | None = None
    is_available: bool = True


class CarUpdate(BaseModel):
    name: NonEmpty | None = None
    brand: NonEmpty | None = None
    model: NonEmpty | None = None
    year: Year | None = None
    image_url: ImageUrl | None = None
    rental_price_per_day: Price | None = None
    transmission: Transmission | None = None
    fuel_type: FuelType | None = None
    seats: Seats | None = None
    description: str | None = None
    features: Features | None = None
    is_available: bool | None = None


class CarFilter(BaseModel):
    brand: str | None = None
    transmission: Transmission | None = None
    fuel_type: FuelType | None = None
    min_price: float | None = None
    max_price: float | None = None
    min_seats: int | None = None
    max_seats: int | None = None
    is_available: bool | None = None


class CarResponse(BaseModel):
    id: int
    name: str
    brand: str
    model: str
    year: int
    image_url: str
    rental_price_per_day: float
    transmission: Transmission
    fuel_type: FuelType
    seats: int
    description: str | None
    features: str | None
    is_available: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CarDeleteResponse(BaseModel):
    deleted: bool
