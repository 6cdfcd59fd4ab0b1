import enum
from datetime import datetime, timezone
from sqlalchemy import (
    Column, Integer, String, Numeric, DateTime, Text, Boolean, Enum, Index
)
from backend.db.database import Base


class Transmission(str, enum.Enum):
    MANUAL = "manual"
    AUTOMATIC = "automatic"


class FuelType(str, enum.Enum):
    GASOLINE = "gasoline"
    DIESEL = "diesel"
    ELECTRIC = "electric"
    HYBRID = "hybrid"


def _enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Car(Base):
    __tablename__ = "cars"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    brand = Column(Text, nullable=False)
    model = Column(Text, nullable=False)
    year = Column(Integer, nullable=False)
    image_url = Column(Text, nullable=False)
    rental_price_per_day = Column(Numeric(10, 2), nullable=False)
    transmission = Column(
        Enum(Transmission, name="transmission", values_callable=_enum_values),
        nullable=False,
    )
    fuel_type = Column(
        Enum(FuelType, name="fuel_type", values_callable=_enum_values),
        nullable=False,
    )
    seats = Column(Integer, nullable=False)
    description = Column(Text)
    features = Column(Text)  # JSON array of feature strings
    is_available = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    __table_args__ = (
        Index("ix_cars_brand", "brand"),
        Index("ix_cars_is_available", "is_available"),
    )


class ContactInfo(Base):
    __tablename__ = "contact_info"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_name = Column(Text, nullable=False)
    phone = Column(String(50), nullable=False)
    email = Column(String(320), nullable=False)
    address = Column(Text, nullable=False)
    whatsapp_number = Column(String(50), nullable=False)
    facebook_url = Column(String(1000))
    instagram_url = Column(String(1000))
    business_hours = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
