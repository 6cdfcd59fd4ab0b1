import logging
from datetime import datetime, timezone
from decimal import Decimal
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from backend.db.models import Car, ContactInfo
from backend.schemas.car import CarCreate, CarUpdate, CarFilter
from backend.schemas.contact import ContactInfoUpdate
from backend.config import settings

logger = logging.getLogger(__name__)

# Columns a patch may explicitly set to NULL; None for any other field means "leave as is"
CAR_NULLABLE_FIELDS = {"description", "features"}
CONTACT_NULLABLE_FIELDS = {"facebook_url", "instagram_url"}


def _patch_values(data, nullable: set[str]) -> dict:
    values = {}
    for key, value in data.model_dump(exclude_unset=True).items():
        if value is None and key not in nullable:
            continue
        values[key] = value
    return values


# --- Cars ---

async def get_cars(db: AsyncSession, filters: CarFilter | None = None) -> list[Car]:
    query = select(Car)

    if filters:
        if filters.brand:
            query = query.where(Car.brand == filters.brand)
        if filters.transmission:
            query = query.where(Car.transmission == filters.transmission)
        if filters.fuel_type:
            query = query.where(Car.fuel_type == filters.fuel_type)
        if filters.min_price is not None:
            query = query.where(Car.rental_price_per_day >= Decimal(str(filters.min_price)))
        if filters.max_price is not None:
            query = query.where(Car.rental_price_per_day <= Decimal(str(filters.max_price)))
        if filters.min_seats is not None:
            query = query.where(Car.seats >= filters.min_seats)
        if filters.max_seats is not None:
            query = query.where(Car.seats <= filters.max_seats)
        if filters.is_available is not None:
            query = query.where(Car.is_available == filters.is_available)

    result = await db.execute(query.order_by(Car.created_at.desc(), Car.id.desc()))
    return list(result.scalars().all())


async def get_car_by_id(db: AsyncSession, car_id: int) -> Car | None:
    return await db.get(Car, car_id)


async def create_car(db: AsyncSession, data: CarCreate) -> Car:
    car = Car(**data.model_dump())
    db.add(car)
    await db.commit()
    await db.refresh(car)
    logger.info(f"Created car {car.id} ({car.brand} {car.model})")
    return car


async def update_car(db: AsyncSession, car_id: int, data: CarUpdate) -> Car | None:
    car = await db.get(Car, car_id)
    if not car:
        return None
    for key, value in _patch_values(data, CAR_NULLABLE_FIELDS).items():
        setattr(car, key, value)
    car.updated_at = datetime.now(timezone.utc)
    await db.commit()
    await db.refresh(car)
    logger.info(f"Updated car {car_id}")
    return car


async def delete_car(db: AsyncSession, car_id: int) -> bool:
    car = await db.get(Car, car_id)
    if not car:
        return False
    await db.delete(car)
    await db.commit()
    logger.info(f"Deleted car {car_id}")
    return True


async def get_car_brands(db: AsyncSession) -> list[str]:
    result = await db.execute(select(Car.brand).distinct().order_by(Car.brand))
    return list(result.scalars().all())


# --- Contact info ---

async def get_contact_info(db: AsyncSession) -> ContactInfo | None:
    """Return the default contact record: the one with the lowest id."""
    result = await db.execute(select(ContactInfo).order_by(ContactInfo.id).limit(1))
    return result.scalar_one_or_none()


async def update_contact_info(db: AsyncSession, contact_id: int, data: ContactInfoUpdate) -> ContactInfo | None:
    contact = await db.get(ContactInfo, contact_id)
    if not contact:
        return None
    for key, value in _patch_values(data, CONTACT_NULLABLE_FIELDS).items():
        setattr(contact, key, value)
    contact.updated_at = datetime.now(timezone.utc)
    await db.commit()
    await db.refresh(contact)
    logger.info(f"Updated contact info {contact_id}")
    return contact


async def seed_contact_info(db: AsyncSession):
    if not settings.SEED_CONTACT_INFO:
        return
    count = await db.scalar(select(func.count()).select_from(ContactInfo))
    if count:
        return
    db.add(ContactInfo(
        company_name=settings.DEFAULT_CONTACT_COMPANY_NAME,
        phone=settings.DEFAULT_CONTACT_PHONE,
        email=settings.DEFAULT_CONTACT_EMAIL,
        address=settings.DEFAULT_CONTACT_ADDRESS,
        whatsapp_number=settings.DEFAULT_CONTACT_WHATSAPP,
        business_hours=settings.DEFAULT_CONTACT_BUSINESS_HOURS,
    ))
    await db.commit()
    logger.info("Seeded default contact info")
