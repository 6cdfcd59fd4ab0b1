import logging
from datetime import date, datetime, time

from backend.db.models import Car
from backend.schemas.rental import AvailabilityRequest, AvailabilityResponse
from backend.services.rental_period import parse_rental_date, rental_days

logger = logging.getLogger(__name__)

MSG_INVALID_DATE = "Format tanggal tidak valid"
MSG_START_NOT_BEFORE_END = "Tanggal mulai harus sebelum tanggal selesai"
MSG_START_IN_PAST = "Tanggal mulai tidak boleh di masa lalu"
MSG_CAR_NOT_FOUND = "Mobil tidak ditemukan"
MSG_CAR_UNAVAILABLE = "Mobil sedang tidak tersedia untuk disewa"


def check_availability(
    car: Car | None,
    request: AvailabilityRequest,
    today: date | None = None,
) -> AvailabilityResponse:
    """Decide whether a car can be rented for the requested date range.

    Checks run in a fixed order and the first failure is reported: date
    format, start before end, start not in the past (today is allowed), car
    exists, car flagged available. There is no reservation ledger, so an
    available car with a sane range is always reported as rentable.
    """
    def unavailable(message: str) -> AvailabilityResponse:
        logger.debug(f"Car {request.car_id} not available: {message}")
        return AvailabilityResponse(car_id=request.car_id, is_available=False, message=message)

    start = parse_rental_date(request.start_date)
    end = parse_rental_date(request.end_date)
    if start is None or end is None:
        return unavailable(MSG_INVALID_DATE)

    if start >= end:
        return unavailable(MSG_START_NOT_BEFORE_END)

    # Day granularity against the local calendar day
    if start < datetime.combine(today or date.today(), time.min):
        return unavailable(MSG_START_IN_PAST)

    if car is None:
        return unavailable(MSG_CAR_NOT_FOUND)

    if not car.is_available:
        return unavailable(MSG_CAR_UNAVAILABLE)

    days = rental_days(start, end)
    return AvailabilityResponse(
        car_id=request.car_id,
        is_available=True,
        message=f"Mobil {car.name} tersedia untuk disewa selama {days} hari",
    )
