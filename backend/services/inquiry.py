import logging
from decimal import Decimal
from urllib.parse import quote

from backend.db.models import Car, ContactInfo
from backend.schemas.rental import InquiryRequest, InquiryResponse
from backend.services.formatting import (
    format_fuel_type, format_indonesian_date, format_rupiah,
    format_transmission, normalize_whatsapp_number,
)
from backend.services.rental_period import parse_rental_date, rental_days

logger = logging.getLogger(__name__)

WHATSAPP_BASE_URL = "https://wa.me"

# Characters left unescaped in the message query parameter, besides letters, digits and "_.-~"
_URL_SAFE = "!*'()"


class InquiryError(Exception):
    pass


class CarNotFoundError(InquiryError, LookupError):
    def __init__(self, car_id: int):
        self.car_id = car_id
        super().__init__(f"Car with ID {car_id} not found")


class ContactInfoNotFoundError(InquiryError, LookupError):
    def __init__(self):
        super().__init__("Contact information not found")


class InvalidRentalPeriodError(InquiryError, ValueError):
    pass


def _render_message(
    car: Car,
    contact: ContactInfo,
    request: InquiryRequest,
    start,
    end,
    duration: int,
    total_price: Decimal,
) -> str:
    notes = ""
    if request.additional_message:
        notes = f"📝 *Catatan Tambahan:*\n{request.additional_message}\n\n"

    return (
        f"Halo {contact.company_name}! 👋\n"
        "\n"
        "Saya tertarik untuk menyewa mobil dengan detail sebagai berikut:\n"
        "\n"
        "👤 *Data Penyewa:*\n"
        f"• Nama: {request.customer_name}\n"
        f"• No. HP: {request.customer_phone}\n"
        "\n"
        "🚗 *Detail Mobil:*\n"
        f"• Mobil: {car.name}\n"
        f"• Merek: {car.brand} {car.model}\n"
        f"• Tahun: {car.year}\n"
        f"• Transmisi: {format_transmission(car.transmission)}\n"
        f"• Bahan Bakar: {format_fuel_type(car.fuel_type)}\n"
        f"• Kapasitas: {car.seats} kursi\n"
        "\n"
        "📅 *Jadwal Sewa:*\n"
        f"• Tanggal Mulai: {format_indonesian_date(start)}\n"
        f"• Tanggal Selesai: {format_indonesian_date(end)}\n"
        f"• Durasi: {duration} hari\n"
        "\n"
        "💰 *Estimasi Biaya:*\n"
        f"• Harga per hari: {format_rupiah(car.rental_price_per_day)}\n"
        f"• Total estimasi: {format_rupiah(total_price)} ({duration} hari)\n"
        "\n"
        f"{notes}"
        "Mohon informasi lebih lanjut mengenai ketersediaan mobil dan prosedur penyewaan. "
        "Terima kasih! 🙏"
    )


def build_whatsapp_url(number: str, message: str, base_url: str = WHATSAPP_BASE_URL) -> str:
    return f"{base_url.rstrip('/')}/{number}?text={quote(message, safe=_URL_SAFE)}"


def compose_inquiry(
    car: Car | None,
    contact: ContactInfo | None,
    request: InquiryRequest,
    base_url: str = WHATSAPP_BASE_URL,
) -> InquiryResponse:
    """Build the rental inquiry message and a WhatsApp deep link to the business.

    Raises CarNotFoundError or ContactInfoNotFoundError when a record is
    missing, and InvalidRentalPeriodError when the dates cannot be parsed or
    the end is not after the start. Nothing is returned partially.
    """
    if car is None:
        raise CarNotFoundError(request.car_id)
    if contact is None:
        raise ContactInfoNotFoundError()

    start = parse_rental_date(request.rental_start_date)
    end = parse_rental_date(request.rental_end_date)
    if start is None or end is None:
        raise InvalidRentalPeriodError("Invalid rental date format")
    duration = rental_days(start, end)
    if duration <= 0:
        raise InvalidRentalPeriodError("Rental end date must be after the start date")

    price_per_day = Decimal(str(car.rental_price_per_day))
    total_price = price_per_day * duration

    message = _render_message(car, contact, request, start, end, duration, total_price)
    number = normalize_whatsapp_number(contact.whatsapp_number)
    logger.info(f"Composed inquiry for car {car.id}: {duration} days, total {total_price}")

    return InquiryResponse(
        contact_url=build_whatsapp_url(number, message, base_url),
        message=message,
    )
