from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from backend.config import settings
from backend.db.database import get_db
from backend.db.crud import get_car_by_id, get_contact_info
from backend.schemas.rental import AvailabilityRequest, AvailabilityResponse, InquiryRequest, InquiryResponse
from backend.services.availability import check_availability
from backend.services.inquiry import compose_inquiry, InvalidRentalPeriodError

router = APIRouter(prefix="/api/v1/rentals", tags=["rentals"])


@router.post("/check-availability", response_model=AvailabilityResponse)
async def check_car_availability(request: AvailabilityRequest, db: AsyncSession = Depends(get_db)):
    car = await get_car_by_id(db, request.car_id)
    return check_availability(car, request)


@router.post("/inquiry-message", response_model=InquiryResponse)
async def generate_inquiry_message(request: InquiryRequest, db: AsyncSession = Depends(get_db)):
    car = await get_car_by_id(db, request.car_id)
    contact = await get_contact_info(db)
    try:
        return compose_inquiry(car, contact, request, base_url=settings.WHATSAPP_BASE_URL)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidRentalPeriodError as e:
        raise HTTPException(status_code=422, detail=str(e))
