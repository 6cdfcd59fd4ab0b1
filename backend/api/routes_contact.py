from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from backend.db.database import get_db
from backend.db.crud import get_contact_info, update_contact_info
from backend.schemas.contact import ContactInfoResponse, ContactInfoUpdate

router = APIRouter(prefix="/api/v1/contact", tags=["contact"])


@router.get("", response_model=ContactInfoResponse | None)
async def get_contact(db: AsyncSession = Depends(get_db)):
    # No contact configured yet is a valid state, returned as null
    return await get_contact_info(db)


@router.patch("/{contact_id}", response_model=ContactInfoResponse)
async def update_contact(contact_id: int, request: ContactInfoUpdate, db: AsyncSession = Depends(get_db)):
    contact = await update_contact_info(db, contact_id, request)
    if not contact:
        raise HTTPException(status_code=404, detail="Contact information not found")
    return contact
