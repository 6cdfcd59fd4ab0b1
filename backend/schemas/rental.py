from pydantic import BaseModel, Field


class AvailabilityRequest(BaseModel):
    car_id: int
    start_date: str
    end_date: str


class AvailabilityResponse(BaseModel):
    car_id: int
    is_available: bool
    message: str


class InquiryRequest(BaseModel):
    car_id: int
    customer_name: str = Field(..., min_length=1)
    customer_phone: str = Field(..., min_length=1)
    rental_start_date: str = Field(..., min_length=1)
    rental_end_date: str = Field(..., min_length=1)
    additional_message: str | None = None


class InquiryResponse(BaseModel):
    contact_url: str
    message: str
