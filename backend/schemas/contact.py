from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, EmailStr, Field, HttpUrl, TypeAdapter

_http_url = TypeAdapter(HttpUrl)


def _check_http_url(value: str) -> str:
    _http_url.validate_python(value)
    return value


NonEmpty = Annotated[str, Field(min_length=1)]
SocialUrl = Annotated[str, AfterValidator(_check_http_url)]


class ContactInfoResponse(BaseModel):
    id: int
    company_name: str
    phone: str
    email: str
    address: str
    whatsapp_number: str
    facebook_url: str | None
    instagram_url: str | None
    business_hours: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ContactInfoUpdate(BaseModel):
    company_name: NonEmpty | None = None
    phone: NonEmpty | None = None
    email: EmailStr | None = None
    address: NonEmpty | None = None
    whatsapp_number: NonEmpty | None = None
    facebook_url: SocialUrl | None = None
    instagram_url: SocialUrl | None = None
    business_hours: NonEmpty | None = None
