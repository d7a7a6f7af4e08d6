# rsvp_service/schemas/rsvp.py
from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum
from datetime import datetime


class RsvpResponse(str, Enum):
    yes = "Yes"
    maybe = "Maybe"
    no = "No"


class DeviceType(str, Enum):
    iphone = "iPhone"
    android = "Android"
    other = "Other"


class RsvpCreate(BaseModel):
    phone_number: str = Field(
        ...,
        min_length=10,
        max_length=10,
        pattern=r"^\d{10}$",
        json_schema_extra={"example": "5551234567"},
    )
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    response: RsvpResponse
    comment: Optional[str] = Field(None, max_length=500)
    device_type: DeviceType
    recaptcha_token: str = Field(..., min_length=1)


class Rsvp(BaseModel):
    id: str
    phone_number: str
    first_name: str
    last_name: str
    response: RsvpResponse
    comment: Optional[str] = None
    device_type: DeviceType
    wallet_pass_id: Optional[str] = None
    wallet_pass_url: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class WalletPass(BaseModel):
    pass_id: str
    pass_url: str
    qr_code_url: Optional[str] = None

    model_config = {"from_attributes": True}


class RsvpSubmissionResult(BaseModel):
    rsvp: Rsvp
    # Null for 'No' responses and whenever pass issuance failed
    wallet_pass: Optional[WalletPass] = None


class RsvpDisplay(BaseModel):
    """Public roster entry; the phone number and full last name stay private."""
    first_name: str
    last_name_initial: str
    comment: Optional[str] = None
