# rsvp_service/api/v1/endpoints/rsvps.py
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session

from rsvp_service.api import deps
from rsvp_service.crud import crud_rsvp
from rsvp_service.schemas.rsvp import Rsvp, RsvpCreate, RsvpSubmissionResult
from rsvp_service.services.rsvp import (
    RsvpSubmissionService,
    VerificationFailedError,
    DuplicateSubmissionError,
)

router = APIRouter(tags=["RSVPs"])


@router.post(
    "/rsvps",
    response_model=RsvpSubmissionResult,
    status_code=status.HTTP_201_CREATED,
)
async def create_rsvp(
    rsvp_in: RsvpCreate,
    service: RsvpSubmissionService = Depends(deps.get_submission_service),
):
    """
    Submit an RSVP.

    Guests answering Yes or Maybe also get a wallet pass for their device.
    If the pass cannot be issued the RSVP is still saved and `wallet_pass`
    is null.
    """
    try:
        return await service.submit(rsvp_in)
    except VerificationFailedError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except DuplicateSubmissionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)


@router.get("/rsvps/{phone_number}", response_model=Optional[Rsvp])
def get_rsvp_by_phone(
    phone_number: str = Path(..., pattern=r"^\d{10}$"),
    db: Session = Depends(deps.get_db),
):
    """
    Look up the RSVP for a phone number. Returns null if the guest has not responded.
    """
    return crud_rsvp.rsvp.get_by_phone(db, phone_number=phone_number)
