# rsvp_service/api/v1/endpoints/public.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from rsvp_service.api import deps
from rsvp_service.crud import crud_rsvp
from rsvp_service.models.rsvp import Rsvp
from rsvp_service.schemas.rsvp import RsvpDisplay

router = APIRouter(tags=["Public"])


def to_display(rsvp: Rsvp) -> RsvpDisplay:
    """Project an RSVP for the public roster: first name, last initial, comment."""
    last_name = (rsvp.last_name or "").strip()
    initial = f"{last_name[0].upper()}." if last_name else ""
    return RsvpDisplay(
        first_name=rsvp.first_name,
        last_name_initial=initial,
        comment=rsvp.comment,
    )


@router.get("/public/rsvps", response_model=List[RsvpDisplay])
def list_public_rsvps(db: Session = Depends(deps.get_db)):
    """
    The public roster of everyone who has responded.
    """
    return [to_display(rsvp) for rsvp in crud_rsvp.rsvp.get_multi(db)]
