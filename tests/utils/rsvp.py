from sqlalchemy.orm import Session

from rsvp_service.crud import crud_rsvp
from rsvp_service.models.rsvp import Rsvp
from rsvp_service.schemas.rsvp import RsvpCreate


def make_rsvp_in(**overrides) -> RsvpCreate:
    """
    Builds a valid RSVP submission; any field can be overridden.
    """
    data = {
        "phone_number": "5551234567",
        "first_name": "Ann",
        "last_name": "Lee",
        "response": "Yes",
        "comment": None,
        "device_type": "Android",
        "recaptcha_token": "ok",
    }
    data.update(overrides)
    return RsvpCreate(**data)


def create_rsvp(db: Session, **overrides) -> Rsvp:
    """
    Inserts an RSVP straight through the store, bypassing the submission workflow.
    """
    return crud_rsvp.rsvp.create(db, obj_in=make_rsvp_in(**overrides))
