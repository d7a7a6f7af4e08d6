# rsvp_service/crud/crud_rsvp.py
"""
CRUD operations for RSVP records.

The database unique constraint on phone_number is what keeps one RSVP
per guest; concurrent duplicate inserts are resolved by the database and
surface here as DuplicatePhoneNumberError.
"""

from typing import Optional, List
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
import logging

from rsvp_service.core.logging import mask_phone
from rsvp_service.models.rsvp import Rsvp
from rsvp_service.schemas.rsvp import RsvpCreate

logger = logging.getLogger(__name__)


class DuplicatePhoneNumberError(Exception):
    """An RSVP already exists for this phone number."""

    def __init__(self, phone_number: str):
        self.phone_number = phone_number
        super().__init__(f"An RSVP already exists for phone number {mask_phone(phone_number)}")


class RsvpNotFoundError(Exception):
    """The RSVP targeted by an update does not exist."""

    def __init__(self, rsvp_id: str):
        self.rsvp_id = rsvp_id
        super().__init__(f"RSVP {rsvp_id} not found")


class CRUDRsvp:
    """CRUD operations for RSVP records."""

    def get(self, db: Session, id: str) -> Optional[Rsvp]:
        return db.query(Rsvp).filter(Rsvp.id == id).first()

    def get_by_phone(self, db: Session, *, phone_number: str) -> Optional[Rsvp]:
        """Look up the RSVP for a phone number."""
        return db.query(Rsvp).filter(Rsvp.phone_number == phone_number).first()

    def get_multi(
        self, db: Session, *, skip: int = 0, limit: Optional[int] = None
    ) -> List[Rsvp]:
        """All RSVPs, oldest first. No limit unless one is given."""
        query = (
            db.query(Rsvp)
            .order_by(Rsvp.created_at.asc(), Rsvp.id.asc())
            .offset(skip)
        )
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def create(self, db: Session, *, obj_in: RsvpCreate) -> Rsvp:
        """
        Insert a new RSVP with no wallet pass attached.

        Raises:
            DuplicatePhoneNumberError: If the phone number already has an RSVP
        """
        db_obj = Rsvp(
            phone_number=obj_in.phone_number,
            first_name=obj_in.first_name,
            last_name=obj_in.last_name,
            response=obj_in.response.value,
            comment=obj_in.comment,
            device_type=obj_in.device_type.value,
            wallet_pass_id=None,
            wallet_pass_url=None,
        )
        db.add(db_obj)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            # Only the phone number is unique; anything else is a real fault.
            if self.get_by_phone(db, phone_number=obj_in.phone_number) is not None:
                logger.info(
                    f"Rejected duplicate RSVP for {mask_phone(obj_in.phone_number)}"
                )
                raise DuplicatePhoneNumberError(obj_in.phone_number)
            raise
        db.refresh(db_obj)

        logger.info(f"RSVP {db_obj.id} created ({db_obj.response})")
        return db_obj

    def attach_pass(
        self,
        db: Session,
        *,
        rsvp_id: str,
        pass_id: str,
        pass_url: str,
    ) -> Rsvp:
        """
        Record the wallet pass issued for an RSVP.

        Both pass columns are written together. Calling again overwrites
        the previous values.

        Raises:
            RsvpNotFoundError: If no RSVP has this id
        """
        db_obj = self.get(db, id=rsvp_id)
        if db_obj is None:
            raise RsvpNotFoundError(rsvp_id)

        db_obj.wallet_pass_id = pass_id
        db_obj.wallet_pass_url = pass_url
        try:
            db.commit()
        except SQLAlchemyError as e:
            logger.error(
                f"Failed to attach wallet pass to RSVP {rsvp_id}: {str(e)}",
                exc_info=True,
                extra={"rsvp_id": rsvp_id, "pass_id": pass_id},
            )
            db.rollback()
            raise
        db.refresh(db_obj)

        logger.info(f"Wallet pass {pass_id} attached to RSVP {rsvp_id}")
        return db_obj


# Singleton instance
rsvp = CRUDRsvp()
