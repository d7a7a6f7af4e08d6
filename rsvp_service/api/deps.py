# rsvp_service/api/deps.py
from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session

from rsvp_service.db.session import SessionLocal
from rsvp_service.services.rsvp import RsvpSubmissionService
from rsvp_service.services.verification import (
    TokenVerifierInterface,
    get_token_verifier,
)
from rsvp_service.services.wallet import PassIssuerInterface, get_pass_issuer


def get_db() -> Generator:
    """Dependency to get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_submission_service(
    db: Session = Depends(get_db),
    token_verifier: TokenVerifierInterface = Depends(get_token_verifier),
    pass_issuer: PassIssuerInterface = Depends(get_pass_issuer),
) -> RsvpSubmissionService:
    """Wire a submission service for the current request."""
    return RsvpSubmissionService(
        db, token_verifier=token_verifier, pass_issuer=pass_issuer
    )
