# rsvp_service/services/rsvp/submission_service.py
"""
RSVP submission workflow.

Gate on the human-submission token, persist the response, then issue a
wallet pass for guests who may attend. Only the gate (token, duplicate
phone number) can fail the submission; once the RSVP row is committed,
wallet pass problems are logged and the guest still gets a success.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from rsvp_service.constants.rsvp import (
    EVENT_DATE,
    EVENT_TIME,
    EVENT_LOCATION,
    RsvpResponseValue,
)
from rsvp_service.core.logging import mask_phone
from rsvp_service.crud import crud_rsvp
from rsvp_service.models.rsvp import Rsvp
from rsvp_service.schemas.rsvp import (
    DeviceType,
    RsvpCreate,
    RsvpSubmissionResult,
    Rsvp as RsvpSchema,
    WalletPass,
)
from rsvp_service.services.verification import TokenVerifierInterface
from rsvp_service.services.wallet import (
    PassIssuerInterface,
    PassReference,
    WalletPassData,
    IssuanceError,
)

logger = logging.getLogger(__name__)


class SubmissionState(str, Enum):
    VERIFYING = "verifying"
    PERSISTING = "persisting"
    ISSUING_PASS = "issuing_pass"
    FINALIZED = "finalized"
    REJECTED = "rejected"


@dataclass
class EventDetails:
    """Event metadata printed on wallet passes."""
    date: str = EVENT_DATE
    time: str = EVENT_TIME
    location: str = EVENT_LOCATION


class RsvpSubmissionError(Exception):
    """Base class for submissions rejected at the gate."""

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(message)


class VerificationFailedError(RsvpSubmissionError):
    def __init__(self):
        super().__init__("verification_failed", "reCAPTCHA verification failed")


class DuplicateSubmissionError(RsvpSubmissionError):
    def __init__(self, phone_number: str):
        self.phone_number = phone_number
        super().__init__(
            "duplicate_submission",
            "An RSVP has already been submitted for this phone number.",
        )


class RsvpSubmissionService:
    """
    Orchestrates a single RSVP submission.

    The token verifier and pass issuer are injected so the transport layer
    (and tests) can choose the implementations.
    """

    def __init__(
        self,
        db: Session,
        *,
        token_verifier: TokenVerifierInterface,
        pass_issuer: PassIssuerInterface,
        event_details: Optional[EventDetails] = None,
    ):
        self.db = db
        self.token_verifier = token_verifier
        self.pass_issuer = pass_issuer
        self.event_details = event_details or EventDetails()

    def _transition(self, state: SubmissionState, phone_number: str) -> None:
        logger.debug(
            f"RSVP submission for {mask_phone(phone_number)} -> {state.value}",
            extra={"state": state.value},
        )

    async def submit(self, rsvp_in: RsvpCreate) -> RsvpSubmissionResult:
        """
        Run the submission workflow.

        1. Verify the reCAPTCHA token (nothing is written on failure)
        2. Insert the RSVP with no pass attached
        3. For Yes/Maybe, issue a wallet pass and attach it

        Raises:
            VerificationFailedError: The token was rejected
            DuplicateSubmissionError: The phone number already has an RSVP
        """
        phone = rsvp_in.phone_number

        self._transition(SubmissionState.VERIFYING, phone)
        if not await self.token_verifier.verify(rsvp_in.recaptcha_token):
            self._transition(SubmissionState.REJECTED, phone)
            logger.info(f"RSVP for {mask_phone(phone)} rejected: verification failed")
            raise VerificationFailedError()

        self._transition(SubmissionState.PERSISTING, phone)
        try:
            rsvp = crud_rsvp.rsvp.create(self.db, obj_in=rsvp_in)
        except crud_rsvp.DuplicatePhoneNumberError:
            self._transition(SubmissionState.REJECTED, phone)
            raise DuplicateSubmissionError(phone)

        wallet_pass = None
        if RsvpResponseValue.is_pass_eligible(rsvp.response):
            self._transition(SubmissionState.ISSUING_PASS, phone)
            rsvp, wallet_pass = await self._issue_and_attach_pass(rsvp)

        self._transition(SubmissionState.FINALIZED, phone)
        return RsvpSubmissionResult(
            rsvp=RsvpSchema.model_validate(rsvp),
            wallet_pass=(
                WalletPass(
                    pass_id=wallet_pass.pass_id,
                    pass_url=wallet_pass.pass_url,
                    qr_code_url=wallet_pass.qr_code_url,
                )
                if wallet_pass
                else None
            ),
        )

    def _build_pass_data(self, rsvp: Rsvp) -> WalletPassData:
        return WalletPassData(
            first_name=rsvp.first_name,
            last_name=rsvp.last_name,
            phone_number=rsvp.phone_number,
            response=rsvp.response,
            event_date=self.event_details.date,
            event_time=self.event_details.time,
            event_location=self.event_details.location,
        )

    async def _issue_and_attach_pass(
        self, rsvp: Rsvp
    ) -> tuple[Rsvp, Optional[PassReference]]:
        """
        Issue a pass and store it on the RSVP.

        Returns the RSVP as stored and the pass, or None for the pass when
        either step failed. The RSVP itself is never rolled back here.
        """
        try:
            pass_ref = await self.pass_issuer.issue(
                DeviceType(rsvp.device_type), self._build_pass_data(rsvp)
            )
        except IssuanceError as e:
            logger.error(
                f"Wallet pass issuance failed for RSVP {rsvp.id}: {e.message}",
                extra={
                    "rsvp_id": rsvp.id,
                    "issuer": self.pass_issuer.code,
                    "error_code": e.code,
                    "retryable": e.retryable,
                },
            )
            return rsvp, None
        except Exception as e:
            # The RSVP is already committed; an issuer bug must not fail the submission.
            logger.error(
                f"Unexpected error issuing wallet pass for RSVP {rsvp.id}: {e}",
                exc_info=True,
                extra={"rsvp_id": rsvp.id, "issuer": self.pass_issuer.code},
            )
            return rsvp, None

        try:
            rsvp = crud_rsvp.rsvp.attach_pass(
                self.db,
                rsvp_id=rsvp.id,
                pass_id=pass_ref.pass_id,
                pass_url=pass_ref.pass_url,
            )
        except crud_rsvp.RsvpNotFoundError:
            # The row was committed moments ago; losing it is an invariant violation.
            logger.error(
                f"RSVP {rsvp.id} vanished before wallet pass {pass_ref.pass_id} could be attached",
                extra={"rsvp_id": rsvp.id, "pass_id": pass_ref.pass_id},
            )
            return rsvp, None
        except SQLAlchemyError as e:
            logger.error(
                f"Could not store wallet pass {pass_ref.pass_id} on RSVP {rsvp.id}: {e}",
                extra={"rsvp_id": rsvp.id, "pass_id": pass_ref.pass_id},
            )
            return self._reload(rsvp), None

        return rsvp, pass_ref

    def _reload(self, rsvp: Rsvp) -> Rsvp:
        """Re-read the RSVP after a failed write so the result matches storage."""
        stored = crud_rsvp.rsvp.get(self.db, id=rsvp.id)
        return stored if stored is not None else rsvp
