# rsvp_service/services/rsvp/__init__.py
from .submission_service import (
    RsvpSubmissionService,
    RsvpSubmissionError,
    VerificationFailedError,
    DuplicateSubmissionError,
    SubmissionState,
    EventDetails,
)

__all__ = [
    "RsvpSubmissionService",
    "RsvpSubmissionError",
    "VerificationFailedError",
    "DuplicateSubmissionError",
    "SubmissionState",
    "EventDetails",
]
