# rsvp_service/services/verification/verifier_interface.py
from abc import ABC, abstractmethod


class TokenVerifierInterface(ABC):
    """
    Checks that a form submission came from a human.

    Implementations never raise: every failure, including network errors
    and missing configuration, is reported as False and logged. The caller
    decides what a rejection means.
    """

    @property
    @abstractmethod
    def code(self) -> str:
        """Verifier code identifier (e.g., 'recaptcha')."""
        pass

    @abstractmethod
    async def verify(self, token: str) -> bool:
        """Return True only when the token is affirmatively valid."""
        pass
