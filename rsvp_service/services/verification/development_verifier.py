# rsvp_service/services/verification/development_verifier.py
import logging

from .verifier_interface import TokenVerifierInterface

logger = logging.getLogger(__name__)

REJECT_PREFIX = "invalid"


class DevelopmentTokenVerifier(TokenVerifierInterface):
    """
    Offline verifier for local development and demos.

    Accepts any non-blank token except those starting with "invalid",
    so the rejection path can still be exercised from a browser.
    """

    @property
    def code(self) -> str:
        return "development"

    async def verify(self, token: str) -> bool:
        if not token or not token.strip():
            logger.warning("Verification token is empty or missing")
            return False
        if token.startswith(REJECT_PREFIX):
            logger.warning("Development verifier rejected token")
            return False
        return True
