# rsvp_service/services/verification/verifier_factory.py
import logging
from typing import Optional

from rsvp_service.core.config import settings
from .verifier_interface import TokenVerifierInterface
from .recaptcha_verifier import RecaptchaConfig, RecaptchaTokenVerifier
from .development_verifier import DevelopmentTokenVerifier

logger = logging.getLogger(__name__)


def build_token_verifier(code: str) -> TokenVerifierInterface:
    """
    Build a token verifier by its code.

    Raises:
        ValueError: If the code is unknown
    """
    if code == "recaptcha":
        if not settings.RECAPTCHA_SECRET_KEY:
            # Still returned: the verifier rejects every token until configured.
            logger.warning("RECAPTCHA_SECRET_KEY not set; all submissions will be rejected")
        return RecaptchaTokenVerifier(
            RecaptchaConfig(
                secret_key=settings.RECAPTCHA_SECRET_KEY,
                verify_url=settings.RECAPTCHA_VERIFY_URL,
                timeout=settings.RECAPTCHA_TIMEOUT_SECONDS,
            )
        )
    if code == "development":
        logger.warning("Using development token verifier, do not run this in production")
        return DevelopmentTokenVerifier()
    raise ValueError(f"Token verifier '{code}' is not available")


# Global verifier instance (singleton pattern)
_verifier_instance: Optional[TokenVerifierInterface] = None


def get_token_verifier() -> TokenVerifierInterface:
    """Get the configured token verifier."""
    global _verifier_instance
    if _verifier_instance is None:
        _verifier_instance = build_token_verifier(settings.TOKEN_VERIFIER)
    return _verifier_instance
