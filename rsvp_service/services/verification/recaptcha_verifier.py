# rsvp_service/services/verification/recaptcha_verifier.py
"""
Google reCAPTCHA verification.

Makes a single siteverify call per token; there is no retry.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from .verifier_interface import TokenVerifierInterface

logger = logging.getLogger(__name__)


@dataclass
class RecaptchaConfig:
    """Configuration for the reCAPTCHA verifier."""
    secret_key: Optional[str]
    verify_url: str = "https://www.google.com/recaptcha/api/siteverify"
    timeout: float = 5.0


class RecaptchaTokenVerifier(TokenVerifierInterface):
    """reCAPTCHA implementation of TokenVerifierInterface."""

    def __init__(self, config: RecaptchaConfig):
        self._config = config

    @property
    def code(self) -> str:
        return "recaptcha"

    async def verify(self, token: str) -> bool:
        if not self._config.secret_key:
            logger.error("reCAPTCHA secret key not configured")
            return False

        if not token or not token.strip():
            logger.warning("reCAPTCHA token is empty or missing")
            return False

        try:
            async with httpx.AsyncClient(timeout=self._config.timeout) as client:
                response = await client.post(
                    self._config.verify_url,
                    data={
                        "secret": self._config.secret_key,
                        "response": token,
                    },
                )
        except httpx.TimeoutException:
            logger.error("reCAPTCHA verification timed out")
            return False
        except httpx.RequestError as e:
            logger.error(f"reCAPTCHA verification request error: {e}")
            return False
        except Exception as e:
            logger.error(f"Unexpected error calling reCAPTCHA: {e}", exc_info=True)
            return False

        if not response.is_success:
            logger.error(
                f"reCAPTCHA verification request failed: HTTP {response.status_code}"
            )
            return False

        try:
            data = response.json()
        except ValueError:
            logger.error("reCAPTCHA verification returned a non-JSON body")
            return False

        if not isinstance(data, dict):
            logger.error("reCAPTCHA verification returned an unexpected body")
            return False

        # Only a real boolean true counts; "true" or 1 do not.
        if data.get("success") is True:
            return True

        logger.warning(
            "reCAPTCHA token rejected",
            extra={"error_codes": data.get("error-codes", [])},
        )
        return False
