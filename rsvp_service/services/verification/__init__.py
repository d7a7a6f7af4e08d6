# rsvp_service/services/verification/__init__.py
from .verifier_interface import TokenVerifierInterface
from .verifier_factory import get_token_verifier

__all__ = [
    "TokenVerifierInterface",
    "get_token_verifier",
]
