# rsvp_service/services/wallet/__init__.py
from .issuer_interface import (
    PassIssuerInterface,
    PassReference,
    WalletPassData,
    IssuanceError,
)
from .issuer_factory import PassIssuerFactory, get_pass_issuer

__all__ = [
    "PassIssuerInterface",
    "PassReference",
    "WalletPassData",
    "IssuanceError",
    "PassIssuerFactory",
    "get_pass_issuer",
]
