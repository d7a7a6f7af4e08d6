# rsvp_service/services/wallet/issuer_interface.py
from abc import ABC, abstractmethod
from dataclasses import dataclass

from rsvp_service.schemas.rsvp import DeviceType


@dataclass
class WalletPassData:
    """Guest and event details printed on the pass."""
    first_name: str
    last_name: str
    phone_number: str
    response: str
    event_date: str
    event_time: str
    event_location: str


@dataclass
class PassReference:
    """Result of issuing a wallet pass."""
    pass_id: str
    pass_url: str
    qr_code_url: str


@dataclass
class PassUrlConfig:
    """Base URLs used to build pass retrieval links."""
    api_url: str = "https://api.passninja.com/v1"
    google_wallet_save_url: str = "https://pay.google.com/gp/v/save"


def build_pass_urls(
    pass_id: str, device_type: DeviceType, urls: PassUrlConfig
) -> PassReference:
    """
    Build the retrieval links for a pass.

    iPhone gets a downloadable .pkpass, Android the Google Wallet save
    flow, anything else a web-viewable pass. The QR link is always set.
    """
    api_url = urls.api_url.rstrip("/")
    if device_type == DeviceType.iphone:
        pass_url = f"{api_url}/passes/{pass_id}/download.pkpass"
    elif device_type == DeviceType.android:
        pass_url = f"{urls.google_wallet_save_url.rstrip('/')}/{pass_id}"
    else:
        pass_url = f"{api_url}/passes/{pass_id}/view"

    return PassReference(
        pass_id=pass_id,
        pass_url=pass_url,
        qr_code_url=f"{api_url}/passes/{pass_id}/qr",
    )


class PassIssuerInterface(ABC):
    """
    Core interface that all wallet pass issuers must implement.

    Issuers are stateless: every call produces a new pass with a new id,
    and nothing about the guest's RSVP record is read or written here.
    """

    @property
    @abstractmethod
    def code(self) -> str:
        """Issuer code identifier (e.g., 'passninja', 'local')."""
        pass

    @abstractmethod
    async def issue(
        self, device_type: DeviceType, guest_data: WalletPassData
    ) -> PassReference:
        """
        Issue a wallet pass for a guest.

        Raises:
            IssuanceError: If the pass could not be issued
        """
        pass


class IssuanceError(Exception):
    """Custom exception for wallet pass issuance errors."""

    def __init__(self, code: str, message: str, retryable: bool = False):
        self.code = code
        self.message = message
        self.retryable = retryable
        super().__init__(message)
