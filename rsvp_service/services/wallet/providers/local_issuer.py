# rsvp_service/services/wallet/providers/local_issuer.py
import uuid
import logging

from rsvp_service.schemas.rsvp import DeviceType
from ..issuer_interface import (
    PassIssuerInterface,
    PassReference,
    PassUrlConfig,
    WalletPassData,
    build_pass_urls,
)

logger = logging.getLogger(__name__)


class LocalPassIssuer(PassIssuerInterface):
    """Mints pass ids in-process. Used when PassNinja is not configured."""

    def __init__(self, urls: PassUrlConfig):
        self._urls = urls

    @property
    def code(self) -> str:
        return "local"

    async def issue(
        self, device_type: DeviceType, guest_data: WalletPassData
    ) -> PassReference:
        pass_id = f"pass_{uuid.uuid4().hex}"
        logger.debug(f"Local issuer minted {device_type.value} pass {pass_id}")
        return build_pass_urls(pass_id, device_type, self._urls)
