# rsvp_service/services/wallet/providers/passninja_issuer.py
import logging
from dataclasses import dataclass, field

import httpx

from rsvp_service.core.logging import mask_phone
from rsvp_service.schemas.rsvp import DeviceType
from ..issuer_interface import (
    PassIssuerInterface,
    PassReference,
    PassUrlConfig,
    WalletPassData,
    IssuanceError,
    build_pass_urls,
)

logger = logging.getLogger(__name__)


@dataclass
class PassNinjaConfig:
    """Configuration for the PassNinja issuer."""
    account_id: str
    api_key: str
    pass_type: str
    timeout: float = 10.0
    urls: PassUrlConfig = field(default_factory=PassUrlConfig)


class PassNinjaPassIssuer(PassIssuerInterface):
    """
    PassNinja implementation of PassIssuerInterface.

    Creates the pass with a single POST /passes call; the serial number
    PassNinja assigns becomes our pass id.
    """

    def __init__(self, config: PassNinjaConfig):
        self._config = config

    @property
    def code(self) -> str:
        return "passninja"

    def _build_payload(self, guest_data: WalletPassData) -> dict:
        return {
            "passType": self._config.pass_type,
            "pass": {
                "firstName": guest_data.first_name,
                "lastName": guest_data.last_name,
                "phoneNumber": guest_data.phone_number,
                "response": guest_data.response,
                "eventDate": guest_data.event_date,
                "eventTime": guest_data.event_time,
                "eventLocation": guest_data.event_location,
            },
        }

    async def issue(
        self, device_type: DeviceType, guest_data: WalletPassData
    ) -> PassReference:
        masked = mask_phone(guest_data.phone_number)
        url = f"{self._config.urls.api_url.rstrip('/')}/passes"

        try:
            async with httpx.AsyncClient(timeout=self._config.timeout) as client:
                response = await client.post(
                    url,
                    json=self._build_payload(guest_data),
                    headers={
                        "X-Account-ID": self._config.account_id,
                        "X-API-Key": self._config.api_key,
                        "Content-Type": "application/json",
                    },
                )
        except httpx.TimeoutException:
            raise IssuanceError(
                code="timeout",
                message=f"PassNinja timed out issuing pass for {masked}",
                retryable=True,
            )
        except httpx.RequestError as e:
            raise IssuanceError(
                code="network_error",
                message=f"PassNinja request failed for {masked}: {e}",
                retryable=True,
            )
        except Exception as e:
            logger.error(f"Unexpected error calling PassNinja: {e}", exc_info=True)
            raise IssuanceError(
                code="unexpected_error",
                message=f"PassNinja call failed for {masked}: {e}",
            )

        if not response.is_success:
            raise IssuanceError(
                code="provider_error",
                message=f"PassNinja returned HTTP {response.status_code} for {masked}",
                retryable=response.status_code >= 500,
            )

        try:
            data = response.json()
        except ValueError:
            raise IssuanceError(
                code="invalid_response",
                message="PassNinja returned a non-JSON body",
            )

        pass_id = None
        if isinstance(data, dict):
            pass_id = data.get("serialNumber") or data.get("id")
        if not pass_id:
            raise IssuanceError(
                code="invalid_response",
                message="PassNinja response did not include a pass identifier",
            )

        logger.info(f"PassNinja issued {device_type.value} pass {pass_id} for {masked}")
        return build_pass_urls(str(pass_id), device_type, self._config.urls)
