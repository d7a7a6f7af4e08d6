# rsvp_service/services/wallet/issuer_factory.py
import logging
from typing import Dict, List, Optional

from rsvp_service.core.config import settings
from .issuer_interface import PassIssuerInterface, PassUrlConfig
from .providers.passninja_issuer import PassNinjaConfig, PassNinjaPassIssuer
from .providers.local_issuer import LocalPassIssuer

logger = logging.getLogger(__name__)

DEFAULT_ISSUER = "local"


class PassIssuerFactory:
    """
    Factory for creating and managing wallet pass issuer instances.
    """

    def __init__(self):
        self._issuers: Dict[str, PassIssuerInterface] = {}
        self._initialize_issuers()

    def _initialize_issuers(self) -> None:
        """Initialize all configured pass issuers."""
        urls = PassUrlConfig(
            api_url=settings.PASSNINJA_API_URL,
            google_wallet_save_url=settings.GOOGLE_WALLET_SAVE_URL,
        )

        account_id = settings.PASSNINJA_ACCOUNT_ID
        api_key = settings.PASSNINJA_API_KEY
        pass_type = settings.PASSNINJA_PASS_TYPE

        if account_id and api_key and pass_type:
            config = PassNinjaConfig(
                account_id=account_id,
                api_key=api_key,
                pass_type=pass_type,
                timeout=settings.PASSNINJA_TIMEOUT_SECONDS,
                urls=urls,
            )
            self._issuers["passninja"] = PassNinjaPassIssuer(config)
            logger.info("PassNinja pass issuer initialized")
        else:
            logger.warning(
                "PassNinja issuer not initialized: missing environment variables"
            )

        self._issuers["local"] = LocalPassIssuer(urls)

    def get_issuer(self, code: str) -> PassIssuerInterface:
        """
        Get a pass issuer by its code.

        Raises:
            ValueError: If issuer is not available
        """
        issuer = self._issuers.get(code)
        if not issuer:
            raise ValueError(f"Pass issuer '{code}' is not available")
        return issuer

    def get_configured_issuer(self) -> PassIssuerInterface:
        """Get the issuer named by PASS_ISSUER, falling back to the default."""
        try:
            return self.get_issuer(settings.PASS_ISSUER)
        except ValueError:
            logger.warning(
                f"Pass issuer '{settings.PASS_ISSUER}' unavailable, using '{DEFAULT_ISSUER}'"
            )
            return self.get_issuer(DEFAULT_ISSUER)

    def list_available_issuers(self) -> List[str]:
        return list(self._issuers.keys())


# Global factory instance (singleton pattern)
_factory_instance: Optional[PassIssuerFactory] = None


def get_pass_issuer_factory() -> PassIssuerFactory:
    """Get the global pass issuer factory instance."""
    global _factory_instance
    if _factory_instance is None:
        _factory_instance = PassIssuerFactory()
    return _factory_instance


def get_pass_issuer() -> PassIssuerInterface:
    """Convenience function to get the configured pass issuer."""
    return get_pass_issuer_factory().get_configured_issuer()
