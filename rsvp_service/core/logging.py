# rsvp_service/core/logging.py
import logging
from typing import Optional

from rsvp_service.core.config import settings

LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging() -> None:
    """Configure root logging for the service process."""
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )

    # Silence noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def mask_phone(phone: Optional[str]) -> str:
    """Mask phone number for logging: 5551234567 -> 555****4567"""
    if not phone or len(phone) <= 4:
        return "****"
    return phone[:3] + "****" + phone[-4:]
