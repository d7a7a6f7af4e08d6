# rsvp_service/models/rsvp.py
"""
RSVP model: one attendance response per phone number.

Guest-entered fields are written once at creation. The wallet pass
columns are filled in afterwards, together, only when a pass was issued.
"""

import uuid
from sqlalchemy import Column, String, DateTime, Enum
from sqlalchemy.sql import func

from rsvp_service.db.base_class import Base


class Rsvp(Base):
    __tablename__ = "rsvps"

    id = Column(String, primary_key=True, default=lambda: f"rsvp_{uuid.uuid4().hex[:12]}")

    # 10-digit phone number used as the guest's unique identifier
    phone_number = Column(String(10), nullable=False, unique=True, index=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    response = Column(
        Enum("Yes", "Maybe", "No", name="rsvp_response_enum"),
        nullable=False,
    )
    comment = Column(String(500), nullable=True)
    device_type = Column(
        Enum("iPhone", "Android", "Other", name="rsvp_device_type_enum"),
        nullable=False,
    )

    # Both null, or both set by a successful pass attach
    wallet_pass_id = Column(String, nullable=True)
    wallet_pass_url = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def __repr__(self):
        return f"<Rsvp {self.id} ({self.response})>"
