# rsvp_service/constants/rsvp.py
"""
Constants for RSVP responses, device types and the event itself.

Provides type-safe constants to replace hardcoded strings throughout the codebase.
"""


class RsvpResponseValue:
    """Attendance response values."""
    YES = "Yes"
    MAYBE = "Maybe"
    NO = "No"

    @classmethod
    def all_values(cls) -> list[str]:
        """Return all valid response values."""
        return [cls.YES, cls.MAYBE, cls.NO]

    @classmethod
    def is_pass_eligible(cls, response: str) -> bool:
        """Guests who may come get a wallet pass; a 'No' never does."""
        return response in (cls.YES, cls.MAYBE)


class DeviceTypeValue:
    """Device classes that select the wallet pass format."""
    IPHONE = "iPhone"
    ANDROID = "Android"
    OTHER = "Other"

    @classmethod
    def all_values(cls) -> list[str]:
        """Return all valid device type values."""
        return [cls.IPHONE, cls.ANDROID, cls.OTHER]


# Fixed event metadata printed on every wallet pass
EVENT_DATE = "July 27, 2025"
EVENT_TIME = "12:00 PM"
EVENT_LOCATION = "Bunbury Miami, 55 NE 14th St., Miami, FL 33132"
