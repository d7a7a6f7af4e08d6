# rsvp_service/crud/__init__.py

from .crud_rsvp import rsvp
