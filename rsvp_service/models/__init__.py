# rsvp_service/models/__init__.py
# Import all models so Base.metadata knows every table

from rsvp_service.db.base_class import Base
from rsvp_service.models.rsvp import Rsvp
