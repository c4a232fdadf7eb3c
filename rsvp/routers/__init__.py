# rsvp/routers/__init__.py

from . import rsvp
from . import admin

__all__ = [
    "rsvp",
    "admin",
]
