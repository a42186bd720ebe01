"""Core domain logic for the Gatekeeper system.

This package contains zero external dependencies and represents
the pure business rules of the application. All collaborators are
reached through the ports defined in ports.py.
"""

from .errors import ConfigurationError, GatekeeperError, SecretNotFoundError
from .models import Visitor, Weekday

__all__ = [
    "ConfigurationError",
    "GatekeeperError",
    "SecretNotFoundError",
    "Visitor",
    "Weekday",
]
