"""Database access for Dream FC players."""

from .errors import ConfigurationError, DatabaseError, RosterError
from .repository import PlayerRepository

__all__ = [
    # Errors
    "ConfigurationError",
    "DatabaseError",
    "RosterError",
    # Repository
    "PlayerRepository",
]
