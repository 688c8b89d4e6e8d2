"""Exceptions raised by the database layer."""


class RosterError(Exception):
    """Base exception for roster errors."""

    pass


class DatabaseError(RosterError):
    """Raised when a call to the database service fails."""

    pass


class ConfigurationError(RosterError):
    """Raised when required settings are missing."""

    pass
