"""Warble exception hierarchy.

Validation failures are data (messages in a result), never exceptions.
These types cover setup-time misuse only.
"""


class WarbleError(Exception):
    """Base for all warble-specific errors."""


class ConfigurationError(WarbleError):
    """Raised when validation defaults are invalid.

    Typically raised by ``set_defaults()`` when a message transform is
    not callable or a default message is not a string.
    """
