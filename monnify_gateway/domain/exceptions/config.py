"""Configuration exceptions."""

from .base import MonnifyException


class ConfigurationError(MonnifyException):
    """Raised when the client is built without required settings."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="CONFIGURATION_ERROR",
        )
