"""Custom exception hierarchy for the ferryman puzzle."""


class FerrymanError(Exception):
    """Base exception for puzzle failures."""


class InvalidConfigurationError(FerrymanError, ValueError):
    """Raised when input cannot be turned into a bank configuration."""


class ValidationError(FerrymanError):
    """Raised when a move sequence breaks the crossing rules."""


class SessionError(FerrymanError):
    """Raised when a game session is driven in a way its mode does not allow."""
