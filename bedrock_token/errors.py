"""Exceptions raised while generating Bedrock bearer tokens."""


class TokenGenerationError(Exception):
    """Base class for every failure of a single token generation call."""


class MissingCredentialError(TokenGenerationError, ValueError):
    """Raised when no credentials were supplied."""

    def __init__(self, message: str = "Credentials cannot be null"):
        super().__init__(message)


class InvalidRegionError(TokenGenerationError, ValueError):
    """Raised when the region is missing, not a string, or blank."""

    def __init__(self, message: str = "Region must be a non-empty string"):
        super().__init__(message)


class SigningError(TokenGenerationError):
    """Raised when the SigV4 presigner cannot produce a signed URL."""
