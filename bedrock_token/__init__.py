"""Bedrock bearer token generator - SigV4-derived API keys for Amazon Bedrock."""

__version__ = "1.0.0"

from .auth import (
    AWSCredentials,
    BotocorePresigner,
    Presigner,
    get_aws_credentials,
)
from .errors import (
    InvalidRegionError,
    MissingCredentialError,
    SigningError,
    TokenGenerationError,
)
from .generator import (
    AUTH_PREFIX,
    DEFAULT_HOST,
    SERVICE_NAME,
    TOKEN_EXPIRES_IN,
    TOKEN_VERSION,
    BedrockTokenGenerator,
    RequestDescriptor,
    build_request_descriptor,
    decode_token,
    encode_token,
    generate_token,
    generate_token_async,
)

__all__ = [
    "__version__",
    # Token generation
    "BedrockTokenGenerator",
    "generate_token",
    "generate_token_async",
    "build_request_descriptor",
    "encode_token",
    "decode_token",
    "RequestDescriptor",
    # Constants
    "AUTH_PREFIX",
    "DEFAULT_HOST",
    "SERVICE_NAME",
    "TOKEN_EXPIRES_IN",
    "TOKEN_VERSION",
    # Credentials and signing
    "AWSCredentials",
    "BotocorePresigner",
    "Presigner",
    "get_aws_credentials",
    # Errors
    "TokenGenerationError",
    "MissingCredentialError",
    "InvalidRegionError",
    "SigningError",
]
