"""
Bedrock bearer token generator.

This module derives short-lived bearer tokens for the Amazon Bedrock API from
a SigV4 presigned URL. The pipeline is strictly linear:

1. build the fixed ``CallWithBearerToken`` request descriptor
2. presign it with SigV4 query authentication (12 hour expiry)
3. strip the scheme, append the version marker, base64 encode and prefix

Usage:
    from bedrock_token import AWSCredentials, generate_token

    token = generate_token(
        AWSCredentials(access_key="AKIA...", secret_key="..."),
        "us-west-2",
    )
    headers = {"Authorization": f"Bearer {token}"}

No state is kept between calls; two calls with the same inputs produce
different tokens once the embedded X-Amz-Date changes.
"""

import asyncio
import base64
import binascii
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from opentelemetry import trace

from .auth import AWSCredentials, BotocorePresigner, Presigner, mask_access_key
from .errors import InvalidRegionError, MissingCredentialError, SigningError
from .tracing import traced

logger = logging.getLogger(__name__)

DEFAULT_HOST = "bedrock.amazonaws.com"
DEFAULT_URL = f"https://{DEFAULT_HOST}/"
SERVICE_NAME = "bedrock"
ACTION = "CallWithBearerToken"
AUTH_PREFIX = "bedrock-api-key-"
TOKEN_VERSION = "&Version=1"
TOKEN_EXPIRES_IN = 43200  # 12 hours

_SCHEME_PREFIX = "https://"

CredentialsLike = Union[AWSCredentials, Mapping[str, Any], Any]


@dataclass(frozen=True)
class RequestDescriptor:
    """The request that gets presigned. Every field is fixed."""
    method: str = "POST"
    scheme: str = "https"
    host: str = DEFAULT_HOST
    path: str = "/"
    query: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({"Action": ACTION})
    )
    headers: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({"host": DEFAULT_HOST})
    )

    @property
    def url(self) -> str:
        """URL without the query string, e.g. ``https://bedrock.amazonaws.com/``."""
        return f"{self.scheme}://{self.host}{self.path}"


def build_request_descriptor() -> RequestDescriptor:
    """Build a fresh descriptor for the ``CallWithBearerToken`` action."""
    return RequestDescriptor()


def encode_token(presigned_url: str) -> str:
    """
    Turn a presigned URL into a bearer token.

    The ``https://`` scheme is stripped when present (a URL without it passes
    through unchanged), the version marker is appended, and the result is
    base64 encoded with the standard alphabet and prefixed.

    Args:
        presigned_url: URL returned by the presigner

    Returns:
        Token of the form ``bedrock-api-key-<base64>``
    """
    if presigned_url.startswith(_SCHEME_PREFIX):
        presigned_url = presigned_url[len(_SCHEME_PREFIX):]
    payload = presigned_url + TOKEN_VERSION
    encoded = base64.b64encode(payload.encode("utf-8")).decode("ascii")
    return f"{AUTH_PREFIX}{encoded}"


def decode_token(token: str) -> str:
    """
    Decode a token back to its presigned URL payload (scheme omitted).

    Raises:
        ValueError: If the prefix is missing or the payload is not valid base64
    """
    if not isinstance(token, str) or not token.startswith(AUTH_PREFIX):
        raise ValueError(f"Token must start with {AUTH_PREFIX!r}")
    try:
        raw = base64.b64decode(token[len(AUTH_PREFIX):], validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ValueError(f"Token payload is not valid base64: {e}") from e


def _validate_region(region: Any) -> str:
    # Blank is checked on the trimmed value; the region is signed as given
    if not isinstance(region, str) or not region.strip():
        raise InvalidRegionError()
    return region


def _coerce_credentials(credentials: CredentialsLike) -> AWSCredentials:
    """Normalize the accepted credential shapes into ``AWSCredentials``."""
    if isinstance(credentials, AWSCredentials):
        return credentials
    if isinstance(credentials, Mapping):
        return AWSCredentials.from_mapping(credentials)
    # botocore Credentials / ReadOnlyCredentials
    if hasattr(credentials, "access_key") and hasattr(credentials, "secret_key"):
        return AWSCredentials(
            access_key=credentials.access_key or "",
            secret_key=credentials.secret_key or "",
            session_token=getattr(credentials, "token", None),
        )
    raise SigningError(
        f"Unsupported credentials type: {type(credentials).__name__}"
    )


class BedrockTokenGenerator:
    """
    Generates short-lived bearer tokens for the Amazon Bedrock API.

    The generator is stateless: it only holds the presigner collaborator,
    which can be swapped for a test double returning deterministic URLs.

    Attributes:
        presigner: SigV4 presigner used for every call
    """

    def __init__(self, presigner: Optional[Presigner] = None):
        self.presigner = presigner or BotocorePresigner()

    @traced(name="bedrock_token.generate", attributes={"aws.service": SERVICE_NAME})
    def get_token(self, credentials: CredentialsLike, region: str) -> str:
        """
        Generate a bearer token valid for 12 hours.

        Args:
            credentials: AWSCredentials, a mapping with ``access_key_id``/
                ``secret_access_key``/``session_token`` keys, or a botocore
                credentials object
            region: AWS region to scope the token to (e.g., "us-west-2")

        Returns:
            Bearer token string prefixed with ``bedrock-api-key-``

        Raises:
            MissingCredentialError: If credentials is None
            InvalidRegionError: If region is missing or blank
            SigningError: If the presigner fails
        """
        if credentials is None:
            logger.warning("Token generation rejected: no credentials supplied")
            raise MissingCredentialError()

        try:
            region = _validate_region(region)
        except InvalidRegionError:
            logger.warning("Token generation rejected: invalid region %r", region)
            raise

        creds = _coerce_credentials(credentials)
        trace.get_current_span().set_attribute("aws.region", region)
        logger.debug(
            "Generating Bedrock token for %s in %s (expires in %ds)",
            mask_access_key(creds.access_key),
            region,
            TOKEN_EXPIRES_IN,
        )

        try:
            presigned_url = self.presigner.presign(
                build_request_descriptor(),
                creds,
                service=SERVICE_NAME,
                region=region,
                expires_in=TOKEN_EXPIRES_IN,
            )
        except SigningError:
            raise
        except Exception as e:
            logger.warning(
                "Presigner failed for %s in %s: %s",
                mask_access_key(creds.access_key),
                region,
                type(e).__name__,
            )
            raise SigningError(f"Failed to presign request: {e}") from e

        if not presigned_url.startswith(_SCHEME_PREFIX):
            logger.warning("Presigned URL has no https scheme; encoding as-is")

        token = encode_token(presigned_url)
        logger.debug("Generated Bedrock token for %s", region)
        return token

    @traced(name="bedrock_token.generate_async", attributes={"aws.service": SERVICE_NAME})
    async def get_token_async(self, credentials: CredentialsLike, region: str) -> str:
        """Async variant of :meth:`get_token`, signing in a worker thread."""
        return await asyncio.to_thread(self.get_token, credentials, region)


_default_generator = BedrockTokenGenerator()


def generate_token(credentials: CredentialsLike, region: str) -> str:
    """Generate a bearer token with the default botocore-backed generator."""
    return _default_generator.get_token(credentials, region)


async def generate_token_async(credentials: CredentialsLike, region: str) -> str:
    """Async variant of :func:`generate_token`."""
    return await _default_generator.get_token_async(credentials, region)
