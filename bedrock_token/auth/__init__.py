"""
Authentication utilities for Bedrock bearer tokens.

This module provides the credential record and the SigV4 presigner used to
derive bearer tokens.
"""

from .sigv4 import (
    AWSCredentials,
    BotocorePresigner,
    Presigner,
    get_aws_credentials,
    mask_access_key,
)

__all__ = [
    "AWSCredentials",
    "BotocorePresigner",
    "Presigner",
    "get_aws_credentials",
    "mask_access_key",
]
