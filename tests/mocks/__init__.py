"""
Test mocks for the bedrock-token test suite.

Available Mocks:
- FakePresigner: Deterministic stand-in for the botocore SigV4 presigner
- PresignCall: Arguments recorded by FakePresigner
"""

from .presigner_mock import FakePresigner, PresignCall

__all__ = [
    "FakePresigner",
    "PresignCall",
]
