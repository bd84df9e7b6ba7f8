# b64codec/__init__.py
"""
b64codec: strict RFC 4648 base64 encoding and decoding.

Whole buffer in, whole buffer out. Decoding validates the entire input before
producing a single byte, so malformed text never yields partial output.
"""

from b64codec.core.encoding import encode, decode
from b64codec.core.errors import (
    Base64Error,
    LengthError,
    InvalidCharacterError,
    InvalidPaddingError,
)
from b64codec.verify.checker import check, CheckResult, CheckFailure

__version__ = "0.1.0-dev"

__all__ = [
    "encode",
    "decode",
    "check",
    "CheckResult",
    "CheckFailure",
    "Base64Error",
    "LengthError",
    "InvalidCharacterError",
    "InvalidPaddingError",
]
