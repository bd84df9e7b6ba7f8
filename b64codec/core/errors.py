# b64codec/core/errors.py
from typing import Optional


class Base64Error(ValueError):
    """Base class for every decode failure."""

    category = "general"

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self):
        if self.position is None:
            return self.message
        return f"{self.message} (at index {self.position})"


class LengthError(Base64Error):
    """Input length is not a multiple of 4."""

    category = "length"


class InvalidCharacterError(Base64Error):
    """Non-ASCII character, or one outside the base64 alphabet."""

    category = "character"


class InvalidPaddingError(Base64Error):
    """Misplaced '=' or nonzero unused bits in the final group."""

    category = "padding"
