# b64codec/core/validation.py
from b64codec.core.alphabet import INVALID, PADDING, lookup
from b64codec.core.errors import LengthError, InvalidCharacterError, InvalidPaddingError


def scan(text: str) -> int:
    """
    Validate a whole base64 string in one pass and return its padding count.

    Raises LengthError, InvalidCharacterError or InvalidPaddingError for the
    first problem found, scanning left to right. Empty input is valid.
    """
    size = len(text)
    if size % 4 != 0:
        raise LengthError(f"length of base64 string is not an even multiple of 4 (got {size})")

    padding = 0
    for index, ch in enumerate(text):
        value = lookup(ord(ch))
        if value == INVALID:
            raise InvalidCharacterError("invalid character found in base64 string", index)
        if value != PADDING:
            continue

        remaining = size - index
        if remaining > 2:
            raise InvalidPaddingError("invalid padding character found in base64 string", index)
        # '=' in the second-to-last slot must be followed by another '='
        if remaining == 2 and lookup(ord(text[index + 1])) != PADDING:
            raise InvalidPaddingError("invalid padding character found in base64 string", index + 1)
        padding += 1

    return padding
