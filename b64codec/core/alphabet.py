# b64codec/core/alphabet.py
"""Lookup tables shared by the encoder and the decoder. Built once at import."""

from typing import Tuple

ENCODE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PAD_CHAR = "="

# Decode table sentinels, outside the 6-bit range 0..63
PADDING = 254
INVALID = 255

ASCII_LIMIT = 128


def _build_decode_table() -> Tuple[int, ...]:
    table = [INVALID] * ASCII_LIMIT
    for value, symbol in enumerate(ENCODE_ALPHABET):
        table[ord(symbol)] = value
    table[ord(PAD_CHAR)] = PADDING
    return tuple(table)


DECODE_TABLE = _build_decode_table()


def lookup(code_point: int) -> int:
    """6-bit value for a code point, or PADDING / INVALID."""
    if code_point >= ASCII_LIMIT:
        return INVALID
    return DECODE_TABLE[code_point]
