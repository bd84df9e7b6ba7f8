# b64codec/core/encoding.py
from typing import Union

from b64codec.core.alphabet import ENCODE_ALPHABET, PAD_CHAR, DECODE_TABLE, PADDING
from b64codec.core.errors import InvalidPaddingError
from b64codec.core.validation import scan

BytesLike = Union[bytes, bytearray, memoryview]


def encode(data: BytesLike) -> str:
    """Encode bytes to standard base64 with '=' padding. Never fails for bytes-like input."""
    if isinstance(data, str):
        raise TypeError("encode() expects a bytes-like object, not 'str'")
    buf = memoryview(data).tobytes()

    alphabet = ENCODE_ALPHABET
    size = len(buf)
    full = size - size % 3
    out = []

    for i in range(0, full, 3):
        b0, b1, b2 = buf[i], buf[i + 1], buf[i + 2]
        out.append(alphabet[b0 >> 2])
        out.append(alphabet[(b0 & 0x03) << 4 | (b1 >> 4)])
        out.append(alphabet[(b1 & 0x0F) << 2 | (b2 >> 6)])
        out.append(alphabet[b2 & 0x3F])

    tail = size - full
    if tail == 1:
        b0 = buf[full]
        out.append(alphabet[b0 >> 2])
        out.append(alphabet[(b0 & 0x03) << 4])
        out.append(PAD_CHAR * 2)
    elif tail == 2:
        b0, b1 = buf[full], buf[full + 1]
        out.append(alphabet[b0 >> 2])
        out.append(alphabet[(b0 & 0x03) << 4 | (b1 >> 4)])
        out.append(alphabet[(b1 & 0x0F) << 2])
        out.append(PAD_CHAR)

    return "".join(out)


def _as_text(s) -> str:
    if isinstance(s, str):
        return s
    if isinstance(s, (bytes, bytearray, memoryview)):
        # latin-1 keeps every byte value as the same code point
        return bytes(s).decode("latin-1")
    raise TypeError(f"decode() expects str or a bytes-like object, not {type(s).__name__!r}")


def decode(s: Union[str, BytesLike]) -> bytes:
    """
    Decode a standard base64 string back to bytes.

    The whole input is validated before any output is produced, so the call
    either returns the complete result or raises a Base64Error subclass.
    """
    text = _as_text(s)
    padding = scan(text)
    if not text:
        return b""

    table = DECODE_TABLE
    size = len(text)
    out = bytearray((size // 4) * 3 - padding)
    idx = 0

    # every group but the last cannot hold padding
    last = size - 4
    for start in range(0, last, 4):
        v0 = table[ord(text[start])]
        v1 = table[ord(text[start + 1])]
        v2 = table[ord(text[start + 2])]
        v3 = table[ord(text[start + 3])]
        out[idx] = v0 << 2 | v1 >> 4
        out[idx + 1] = (v1 & 0xF) << 4 | v2 >> 2
        out[idx + 2] = (v2 & 0x3) << 6 | v3
        idx += 3

    v0 = table[ord(text[last])]
    v1 = table[ord(text[last + 1])]
    v2 = table[ord(text[last + 2])]
    v3 = table[ord(text[last + 3])]

    out[idx] = v0 << 2 | v1 >> 4
    if v2 == PADDING:
        if v1 & 0xF:
            raise InvalidPaddingError("invalid end of base64 string", last + 1)
        return bytes(out)

    out[idx + 1] = (v1 & 0xF) << 4 | v2 >> 2
    if v3 == PADDING:
        if v2 & 0x3:
            raise InvalidPaddingError("invalid end of base64 string", last + 2)
        return bytes(out)

    out[idx + 2] = (v2 & 0x3) << 6 | v3
    return bytes(out)
