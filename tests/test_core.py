# tests/test_core.py
import base64
import math
import random

import pytest

from b64codec.core.encoding import encode, decode
from b64codec.core.alphabet import ENCODE_ALPHABET, DECODE_TABLE, PADDING, INVALID, lookup
from b64codec.core.errors import (
    Base64Error,
    LengthError,
    InvalidCharacterError,
    InvalidPaddingError,
)


@pytest.fixture
def random_buffers():
    rng = random.Random(20261017)
    return [bytes(rng.getrandbits(8) for _ in range(n)) for n in range(0, 64)]


def test_alphabet_tables_are_inverse():
    assert len(ENCODE_ALPHABET) == 64
    for value, symbol in enumerate(ENCODE_ALPHABET):
        assert DECODE_TABLE[ord(symbol)] == value
    assert DECODE_TABLE[ord("=")] == PADDING
    assert DECODE_TABLE[ord("@")] == INVALID
    assert lookup(0xE9) == INVALID  # non-ASCII never hits the table


@pytest.mark.parametrize("raw, expected", [
    (b"Man", "TWFu"),
    (b"Ma", "TWE="),
    (b"M", "TQ=="),
    (b"", ""),
    (b"foobar", "Zm9vYmFy"),
    (b"\x00\x00\x00", "AAAA"),
    (b"\xff\xff\xff", "////"),
    (b"\xfb\xef\xbe", "++++"),
])
def test_known_vectors(raw, expected):
    assert encode(raw) == expected
    assert decode(expected) == raw


def test_empty_input():
    assert encode(b"") == ""
    assert decode("") == b""


def test_roundtrip_matches_stdlib(random_buffers):
    for buf in random_buffers:
        encoded = encode(buf)
        assert encoded == base64.b64encode(buf).decode("ascii")
        assert decode(encoded) == buf


def test_length_and_padding_follow_tail(random_buffers):
    for buf in random_buffers:
        encoded = encode(buf)
        assert len(encoded) == 4 * math.ceil(len(buf) / 3)
        expected_padding = {0: 0, 1: 2, 2: 1}[len(buf) % 3]
        assert len(encoded) - len(encoded.rstrip("=")) == expected_padding


def test_encode_accepts_bytes_like():
    assert encode(bytearray(b"Ma")) == "TWE="
    assert encode(memoryview(b"Man")) == "TWFu"


def test_encode_rejects_str():
    with pytest.raises(TypeError):
        encode("Man")


def test_decode_accepts_ascii_bytes():
    assert decode(b"TWFu") == b"Man"
    assert decode(bytearray(b"TQ==")) == b"M"


def test_decode_rejects_other_types():
    with pytest.raises(TypeError):
        decode(1234)


@pytest.mark.parametrize("bad", ["QQ", "Q", "QQQ", "TWFuT", "TWFu=="])
def test_rejects_bad_length(bad):
    with pytest.raises(LengthError) as exc:
        decode(bad)
    assert exc.value.position is None
    assert "multiple of 4" in str(exc.value)


@pytest.mark.parametrize("bad, position", [
    ("QQ@=", 2),
    ("TW-u", 2),
    ("TWF_", 3),
    ("TW u", 2),
    ("TWé=", 2),
    ("TWFu\n\n\n\n", 4),
])
def test_rejects_invalid_character(bad, position):
    with pytest.raises(InvalidCharacterError) as exc:
        decode(bad)
    assert exc.value.position == position


def test_rejects_non_ascii_bytes():
    with pytest.raises(InvalidCharacterError):
        decode(b"TW\xc3\xa9")


@pytest.mark.parametrize("bad", ["Q=QQ", "=QQQ", "QQ=Q", "====", "A===", "TWE=TWFu", "TQ==TQ=="])
def test_rejects_misplaced_padding(bad):
    with pytest.raises(InvalidPaddingError):
        decode(bad)


def test_first_problem_wins():
    # the misplaced '=' comes before the bad character
    with pytest.raises(InvalidPaddingError):
        decode("Q=@Q")
    with pytest.raises(InvalidCharacterError):
        decode("Q@=Q")


@pytest.mark.parametrize("bad", ["QR==", "QB==", "QUJ=", "QUL=", "TWFuQR=="])
def test_rejects_noncanonical_tail_bits(bad):
    with pytest.raises(InvalidPaddingError) as exc:
        decode(bad)
    assert "invalid end" in str(exc.value)


def test_canonical_tails_accepted():
    assert decode("QQ==") == b"A"
    assert decode("QUI=") == b"AB"
    assert decode("TWFuQUI=") == b"ManAB"


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        decode("QQ")
    with pytest.raises(Base64Error):
        decode("QQ@=")


def test_decode_is_atomic():
    # valid leading groups, broken final group: nothing comes back
    good = encode(b"x" * 30)
    with pytest.raises(InvalidPaddingError):
        decode(good + "QR==")
