# b64codec/verify/checker.py
from typing import List, Optional
from dataclasses import dataclass

from b64codec.core.encoding import decode
from b64codec.core.errors import Base64Error


@dataclass
class CheckFailure:
    index: Optional[int]
    message: str
    category: str = "general"  # "length", "character", "padding", "type"


@dataclass
class CheckResult:
    is_valid: bool
    message: str = ""
    failures: List[CheckFailure] = None
    padding: int = 0
    decoded_length: Optional[int] = None

    def __post_init__(self):
        if self.failures is None:
            self.failures = []

    @property
    def first_failure(self) -> Optional[CheckFailure]:
        return self.failures[0] if self.failures else None

    def __bool__(self):
        return self.is_valid

    def __str__(self):
        if self.is_valid:
            return f"Valid base64 ✓ ({self.decoded_length} bytes, {self.padding} padding)"
        lines = [f"Invalid base64 ({len(self.failures)} issues):"]
        for f in self.failures:
            where = "-" if f.index is None else f.index
            lines.append(f"  • [{where}] {f.category}: {f.message}")
        return "\n".join(lines)


def check(s) -> CheckResult:
    """
    Inspect a candidate base64 string without raising.
    Runs the real decoder, so a valid result here always decodes.
    """
    try:
        decoded = decode(s)
    except TypeError as e:
        return CheckResult(False, "Not a string", [CheckFailure(None, str(e), "type")])
    except Base64Error as e:
        return CheckResult(
            False,
            f"Failed with {e.category} error",
            [CheckFailure(e.position, e.message, e.category)],
        )

    # output is 3 bytes per group minus one per padding character
    padding = -len(decoded) % 3
    return CheckResult(True, "Valid base64", padding=padding, decoded_length=len(decoded))
