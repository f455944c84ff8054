"""OGM validation result models for Belgian structured communications."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

_TWO_DIGITS = re.compile(r"\d{2}")


@dataclass(frozen=True)
class OgmCorrection:
    """One OCR substitution applied to the raw reference.

    Attributes:
        position: Zero-based index in the trimmed raw reference
        from_char: Character found in the raw reference
        to_char: Digit it was replaced with
    """

    position: int
    from_char: str
    to_char: str

    def to_dict(self) -> Dict[str, Any]:
        return {"position": self.position, "from": self.from_char, "to": self.to_char}


@dataclass(frozen=True)
class OgmValid:
    normalized: str

    is_valid = True

    def to_dict(self) -> Dict[str, Any]:
        return {"status": "valid", "normalized": self.normalized}


@dataclass(frozen=True)
class OgmCorrectedValid:
    """Reference that validates after OCR substitutions.

    Attributes:
        original: Raw reference as supplied (trimmed)
        normalized: Corrected reference in +++AAA/BBBB/CCCYY+++ form
        corrections: Substitutions applied, in position order
    """

    original: str
    normalized: str
    corrections: Tuple[OgmCorrection, ...]

    is_valid = True

    def __post_init__(self):
        if not self.corrections:
            raise ValueError("corrections must not be empty for a corrected reference")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": "corrected_valid",
            "original": self.original,
            "normalized": self.normalized,
            "corrections": [c.to_dict() for c in self.corrections],
        }


@dataclass(frozen=True)
class OgmInvalidFormat:
    reason: str

    is_valid = False

    def to_dict(self) -> Dict[str, Any]:
        return {"status": "invalid_format", "reason": self.reason}


@dataclass(frozen=True)
class OgmInvalidChecksum:
    """Well-formed reference whose check digits do not match the payload.

    Attributes:
        expected: Check digits computed from the first 10 digits
        actual: Check digits found in the reference
    """

    expected: str
    actual: str

    is_valid = False

    def __post_init__(self):
        for name in ("expected", "actual"):
            value = getattr(self, name)
            if not _TWO_DIGITS.fullmatch(value):
                raise ValueError(f"{name} must be a two-digit string, got {value!r}")

    def to_dict(self) -> Dict[str, Any]:
        return {"status": "invalid_checksum", "expected": self.expected, "actual": self.actual}


OgmValidationResult = Union[OgmValid, OgmCorrectedValid, OgmInvalidFormat, OgmInvalidChecksum]
