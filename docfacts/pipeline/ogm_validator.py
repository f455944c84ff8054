"""Validation of Belgian structured communications (OGM/VCS payment references).

A structured communication is written +++AAA/BBBB/CCCYY+++ (or with *** as
delimiters). The first 10 digits are the payload, YY is the check value:
payload mod 97, with 97 used when the remainder is 0.

Scanned references often carry letters where digits belong (O for 0, B for 8
and so on). When the raw reference has such letters in digit positions the
validator searches for the smallest set of substitutions that produces a
well-formed reference with a correct checksum.
"""

from __future__ import annotations

import logging
import re
from itertools import combinations
from typing import List, Optional, Sequence, Tuple

from ..config.settings import OgmSettings
from ..models.ogm_result import (
    OgmCorrectedValid,
    OgmCorrection,
    OgmInvalidChecksum,
    OgmInvalidFormat,
    OgmValid,
    OgmValidationResult,
)

logger = logging.getLogger(__name__)

# (digit, look-alike letter), in search priority order
OCR_SUBSTITUTIONS: Tuple[Tuple[str, str], ...] = (
    ("0", "O"),
    ("1", "I"),
    ("8", "B"),
    ("5", "S"),
    ("6", "G"),
)

_LETTER_TO_DIGIT = {letter: digit for digit, letter in OCR_SUBSTITUTIONS}
_LETTER_PRIORITY = {letter: index for index, (_, letter) in enumerate(OCR_SUBSTITUTIONS)}

_SHAPE = re.compile(
    r"(?P<open>\+{3}|\*{3})"
    r"(?P<a>[0-9A-Za-z]{3})/(?P<b>[0-9A-Za-z]{4})/(?P<c>[0-9A-Za-z]{5})"
    r"(?P<close>\+{3}|\*{3})"
)

PAYLOAD_LENGTH = 10
REFERENCE_LENGTH = 12
MAX_BASE = 10 ** PAYLOAD_LENGTH - 1

# (priority, position, from, to)
_Candidate = Tuple[int, int, str, str]


def compute_checksum(payload: str) -> str:
    """Compute the two-digit check value for a 10-digit payload.

    Raises:
        ValueError: If payload is not exactly 10 digits
    """
    if len(payload) != PAYLOAD_LENGTH or not payload.isdigit():
        raise ValueError(f"Payload must be {PAYLOAD_LENGTH} digits, got {payload!r}")
    remainder = int(payload) % 97
    return f"{remainder or 97:02d}"


def format_ogm(digits: str) -> str:
    """Render 12 digits as +++AAA/BBBB/CCCYY+++.

    Raises:
        ValueError: If digits is not exactly 12 digits
    """
    if len(digits) != REFERENCE_LENGTH or not digits.isdigit():
        raise ValueError(f"Reference must be {REFERENCE_LENGTH} digits, got {digits!r}")
    return f"+++{digits[:3]}/{digits[3:7]}/{digits[7:]}+++"


def generate_ogm(base: int) -> str:
    """Build a valid structured communication from a numeric base.

    Args:
        base: Payload value, 0 to 9999999999 (zero-padded to 10 digits)

    Returns:
        Reference in +++AAA/BBBB/CCCYY+++ form

    Raises:
        ValueError: If base is out of range
    """
    if isinstance(base, bool) or not isinstance(base, int) or not 0 <= base <= MAX_BASE:
        raise ValueError(f"base must be an integer between 0 and {MAX_BASE}, got {base!r}")
    payload = f"{base:0{PAYLOAD_LENGTH}d}"
    return format_ogm(payload + compute_checksum(payload))


def _digit_positions(match: re.Match) -> List[int]:
    positions: List[int] = []
    for group in ("a", "b", "c"):
        start, end = match.span(group)
        positions.extend(range(start, end))
    return positions


def _checksum_verdict(digits: str) -> OgmValidationResult:
    expected = compute_checksum(digits[:PAYLOAD_LENGTH])
    actual = digits[PAYLOAD_LENGTH:]
    if expected != actual:
        return OgmInvalidChecksum(expected=expected, actual=actual)
    return OgmValid(normalized=format_ogm(digits))


class OgmValidator:
    """Stateless OGM validator with bounded OCR correction.

    Build one at startup from OgmSettings and share it.
    """

    def __init__(self, settings: Optional[OgmSettings] = None):
        self.settings = settings or OgmSettings()

    def validate(self, raw: Optional[str]) -> OgmValidationResult:
        """Validate a raw structured communication.

        Args:
            raw: Reference as extracted, e.g. "+++123/4567/89002+++"

        Returns:
            OgmValid, OgmCorrectedValid, OgmInvalidFormat or OgmInvalidChecksum
        """
        if raw is None or not raw.strip():
            return OgmInvalidFormat(reason="reference is empty")

        reference = raw.strip()
        match = _SHAPE.fullmatch(reference)
        if match is None:
            digit_count = sum(ch.isdigit() for ch in reference)
            return OgmInvalidFormat(
                reason=(
                    f"expected +++XXX/XXXX/XXXXX+++ or ***XXX/XXXX/XXXXX*** with "
                    f"{REFERENCE_LENGTH} digits, got {reference!r} ({digit_count} digits)"
                )
            )
        if match.group("open") != match.group("close"):
            return OgmInvalidFormat(
                reason=f"opening delimiter {match.group('open')} does not match closing {match.group('close')}"
            )

        positions = _digit_positions(match)
        chars = [reference[p] for p in positions]
        if all(ch.isdigit() for ch in chars):
            result = _checksum_verdict("".join(chars))
            logger.debug(f"OGM {reference}: {type(result).__name__}")
            return result

        bad = [(p, ch) for p, ch in zip(positions, chars) if not ch.isdigit()]
        uncorrectable = [(p, ch) for p, ch in bad if ch not in _LETTER_TO_DIGIT]
        if uncorrectable:
            listed = ", ".join(f"{ch!r} at position {p}" for p, ch in uncorrectable)
            return OgmInvalidFormat(reason=f"non-digit characters in digit positions: {listed}")

        corrected = self._search_corrections(reference, positions)
        if corrected is not None:
            logger.debug(
                f"OGM {reference}: corrected with {len(corrected.corrections)} substitution(s) "
                f"to {corrected.normalized}"
            )
            return corrected

        listed = ", ".join(str(p) for p, _ in bad)
        if len(bad) > self.settings.max_corrections:
            detail = f"more than the {self.settings.max_corrections} OCR corrections allowed"
        else:
            detail = "OCR correction did not produce a valid checksum"
        return OgmInvalidFormat(reason=f"non-digit characters at positions {listed}; {detail}")

    def _candidates(self, reference: str, positions: Sequence[int]) -> List[_Candidate]:
        candidates = [
            (_LETTER_PRIORITY[reference[p]], p, reference[p], _LETTER_TO_DIGIT[reference[p]])
            for p in positions
            if reference[p] in _LETTER_TO_DIGIT
        ]
        return sorted(candidates)

    def _search_corrections(self, reference: str, positions: Sequence[int]) -> Optional[OgmCorrectedValid]:
        """Try substitution sets smallest first, then by pair priority and position."""
        candidates = self._candidates(reference, positions)
        limit = min(self.settings.max_corrections, len(candidates))
        for size in range(1, limit + 1):
            for combo in combinations(candidates, size):
                chars = list(reference)
                for _, position, _, digit in combo:
                    chars[position] = digit
                digits = "".join(chars[p] for p in positions)
                if not digits.isdigit():
                    continue
                if isinstance(_checksum_verdict(digits), OgmValid):
                    corrections = tuple(
                        OgmCorrection(position=p, from_char=src, to_char=dst)
                        for _, p, src, dst in sorted(combo, key=lambda c: c[1])
                    )
                    return OgmCorrectedValid(
                        original=reference,
                        normalized=format_ogm(digits),
                        corrections=corrections,
                    )
        return None
