"""Retry feedback for the extraction agent when a payment reference fails validation."""

from ..models.ogm_result import OgmInvalidChecksum, OgmInvalidFormat, OgmValidationResult
from ..pipeline.ogm_validator import OCR_SUBSTITUTIONS


def build_ogm_feedback(field: str, result: OgmValidationResult) -> str:
    """Build the re-read instruction for a failed OGM check.

    Args:
        field: Extraction field holding the reference (e.g. "payment_reference")
        result: Validation result for that field

    Returns:
        Multi-line feedback text, or "" when the reference is valid
    """
    if result.is_valid:
        return ""

    if isinstance(result, OgmInvalidFormat):
        lines = [
            f"OGM FORMAT INVALID in '{field}'",
            "",
            f"Problem: malformed structured communication ({result.reason})",
        ]
    else:
        lines = [
            f"OGM CHECKSUM FAILED in '{field}'",
            "",
            "Problem: structured communication check digits do not match",
        ]
    lines += [
        "",
        "SPECIFIC ACTION: Re-read the PAYMENT SECTION of the document.",
        "Look for the structured communication (+++XXX/XXXX/XXXXX+++ format).",
        "",
    ]

    if isinstance(result, OgmInvalidChecksum):
        lines += [
            f"Expected check digit: {result.expected}",
            f"Found check digit: {result.actual}",
            "",
        ]

    lines.append("Common OCR mistakes in payment references:")
    for digit, letter in OCR_SUBSTITUTIONS:
        lines.append(f"  - {digit} <-> {letter}")
    lines += [
        "",
        "Please re-extract the payment reference, checking each character",
        "carefully against the document.",
    ]
    return "\n".join(lines)
