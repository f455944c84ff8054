"""OGM validation exposed as a tool for extraction agents.

Agents that can only consume text call the tool and get a diagnostic line;
programmatic callers use validate() and get the structured result.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from ..models.ogm_result import (
    OgmCorrectedValid,
    OgmInvalidChecksum,
    OgmInvalidFormat,
    OgmValid,
    OgmValidationResult,
)
from ..pipeline.ogm_validator import OCR_SUBSTITUTIONS, OgmValidator

logger = logging.getLogger(__name__)

TOOL_NAME = "validate_ogm"


class ValidateOgmArgs(BaseModel):
    """Arguments accepted by the validate_ogm tool."""

    reference: str = Field(
        ...,
        description="Structured communication exactly as read, e.g. +++123/4567/89002+++",
    )


def _pairs_text() -> str:
    return ", ".join(f"{digit}<->{letter}" for digit, letter in OCR_SUBSTITUTIONS)


def describe_result(result: OgmValidationResult) -> str:
    """Render a validation result as one human/LLM-readable line."""
    if isinstance(result, OgmValid):
        return f"VALID: checksum verified. Normalized: {result.normalized}"
    if isinstance(result, OgmCorrectedValid):
        fixes = ", ".join(
            f"position {c.position} '{c.from_char}' -> '{c.to_char}'" for c in result.corrections
        )
        return (
            f"VALID (OCR-corrected): checksum verified after correcting {result.original}. "
            f"Corrections: {fixes}. Normalized: {result.normalized}"
        )
    if isinstance(result, OgmInvalidFormat):
        return (
            f"INVALID: format error, {result.reason}. "
            f"Expected +++XXX/XXXX/XXXXX+++ with 12 digits; re-read the payment reference."
        )
    if isinstance(result, OgmInvalidChecksum):
        return (
            f"INVALID: checksum failed, expected {result.expected} found {result.actual}. "
            f"Re-read the digits; common OCR confusions: {_pairs_text()}."
        )
    raise TypeError(f"Unhandled OGM validation result {type(result).__name__}")


class ValidateOgmTool:
    """Callable tool wrapping an OgmValidator."""

    name = TOOL_NAME
    description = (
        "Validate a Belgian structured communication (OGM/VCS payment reference, "
        "+++XXX/XXXX/XXXXX+++). Checks the format and the mod-97 check digits and "
        f"tries to correct OCR misreads ({_pairs_text()}) before reporting failure."
    )

    def __init__(self, validator: Optional[OgmValidator] = None):
        self.validator = validator or OgmValidator()

    def validate(self, reference: str) -> OgmValidationResult:
        """Structured result for programmatic callers."""
        return self.validator.validate(reference)

    def __call__(self, reference: str) -> str:
        """Diagnostic text for callers that only accept natural language."""
        result = self.validate(reference)
        logger.debug(f"{self.name}({reference!r}) -> {type(result).__name__}")
        return describe_result(result)

    def run(self, arguments: Dict[str, Any]) -> str:
        """Run the tool from raw JSON arguments as sent by an agent.

        Raises:
            pydantic.ValidationError: If arguments do not match ValidateOgmArgs
        """
        args = ValidateOgmArgs.model_validate(arguments)
        return self(args.reference)

    def definition(self) -> Dict[str, Any]:
        """Function-calling definition (name, description, JSON schema parameters)."""
        return {
            "name": self.name,
            "description": self.description,
            "parameters": ValidateOgmArgs.model_json_schema(),
        }
