"""Direction and payment-reference engines."""

from .direction_resolver import DirectionResolver, UnsupportedExtractionKind
from .ogm_validator import OgmValidator, compute_checksum, format_ogm, generate_ogm

__all__ = [
    "DirectionResolver",
    "OgmValidator",
    "UnsupportedExtractionKind",
    "compute_checksum",
    "format_ogm",
    "generate_ogm",
]
