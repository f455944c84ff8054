"""Tunable engine settings, merged from the active profile over defaults."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .profile_loader import ProfileConfig
from .profile_manager import get_profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectionSettings:
    """Thresholds used by the direction cascade.

    Attributes:
        name_similarity_threshold: Minimum Jaro-Winkler score for a fuzzy name match
        name_match_confidence: Confidence reported for name-based verdicts
        default_hint_confidence: Confidence used when the AI hint has none
    """

    name_similarity_threshold: float = 0.90
    name_match_confidence: float = 0.80
    default_hint_confidence: float = 0.60

    def __post_init__(self):
        for attr in ("name_similarity_threshold", "name_match_confidence", "default_hint_confidence"):
            value = getattr(self, attr)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{attr} must be between 0.0 and 1.0, got {value}")


@dataclass(frozen=True)
class OgmSettings:
    """Bounds for the OCR correction search.

    Attributes:
        max_corrections: Largest number of simultaneous substitutions tried
    """

    max_corrections: int = 4

    def __post_init__(self):
        if not 0 <= self.max_corrections <= 12:
            raise ValueError(f"max_corrections must be between 0 and 12, got {self.max_corrections}")


def _as_unit_float(raw: Dict[str, Any], key: str, default: float) -> float:
    if key not in raw:
        return default
    try:
        value = float(raw[key])
    except (TypeError, ValueError):
        logger.warning(f"Invalid direction.{key}: {raw[key]!r}, using {default}")
        return default
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        logger.warning(f"direction.{key} out of range: {value}, using {default}")
        return default
    return value


def direction_settings_from_profile(profile: Optional[ProfileConfig] = None) -> DirectionSettings:
    """Return DirectionSettings with profile values applied over defaults."""
    active = profile or get_profile()
    raw = getattr(active, "direction", None)
    if not isinstance(raw, dict):
        raw = {}
    defaults = DirectionSettings()
    return DirectionSettings(
        name_similarity_threshold=_as_unit_float(
            raw, "name_similarity_threshold", defaults.name_similarity_threshold
        ),
        name_match_confidence=_as_unit_float(raw, "name_match_confidence", defaults.name_match_confidence),
        default_hint_confidence=_as_unit_float(
            raw, "default_hint_confidence", defaults.default_hint_confidence
        ),
    )


def ogm_settings_from_profile(profile: Optional[ProfileConfig] = None) -> OgmSettings:
    """Return OgmSettings with profile values applied over defaults."""
    active = profile or get_profile()
    raw = getattr(active, "ogm", None)
    if not isinstance(raw, dict):
        raw = {}
    default = OgmSettings().max_corrections
    value = raw.get("max_corrections", default)
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 12:
        logger.warning(f"Invalid ogm.max_corrections: {value!r}, using {default}")
        value = default
    return OgmSettings(max_corrections=value)
