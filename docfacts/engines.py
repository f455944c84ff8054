"""Construction of the engines from a configuration profile."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .config.profile_loader import ProfileConfig
from .config.profile_manager import get_profile
from .config.settings import direction_settings_from_profile, ogm_settings_from_profile
from .pipeline.direction_resolver import DirectionResolver
from .pipeline.ogm_validator import OgmValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Engines:
    """Engines built once at startup and passed to whoever needs them."""

    direction: DirectionResolver
    ogm: OgmValidator
    profile_name: str = "default"


def create_engines(profile: Optional[ProfileConfig] = None) -> Engines:
    """Build DirectionResolver and OgmValidator from a profile.

    Args:
        profile: Profile to read settings from (active profile if None)

    Returns:
        Engines holding both stateless services
    """
    active = profile or get_profile()
    direction_settings = direction_settings_from_profile(active)
    ogm_settings = ogm_settings_from_profile(active)
    name = active.name
    logger.debug(f"Creating engines from profile '{name}': {direction_settings}, {ogm_settings}")
    return Engines(
        direction=DirectionResolver(direction_settings),
        ogm=OgmValidator(ogm_settings),
        profile_name=name,
    )
