"""docfacts: direction resolution and OGM validation for bookkeeping documents."""

from .engines import Engines, create_engines
from .pipeline.direction_resolver import DirectionResolver
from .pipeline.ogm_validator import OgmValidator

__all__ = ["DirectionResolver", "Engines", "OgmValidator", "create_engines"]
