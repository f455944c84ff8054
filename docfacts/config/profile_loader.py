"""Profile loader for configurable engine behavior."""

import yaml
from pathlib import Path
from typing import Dict, Any
from dataclasses import dataclass, field

from . import get_profiles_dir_override


@dataclass
class ProfileConfig:
    """Configuration profile for the direction and OGM engines."""
    name: str
    description: str = ""
    direction: Dict[str, Any] = field(default_factory=dict)
    ogm: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProfileConfig':
        """Create ProfileConfig from dictionary."""
        return cls(
            name=data.get('name', 'default'),
            description=data.get('description', ''),
            direction=data.get('direction') or {},
            ogm=data.get('ogm') or {},
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'name': self.name,
            'description': self.description,
            'direction': self.direction,
            'ogm': self.ogm,
        }


def get_profiles_dir() -> Path:
    """Get directory containing profile YAML files.

    Returns:
        Path to profiles directory (DOCFACTS_PROFILES_DIR or configs/profiles)
    """
    override = get_profiles_dir_override()
    if override is not None:
        return override
    # docfacts/config/profile_loader.py -> docfacts/config -> docfacts -> root
    project_root = Path(__file__).resolve().parent.parent.parent
    return project_root / "configs" / "profiles"


def load_profile(profile_name: str = "default") -> ProfileConfig:
    """Load a configuration profile.

    Args:
        profile_name: Name of profile to load (without .yaml extension)

    Returns:
        ProfileConfig object

    Raises:
        FileNotFoundError: If profile file doesn't exist
        ValueError: If profile file is invalid
    """
    profile_path = get_profiles_dir() / f"{profile_name}.yaml"

    if not profile_path.exists():
        raise FileNotFoundError(f"Profile not found: {profile_name} (expected at {profile_path})")

    try:
        with open(profile_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in profile {profile_name}: {e}") from e

    if not data:
        raise ValueError(f"Profile file is empty: {profile_path}")
    if not isinstance(data, dict):
        raise ValueError(f"Profile {profile_name} must be a mapping, got {type(data).__name__}")

    return ProfileConfig.from_dict(data)


def list_available_profiles() -> list[str]:
    """List all available profile names.

    Returns:
        List of profile names (without .yaml extension)
    """
    profiles_dir = get_profiles_dir()

    if not profiles_dir.exists():
        return ["default"]

    profiles = [profile_file.stem for profile_file in profiles_dir.glob("*.yaml")]
    return sorted(profiles) if profiles else ["default"]


def get_default_profile() -> ProfileConfig:
    """Get default profile (always available).

    Returns:
        Default ProfileConfig; built-in defaults when no default.yaml exists
    """
    try:
        return load_profile("default")
    except FileNotFoundError:
        return ProfileConfig(
            name="default",
            description="Built-in defaults",
        )
