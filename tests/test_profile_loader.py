"""Unit tests for profile loader."""

import pytest

from docfacts.config.profile_loader import (
    ProfileConfig,
    get_default_profile,
    get_profiles_dir,
    list_available_profiles,
    load_profile,
)
from docfacts.config.profile_manager import get_profile, reset_profile, set_profile


@pytest.fixture(autouse=True)
def clean_profile_state(monkeypatch):
    """Use the repository profiles and no active profile for each test."""
    monkeypatch.delenv("DOCFACTS_PROFILES_DIR", raising=False)
    reset_profile()
    yield
    reset_profile()


@pytest.fixture
def profiles_dir(tmp_path, monkeypatch):
    """Point the loader at an empty temporary profiles directory."""
    monkeypatch.setenv("DOCFACTS_PROFILES_DIR", str(tmp_path))
    return tmp_path


class TestProfileConfig:
    """Test ProfileConfig dataclass."""

    def test_profile_config_creation(self):
        """Test creating ProfileConfig."""
        config = ProfileConfig(
            name="test",
            description="Test profile",
            direction={"name_similarity_threshold": 0.95},
            ogm={"max_corrections": 2},
        )

        assert config.name == "test"
        assert config.direction["name_similarity_threshold"] == 0.95
        assert config.ogm["max_corrections"] == 2

    def test_profile_config_from_dict(self):
        """Test creating ProfileConfig from dictionary."""
        config = ProfileConfig.from_dict({"name": "test", "ogm": {"max_corrections": 1}})

        assert config.name == "test"
        assert config.description == ""
        assert config.direction == {}
        assert config.ogm == {"max_corrections": 1}

    def test_profile_config_from_dict_with_null_sections(self):
        """Test that empty YAML sections become empty dicts."""
        config = ProfileConfig.from_dict({"name": "test", "direction": None})
        assert config.direction == {}

    def test_profile_config_to_dict(self):
        """Test converting ProfileConfig to dictionary."""
        config = ProfileConfig(name="test", description="Test", ogm={"max_corrections": 3})

        data = config.to_dict()

        assert data == {
            "name": "test",
            "description": "Test",
            "direction": {},
            "ogm": {"max_corrections": 3},
        }


class TestProfileLoader:
    """Test profile loading functions."""

    def test_get_profiles_dir(self):
        """Test that the repository profiles directory is found."""
        profiles_dir = get_profiles_dir()
        assert profiles_dir.name == "profiles"
        assert profiles_dir.parent.name == "configs"

    def test_get_profiles_dir_override(self, profiles_dir):
        assert get_profiles_dir() == profiles_dir

    def test_load_default_profile(self):
        """Test loading the shipped default profile."""
        profile = load_profile("default")

        assert profile.name == "default"
        assert profile.direction["name_similarity_threshold"] == 0.90
        assert profile.ogm["max_corrections"] == 4

    def test_load_strict_profile(self):
        profile = load_profile("strict")
        assert profile.ogm["max_corrections"] == 0

    def test_load_nonexistent_profile(self):
        """Test loading non-existent profile raises error."""
        with pytest.raises(FileNotFoundError):
            load_profile("nonexistent_profile_xyz")

    def test_load_invalid_yaml(self, profiles_dir):
        (profiles_dir / "broken.yaml").write_text("direction: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_profile("broken")

    def test_load_empty_profile(self, profiles_dir):
        (profiles_dir / "empty.yaml").write_text("", encoding="utf-8")
        with pytest.raises(ValueError, match="empty"):
            load_profile("empty")

    def test_load_non_mapping_profile(self, profiles_dir):
        (profiles_dir / "list.yaml").write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_profile("list")

    def test_list_available_profiles(self):
        """Test listing available profiles."""
        profiles = list_available_profiles()

        assert "default" in profiles
        assert "strict" in profiles
        assert profiles == sorted(profiles)

    def test_list_available_profiles_empty_dir(self, profiles_dir):
        assert list_available_profiles() == ["default"]

    def test_get_default_profile_without_file(self, profiles_dir):
        """Test built-in defaults when no default.yaml exists."""
        profile = get_default_profile()
        assert profile.name == "default"
        assert profile.direction == {}


class TestProfileManager:
    """Test profile manager functions."""

    def test_get_profile_default(self):
        """Test getting default profile."""
        assert get_profile().name == "default"

    def test_set_profile(self):
        """Test setting profile."""
        profile = set_profile("strict")

        assert profile.name == "strict"
        assert get_profile() is profile

    def test_set_unknown_profile(self):
        with pytest.raises(FileNotFoundError):
            set_profile("nonexistent_profile_xyz")

    def test_reset_profile(self):
        """Test resetting profile."""
        set_profile("strict")
        reset_profile()
        assert get_profile().name == "default"
