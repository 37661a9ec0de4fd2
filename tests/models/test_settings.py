"""Tests for launcher settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from dockercmd.models.settings import LauncherSettings, default_runtime_executable


class TestLauncherSettings:
    """Test suite for LauncherSettings."""

    def test_from_env_defaults(self):
        """Test settings with an empty environment."""
        settings = LauncherSettings.from_env({})

        assert settings.image_prefix is None
        assert settings.definitions_dir == Path.home() / ".dockercmd"
        assert settings.runtime_executable == default_runtime_executable()
        assert settings.image_query_timeout == 10.0
        assert settings.log_level == "WARNING"

    def test_from_env_overrides(self, tmp_path):
        """Test settings read from every variable."""
        settings = LauncherSettings.from_env({
            "DOCKER_REPO_PREFIX": "myorg",
            "DOCKERCMD_HOME": str(tmp_path),
            "DOCKERCMD_RUNTIME": "podman",
            "DOCKERCMD_IMAGE_QUERY_TIMEOUT": "2.5",
            "DOCKERCMD_LOG_LEVEL": "debug",
        })

        assert settings.image_prefix == "myorg"
        assert settings.definitions_dir == tmp_path
        assert settings.runtime_executable == "podman"
        assert settings.image_query_timeout == 2.5
        assert settings.log_level == "DEBUG"

    def test_blank_prefix_is_unset(self):
        """Test that a whitespace prefix disables prefixing."""
        settings = LauncherSettings.from_env({"DOCKER_REPO_PREFIX": "   "})

        assert settings.image_prefix is None

    def test_invalid_timeout(self):
        """Test that a non-positive timeout is rejected."""
        with pytest.raises(ValidationError):
            LauncherSettings.from_env({"DOCKERCMD_IMAGE_QUERY_TIMEOUT": "0"})

    def test_unknown_log_level(self):
        """Test that an unknown log level is rejected."""
        with pytest.raises(ValidationError):
            LauncherSettings.from_env({"DOCKERCMD_LOG_LEVEL": "chatty"})

    @pytest.mark.parametrize("platform,expected", [
        ("win32", "docker.exe"),
        ("linux", "docker"),
        ("darwin", "docker"),
    ])
    def test_default_runtime_executable(self, platform, expected):
        """Test the platform-specific executable name."""
        assert default_runtime_executable(platform) == expected
