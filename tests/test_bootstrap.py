"""Tests for writing the default configuration file."""
from pathlib import Path
from unittest.mock import mock_open, patch

import pytest

from config.bootstrap import DefaultConfigGenerator, generate_default_config
from config.config import DEFAULT_CONFIG_PATH, ConfigLoader, default_config_text, parse_config
from core.exceptions import ConfigConflictError, ConfigIOError, MissingEnvironmentError


class TestDefaultConfigGenerator:
    """Tests for DefaultConfigGenerator."""

    def test_creates_directories_and_writes_template(self, home, user_config):
        # Arrange
        assert not (home / ".config").exists()

        # Act
        path = DefaultConfigGenerator().generate()

        # Assert
        assert path == user_config
        assert user_config.parent.is_dir()
        assert user_config.read_bytes() == DEFAULT_CONFIG_PATH.read_bytes()

    def test_existing_file_is_not_modified(self, home, user_config):
        # Arrange
        user_config.parent.mkdir(parents=True)
        user_config.write_text("# mine\n", encoding="utf-8")

        # Assert
        with pytest.raises(ConfigConflictError) as exc_info:
            DefaultConfigGenerator().generate()

        assert "already exists at ~/.config/tailspin/config.toml" in str(exc_info.value)
        assert exc_info.value.kind == "conflict"
        assert user_config.read_text(encoding="utf-8") == "# mine\n"

    def test_generated_file_is_picked_up_by_loader(self, home):
        # Act
        DefaultConfigGenerator().generate()
        config = ConfigLoader().load()

        # Assert
        assert config == parse_config(default_config_text(), "<default config>")

    def test_custom_template(self, home, user_config):
        # Arrange
        generator = DefaultConfigGenerator(template="[groups.number]\nstyle = {}\n")

        # Act
        generator.generate()

        # Assert
        assert user_config.read_text(encoding="utf-8") == "[groups.number]\nstyle = {}\n"

    def test_missing_home(self):
        # Assert
        with pytest.raises(MissingEnvironmentError):
            DefaultConfigGenerator(environ={}).generate()

    def test_directory_creation_failure(self, home, user_config):
        # Assert
        with patch.object(Path, "mkdir", side_effect=PermissionError("denied")):
            with pytest.raises(ConfigIOError) as exc_info:
                DefaultConfigGenerator().generate()

        assert "Failed to create the directory for ~/.config/tailspin/config.toml" in str(exc_info.value)
        assert not user_config.exists()

    def test_write_failure_leaves_directories(self, home, user_config):
        # Arrange
        handle = mock_open()
        handle.return_value.write.side_effect = OSError("disk full")

        # Assert
        with patch("config.bootstrap.open", handle, create=True):
            with pytest.raises(ConfigIOError, match="Failed to write to the config file"):
                DefaultConfigGenerator().generate()

        assert user_config.parent.is_dir()

    def test_file_appearing_after_check_is_a_conflict(self, home, user_config):
        # Arrange
        handle = mock_open()
        handle.side_effect = FileExistsError("exists")

        # Assert
        with patch("config.bootstrap.open", handle, create=True):
            with pytest.raises(ConfigConflictError):
                DefaultConfigGenerator().generate()

    def test_existence_check_failure(self, home):
        # Assert
        with patch.object(Path, "stat", side_effect=PermissionError("denied")):
            with pytest.raises(ConfigIOError, match="Failed to check if file"):
                DefaultConfigGenerator().generate()


class TestGenerateDefaultConfig:
    """Tests for the Result-returning wrapper."""

    def test_success_then_conflict(self, home, user_config):
        # Act
        first = generate_default_config()
        second = generate_default_config()

        # Assert
        assert first.is_success()
        assert first.unwrap() == user_config
        assert second.is_failure()
        assert second.kind == "conflict"
