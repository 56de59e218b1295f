"""Unit tests for core infrastructure components."""
import io

import pytest

from core.error_handler import as_result, exit_on_failure, report_failure
from core.exceptions import (
    ConfigConflictError,
    ConfigIOError,
    ConfigSchemaError,
    ConfigurationError,
    MissingEnvironmentError,
    TailspinError,
)
from core.result import Failure, Success


class TestResult:
    """Tests for Result type."""

    def test_success_creation(self):
        # Act
        result = Success(42)

        # Assert
        assert result.is_success()
        assert not result.is_failure()
        assert result.unwrap() == 42

    def test_failure_creation(self):
        # Arrange
        error = ConfigIOError("cannot read", "/tmp/x")

        # Act
        result = Failure(error)

        # Assert
        assert result.is_failure()
        assert not result.is_success()
        assert result.error is error
        assert result.kind == "io"

    def test_failure_unwrap_raises(self):
        # Arrange
        result = Failure(MissingEnvironmentError("HOME"))

        # Assert
        with pytest.raises(MissingEnvironmentError):
            result.unwrap()


class TestExceptions:
    """Tests for the error taxonomy."""

    def test_hierarchy(self):
        # Assert
        for error_type in (MissingEnvironmentError, ConfigIOError, ConfigSchemaError, ConfigConflictError):
            assert issubclass(error_type, ConfigurationError)
            assert issubclass(error_type, TailspinError)

    def test_kinds(self):
        # Assert
        assert MissingEnvironmentError("HOME").kind == "environment"
        assert ConfigIOError("x").kind == "io"
        assert ConfigSchemaError("x").kind == "schema"
        assert ConfigConflictError("x").kind == "conflict"

    def test_missing_environment_message(self):
        # Act
        error = MissingEnvironmentError("HOME")

        # Assert
        assert error.variable == "HOME"
        assert str(error) == "HOME environment variable not set"

    def test_schema_error_message(self):
        # Act
        error = ConfigSchemaError("unknown color 'x'", field="groups.date.style.fg", source="a.toml")

        # Assert
        assert str(error) == "groups.date.style.fg: unknown color 'x' (in a.toml)"

    def test_schema_error_with_source(self):
        # Arrange
        error = ConfigSchemaError("missing field `style`", field="groups.date")

        # Act
        attributed = error.with_source("b.toml")

        # Assert
        assert attributed.field == "groups.date"
        assert attributed.source == "b.toml"
        assert error.source is None


class TestErrorHandling:
    """Tests for as_result, report_failure and exit_on_failure."""

    def test_as_result_success(self):
        # Arrange
        @as_result()
        def double(x):
            return x * 2

        # Act
        result = double(5)

        # Assert
        assert result.is_success()
        assert result.unwrap() == 10

    def test_as_result_catches_project_errors(self):
        # Arrange
        @as_result()
        def fail():
            raise ConfigConflictError("exists")

        # Act
        result = fail()

        # Assert
        assert result.is_failure()
        assert isinstance(result.error, ConfigConflictError)

    def test_as_result_lets_other_errors_propagate(self):
        # Arrange
        @as_result(ConfigurationError)
        def bug():
            raise KeyError("oops")

        # Assert
        with pytest.raises(KeyError):
            bug()

    def test_report_failure(self):
        # Arrange
        stream = io.StringIO()

        # Act
        report_failure(ConfigIOError("Could not read file a.toml"), stream)

        # Assert
        assert stream.getvalue() == "Could not read file a.toml\n"

    def test_exit_on_failure_exits(self, capsys):
        # Assert
        with pytest.raises(SystemExit) as exc_info:
            exit_on_failure(Failure(ConfigConflictError("Config file already exists at ~/x")))

        assert exc_info.value.code == 1
        assert "Config file already exists at ~/x" in capsys.readouterr().err

    def test_exit_on_failure_returns_value(self):
        # Assert
        assert exit_on_failure(Success("ok")) == "ok"
