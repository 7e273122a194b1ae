"""Unit tests for directories module."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from job_settings.directories import ensure_directory
from job_settings.errors import (
    ConfigErrorKind,
    DirectoryAccessError,
    MissingConfigurationError,
)


class TestEnsureDirectory:
    """Tests for the ensure_directory function."""

    def test_creates_missing_directory_with_parents(self, tmp_path):
        """Test a missing directory and its parents are created."""
        target = tmp_path / "a" / "b" / "c"

        result = ensure_directory(str(target))

        assert result == target
        assert target.is_dir()

    def test_existing_directory_is_success(self, tmp_path):
        """Test an existing directory is accepted."""
        target = tmp_path / "existing"
        target.mkdir()
        (target / "keep.txt").write_text("data")

        result = ensure_directory(target)

        assert result == target
        assert (target / "keep.txt").read_text() == "data"

    def test_idempotent(self, tmp_path):
        """Test calling twice on the same path succeeds both times."""
        target = tmp_path / "twice"

        assert ensure_directory(target) == ensure_directory(target)
        assert target.is_dir()

    @pytest.mark.parametrize("path", ["", None, Path("")])
    def test_empty_path(self, path):
        """Test an empty path is reported as missing configuration."""
        with pytest.raises(MissingConfigurationError) as exc_info:
            ensure_directory(path, "UploadSuccessDir")

        assert exc_info.value.kind is ConfigErrorKind.MISSING_CONFIGURATION
        assert exc_info.value.field == "UploadSuccessDir"

    def test_path_is_regular_file(self, blocking_file):
        """Test a path colliding with a regular file is reported."""
        with pytest.raises(DirectoryAccessError) as exc_info:
            ensure_directory(str(blocking_file), "ProcessingErrorsDir")

        error = exc_info.value
        assert error.kind is ConfigErrorKind.DIRECTORY_ACCESS_FAILURE
        assert error.field == "ProcessingErrorsDir"
        assert isinstance(error.cause, OSError)
        assert error.__cause__ is error.cause

    def test_parent_is_regular_file(self, blocking_file):
        """Test a path below a regular file is reported."""
        with pytest.raises(DirectoryAccessError) as exc_info:
            ensure_directory(blocking_file / "child")

        assert isinstance(exc_info.value.cause, OSError)

    def test_invalid_path_syntax(self, tmp_path):
        """Test a path with an embedded NUL byte is reported."""
        with pytest.raises(DirectoryAccessError) as exc_info:
            ensure_directory(f"{tmp_path}/bad\0name", "UploadSuccessDir")

        assert isinstance(exc_info.value.cause, ValueError)

    @patch("pathlib.Path.mkdir")
    def test_permission_denied(self, mock_mkdir, tmp_path):
        """Test a permission error is wrapped with its message."""
        mock_mkdir.side_effect = PermissionError("Permission denied")

        with pytest.raises(DirectoryAccessError) as exc_info:
            ensure_directory(tmp_path / "locked", "ProcessingSuccessDir")

        assert "Permission denied" in str(exc_info.value)
        assert str(exc_info.value).startswith("ProcessingSuccessDir: ")
        mock_mkdir.assert_called_once_with(parents=True, exist_ok=True)

    def test_logs_directory(self, tmp_path, caplog):
        """Test the directory is logged at debug level."""
        with caplog.at_level(logging.DEBUG):
            ensure_directory(tmp_path / "logged")

        assert "Ensuring directory" in caplog.text

    def test_returns_path_for_string(self, tmp_path):
        """Test a string path is returned as a Path."""
        assert isinstance(ensure_directory(str(tmp_path)), Path)
