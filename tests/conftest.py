"""Shared pytest fixtures and configuration."""

import pytest

from job_settings import constants

ACTIVITY_ID = "123e4567-e89b-12d3-a456-426614174000"


@pytest.fixture
def sample_data_map(tmp_path):
    """Valid job data map with directories under a temporary root."""
    return {
        constants.ACTIVITY_ID: ACTIVITY_ID,
        constants.UPLOAD_SUCCESS_DIR: str(tmp_path / "upload" / "success"),
        constants.PROCESSING_SUCCESS_DIR: str(tmp_path / "processing" / "success"),
        constants.PROCESSING_ERRORS_DIR: str(tmp_path / "processing" / "errors"),
        constants.STATUS_FILE_EXTENSION: ".Status",
        constants.STATUS_CHECK_INTERVAL: 5,
    }


@pytest.fixture
def blocking_file(tmp_path):
    """Regular file that prevents creating a directory at or below its path."""
    file_path = tmp_path / "not-a-directory"
    file_path.write_text("occupied")
    return file_path
