"""Settings of the processing job.

A `ProcessingJobSettings` instance is built once per job execution from the
job data map supplied when the job fires. Initialization checks the settings
in a fixed order and stops at the first problem, so operators always see the
first misconfigured key.
"""

import logging
import re
from collections.abc import Mapping
from pathlib import Path
from uuid import UUID

from pydantic import (
    BaseModel,
    ConfigDict,
    DirectoryPath,
    Field,
    ValidationError,
    field_validator,
)

from job_settings import constants
from job_settings.data_map import JobDataMap
from job_settings.directories import ensure_directory
from job_settings.errors import (
    DirectoryAccessError,
    InvalidFormatError,
    MissingConfigurationError,
)

logger = logging.getLogger(__name__)

NIL_UUID = UUID(int=0)

_HYPHENATED_GUID = (
    "[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
# 32 digits, hyphenated, or hyphenated inside one pair of braces or parentheses
GUID_PATTERN = re.compile(
    "[0-9a-fA-F]{32}"
    f"|{_HYPHENATED_GUID}"
    f"|\\{{{_HYPHENATED_GUID}\\}}"
    f"|\\({_HYPHENATED_GUID}\\)"
)

# Model field name -> (job data map key, failure message)
_DIRECTORY_FIELDS = {
    "upload_success_dir": (
        constants.UPLOAD_SUCCESS_DIR,
        constants.UPLOAD_SUCCESS_DIR_INACCESSIBLE,
    ),
    "processing_success_dir": (
        constants.PROCESSING_SUCCESS_DIR,
        constants.PROCESSING_SUCCESS_DIR_INACCESSIBLE,
    ),
    "processing_errors_dir": (
        constants.PROCESSING_ERRORS_DIR,
        constants.PROCESSING_ERRORS_DIR_INACCESSIBLE,
    ),
}


class ProcessingJobSettings(BaseModel):
    """Validated settings of one processing job execution.

    Settings are immutable and only exist fully initialized, use
    `ProcessingJobSettings.initialize` to build them from a job data map.
    """

    model_config = ConfigDict(frozen=True)

    activity_id: UUID
    upload_success_dir: DirectoryPath
    processing_success_dir: DirectoryPath
    processing_errors_dir: DirectoryPath
    status_file_extension: str = Field(min_length=1)
    status_check_interval: int

    @field_validator("activity_id")
    @classmethod
    def activity_id_not_nil(cls, value: UUID) -> UUID:
        if value == NIL_UUID:
            raise ValueError(constants.ACTIVITY_ID_INVALID)
        return value

    @classmethod
    def initialize(
        cls, data_map: Mapping[str, object] | JobDataMap
    ) -> "ProcessingJobSettings":
        """Initialize and verify the settings of a processing job.

        Required directories are created when missing.

        Args:
            data_map: Key/value settings of the job execution

        Returns:
            Fully initialized settings.

        Raises:
            InvalidFormatError: If a setting is malformed or has the wrong type
            MissingConfigurationError: If a directory or the status file extension is missing
            DirectoryAccessError: If a directory cannot be created or disappears before the settings are built
        """
        if not isinstance(data_map, JobDataMap):
            data_map = JobDataMap(data_map)

        activity_id = _read_activity_id(data_map)

        upload_success_dir = _read_directory(
            data_map,
            constants.UPLOAD_SUCCESS_DIR,
            constants.UPLOAD_SUCCESS_DIR_MISSING,
            constants.UPLOAD_SUCCESS_DIR_INACCESSIBLE,
        )
        processing_success_dir = _read_directory(
            data_map,
            constants.PROCESSING_SUCCESS_DIR,
            constants.PROCESSING_SUCCESS_DIR_MISSING,
            constants.PROCESSING_SUCCESS_DIR_INACCESSIBLE,
        )
        processing_errors_dir = _read_directory(
            data_map,
            constants.PROCESSING_ERRORS_DIR,
            constants.PROCESSING_ERRORS_DIR_MISSING,
            constants.PROCESSING_ERRORS_DIR_INACCESSIBLE,
        )

        status_file_extension = data_map.get_string(constants.STATUS_FILE_EXTENSION)
        if not status_file_extension:
            raise MissingConfigurationError(
                constants.STATUS_FILE_EXTENSION,
                constants.STATUS_FILE_EXTENSION_MISSING,
            )

        try:
            status_check_interval = data_map.get_int(constants.STATUS_CHECK_INTERVAL)
        except InvalidFormatError as e:
            raise InvalidFormatError(
                constants.STATUS_CHECK_INTERVAL,
                constants.STATUS_CHECK_INTERVAL_INVALID,
                e.cause,
            ) from e

        try:
            settings = cls(
                activity_id=activity_id,
                upload_success_dir=upload_success_dir,
                processing_success_dir=processing_success_dir,
                processing_errors_dir=processing_errors_dir,
                status_file_extension=status_file_extension,
                status_check_interval=status_check_interval,
            )
        except ValidationError as e:
            # A directory removed after it was provisioned
            field = str(e.errors()[0]["loc"][0])
            if field in _DIRECTORY_FIELDS:
                key, message = _DIRECTORY_FIELDS[field]
                raise DirectoryAccessError(key, message, e) from e
            raise InvalidFormatError(None, str(e), e) from e
        logger.info("Processing job settings ready for activity %s", activity_id)
        return settings

    def to_data_map(self) -> dict[str, str | int]:
        """Return the settings keyed by their job data map keys."""
        return {
            constants.ACTIVITY_ID: str(self.activity_id),
            constants.UPLOAD_SUCCESS_DIR: str(self.upload_success_dir),
            constants.PROCESSING_SUCCESS_DIR: str(self.processing_success_dir),
            constants.PROCESSING_ERRORS_DIR: str(self.processing_errors_dir),
            constants.STATUS_FILE_EXTENSION: self.status_file_extension,
            constants.STATUS_CHECK_INTERVAL: self.status_check_interval,
        }


def _read_activity_id(data_map: JobDataMap) -> UUID:
    try:
        value = (data_map.get_string(constants.ACTIVITY_ID) or "").strip()
    except InvalidFormatError as e:
        raise InvalidFormatError(
            constants.ACTIVITY_ID, constants.ACTIVITY_ID_INVALID, e
        ) from e

    # uuid.UUID alone also accepts stray hyphens, nested braces and urn prefixes
    if not GUID_PATTERN.fullmatch(value):
        raise InvalidFormatError(constants.ACTIVITY_ID, constants.ACTIVITY_ID_INVALID)

    activity_id = UUID(value.strip("{}()"))
    if activity_id == NIL_UUID:
        raise InvalidFormatError(constants.ACTIVITY_ID, constants.ACTIVITY_ID_INVALID)

    logger.debug("%s: %s", constants.ACTIVITY_ID, activity_id)
    return activity_id


def _read_directory(
    data_map: JobDataMap, key: str, missing_message: str, inaccessible_message: str
) -> Path:
    value = data_map.get_string(key)
    if not value:
        raise MissingConfigurationError(key, missing_message)

    directory = ensure_directory(value, key, missing_message, inaccessible_message)
    logger.debug("%s: %s", key, directory)
    return directory


def initialize(data_map: Mapping[str, object] | JobDataMap) -> ProcessingJobSettings:
    """Initialize processing job settings from a job data map."""
    return ProcessingJobSettings.initialize(data_map)
