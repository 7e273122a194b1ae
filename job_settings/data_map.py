"""Typed access to the key/value settings of a single job execution."""

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path

import yaml

from job_settings.constants import DEFAULT_STATUS_CHECK_INTERVAL
from job_settings.errors import InvalidFormatError

logger = logging.getLogger(__name__)


class JobDataMap(Mapping[str, object]):
    """Read-only job data map with string and integer accessors.

    The map is copied on creation, later changes to the source mapping are
    not visible through it.
    """

    def __init__(self, values: Mapping[str, object] | None = None) -> None:
        self._values: dict[str, object] = dict(values or {})

    def __getitem__(self, key: str) -> object:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"JobDataMap({self._values!r})"

    @classmethod
    def from_yaml(cls, path: Path) -> "JobDataMap":
        """Load a job data map from a YAML file.

        Args:
            path: Path to a YAML document holding a single mapping

        Returns:
            JobDataMap with the document's keys and values.

        Raises:
            InvalidFormatError: If the document is not a mapping
            OSError: If the file cannot be read
        """
        logger.debug("Loading job data map from '%s'", path)
        with open(path, "r", encoding="utf-8") as f:
            content = yaml.safe_load(f)

        if content is None:
            return cls()
        if not isinstance(content, Mapping):
            raise InvalidFormatError(
                None,
                f"Job configuration in '{path}' must be a mapping, "
                f"got {type(content).__name__}",
            )
        return cls({str(key): value for key, value in content.items()})

    def get_string(self, key: str) -> str | None:
        """Get the value stored under `key` as a string, None when absent.

        Integers are converted, any other non-string value raises
        InvalidFormatError.
        """
        value = self._values.get(key)
        if value is None:
            return None
        if isinstance(value, str):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        raise InvalidFormatError(key, f"Expected a string, got {value!r}")

    def get_int(self, key: str, default: int = DEFAULT_STATUS_CHECK_INTERVAL) -> int:
        """Get the value stored under `key` as an integer.

        Args:
            key: Job data map key
            default: Value returned when the key is absent, None or blank

        Returns:
            The parsed integer.

        Raises:
            InvalidFormatError: If the value is not an integer
        """
        value = self._values.get(key)
        if value is None:
            return default
        # bool is an int subclass, True is not a valid interval
        if isinstance(value, bool):
            raise InvalidFormatError(key, f"Expected an integer, got {value!r}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if not value.strip():
                return default
            try:
                return int(value.strip(), 10)
            except ValueError as e:
                raise InvalidFormatError(
                    key, f"Expected an integer, got {value!r}", e
                ) from e
        raise InvalidFormatError(key, f"Expected an integer, got {value!r}")
