"""Configuration errors raised while initializing job settings."""

from enum import Enum


class ConfigErrorKind(Enum):
    """Why a job configuration was rejected."""

    MISSING_CONFIGURATION = "missing_configuration"
    INVALID_FORMAT = "invalid_format"
    DIRECTORY_ACCESS_FAILURE = "directory_access_failure"


class ConfigError(Exception):
    """Exception raised when a job configuration cannot be initialized.

    Attributes:
        kind: Category of the failure
        field: Job data map key of the offending setting, if known
        message: Human-readable description of the failure
        cause: Underlying exception, if any
    """

    kind: ConfigErrorKind

    def __init__(
        self,
        kind: ConfigErrorKind,
        field: str | None,
        message: str,
        cause: BaseException | None = None,
    ) -> None:
        self.kind = kind
        self.field = field
        self.message = message
        self.cause = cause
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message


class MissingConfigurationError(ConfigError):
    """A required setting is absent or empty."""

    def __init__(self, field: str | None, message: str) -> None:
        super().__init__(ConfigErrorKind.MISSING_CONFIGURATION, field, message)


class InvalidFormatError(ConfigError):
    """A setting is present but cannot be parsed."""

    def __init__(
        self, field: str | None, message: str, cause: BaseException | None = None
    ) -> None:
        super().__init__(ConfigErrorKind.INVALID_FORMAT, field, message, cause)


class DirectoryAccessError(ConfigError):
    """A directory setting cannot be created or accessed."""

    def __init__(self, field: str | None, message: str, cause: BaseException) -> None:
        super().__init__(
            ConfigErrorKind.DIRECTORY_ACCESS_FAILURE, field, message, cause
        )

    def __str__(self) -> str:
        return f"{super().__str__()} ({self.cause})"
