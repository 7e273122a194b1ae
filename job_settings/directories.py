"""Directory provisioning for job settings.

Directories named in a job configuration are created on demand while the
settings are initialized, so the job body can rely on them being present.
"""

import logging
from pathlib import Path

from job_settings.constants import DIRECTORY_INACCESSIBLE, DIRECTORY_MISSING
from job_settings.errors import DirectoryAccessError, MissingConfigurationError

logger = logging.getLogger(__name__)


def ensure_directory(
    path: str | Path | None,
    field: str | None = None,
    missing_message: str = DIRECTORY_MISSING,
    inaccessible_message: str = DIRECTORY_INACCESSIBLE,
) -> Path:
    """Create the directory at `path` including missing parents.

    An already existing directory is not an error.

    Args:
        path: Directory to create
        field: Job data map key the path was read from, used in errors
        missing_message: Message reported when the path is empty
        inaccessible_message: Message reported when the directory cannot be created

    Returns:
        The directory as a Path.

    Raises:
        MissingConfigurationError: If the path is empty
        DirectoryAccessError: If the directory cannot be created
    """
    # Path("") collapses to "."
    if path is None or not str(path) or (isinstance(path, Path) and str(path) == "."):
        raise MissingConfigurationError(field, missing_message)

    directory = Path(path)
    logger.debug("Ensuring directory '%s' exists", directory)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError) as e:
        # ValueError covers invalid path syntax such as embedded NUL bytes
        raise DirectoryAccessError(field, inaccessible_message, e) from e

    return directory
