# Job data map keys
ACTIVITY_ID = "ActivityId"
UPLOAD_SUCCESS_DIR = "UploadSuccessDir"
PROCESSING_SUCCESS_DIR = "ProcessingSuccessDir"
PROCESSING_ERRORS_DIR = "ProcessingErrorsDir"
STATUS_FILE_EXTENSION = "StatusFileExtension"
STATUS_CHECK_INTERVAL = "StatusCheckInterval"

# Used when the status check interval is not configured
DEFAULT_STATUS_CHECK_INTERVAL = 0

# Failure messages
ACTIVITY_ID_INVALID = (
    "Activity Id of recurring job is missing or is not a GUID in job configuration"
)
UPLOAD_SUCCESS_DIR_MISSING = "Upload success directory is missing in job configuration"
UPLOAD_SUCCESS_DIR_INACCESSIBLE = (
    "Upload success directory does not exist or cannot be accessed"
)
PROCESSING_SUCCESS_DIR_MISSING = (
    "Processing success directory is missing in job configuration"
)
PROCESSING_SUCCESS_DIR_INACCESSIBLE = (
    "Processing success directory does not exist or cannot be accessed"
)
PROCESSING_ERRORS_DIR_MISSING = (
    "Processing errors directory is missing in job configuration"
)
PROCESSING_ERRORS_DIR_INACCESSIBLE = (
    "Processing errors directory does not exist or cannot be accessed"
)
STATUS_FILE_EXTENSION_MISSING = (
    "Extension of status files is missing in job configuration"
)
STATUS_CHECK_INTERVAL_INVALID = (
    "Status check interval is not an integer in job configuration"
)
DIRECTORY_MISSING = "Directory path is missing in job configuration"
DIRECTORY_INACCESSIBLE = "Directory does not exist or cannot be accessed"
