"""
Error codes and typed errors for blob-bridge.

Error codes follow the format: BlobBridge-{Component}-{HTTP_Code}-{Unique_ID}

Components:
- Config: Account configuration errors
- Client: Session construction errors
- IO: Blob transfer, listing and deletion errors

Every public operation of the blob client signals failure with exactly one of
the errors below. The message carries the error code, its description and the
operation context, which always ends with the underlying SDK message.
"""

from enum import Enum
from typing import Dict, Optional


class ErrorComponent(Enum):
    """Components that can generate errors in the system."""

    CONFIG = "Config"
    CLIENT = "Client"
    IO = "IO"


class ErrorKind(str, Enum):
    """Caller visible category of a failed operation."""

    CONFIGURATION = "configuration"
    INITIALIZATION = "initialization"
    UPLOAD = "upload"
    LISTING = "listing"
    DOWNLOAD = "download"
    DELETION = "deletion"


class ErrorCode:
    """Error code with component, HTTP code, and description."""

    def __init__(
        self, component: str, http_code: str, unique_id: str, description: str
    ):
        self.code = f"BlobBridge-{component}-{http_code}-{unique_id}"
        self.description = description

    def __str__(self) -> str:
        return f"{self.code}: {self.description}"


# Configuration Errors
CONFIG_ERRORS = {
    "ACCOUNT_CONFIG_ERROR": ErrorCode(
        ErrorComponent.CONFIG.value, "400", "00", "Storage account configuration error"
    ),
}

# Client Errors
CLIENT_ERRORS = {
    "SESSION_INIT_ERROR": ErrorCode(
        ErrorComponent.CLIENT.value,
        "500",
        "00",
        "Error initializing the Azure Storage Account",
    ),
}

# IO Errors
IO_ERRORS = {
    "BLOB_UPLOAD_ERROR": ErrorCode(
        ErrorComponent.IO.value, "500", "00", "Error uploading block blob"
    ),
    "BLOB_LIST_ERROR": ErrorCode(
        ErrorComponent.IO.value, "500", "01", "Error getting container blobs"
    ),
    "BLOB_DOWNLOAD_ERROR": ErrorCode(
        ErrorComponent.IO.value, "503", "00", "Error downloading blob"
    ),
    "BLOB_DELETE_ERROR": ErrorCode(
        ErrorComponent.IO.value, "500", "02", "Error deleting blob"
    ),
}

# Combined dictionary of all error codes
ERROR_CODES: Dict[str, ErrorCode] = {
    **CONFIG_ERRORS,
    **CLIENT_ERRORS,
    **IO_ERRORS,
}


class BlobBridgeError(Exception):
    """Base error for every failed blob-bridge operation.

    Attributes:
        kind: The caller visible error category.
        error_code: The catalogued error code.
        context: Call specific context, including the underlying message.
    """

    kind: ErrorKind
    error_code: ErrorCode

    def __init__(self, context: str, error_code: Optional[ErrorCode] = None):
        if error_code is not None:
            self.error_code = error_code
        self.context = context
        super().__init__(f"{self.error_code}: {context}")


class ConfigurationError(BlobBridgeError):
    """Raised when credentials are missing at initialization time."""

    kind = ErrorKind.CONFIGURATION
    error_code = CONFIG_ERRORS["ACCOUNT_CONFIG_ERROR"]


class InitializationError(BlobBridgeError):
    """Raised when the storage session cannot be constructed."""

    kind = ErrorKind.INITIALIZATION
    error_code = CLIENT_ERRORS["SESSION_INIT_ERROR"]


class UploadError(BlobBridgeError):
    kind = ErrorKind.UPLOAD
    error_code = IO_ERRORS["BLOB_UPLOAD_ERROR"]


class ListingError(BlobBridgeError):
    kind = ErrorKind.LISTING
    error_code = IO_ERRORS["BLOB_LIST_ERROR"]


class DownloadError(BlobBridgeError):
    kind = ErrorKind.DOWNLOAD
    error_code = IO_ERRORS["BLOB_DOWNLOAD_ERROR"]


class DeletionError(BlobBridgeError):
    kind = ErrorKind.DELETION
    error_code = IO_ERRORS["BLOB_DELETE_ERROR"]
