"""
Azure Blob Storage client module for blob-bridge.

The module includes:
- AzureBlobClient: Session owner exposing upload, list, download and delete
- AzureAuthProvider: Builds the storage session from an account configuration
- Models: Account configuration, blob descriptors and operation results
- Utilities: Blob URL parsing and listing field formatting
"""

AZURE_BLOB_URL_TEMPLATE = "https://{account_name}.blob.core.windows.net"
LIST_DELIMITER = "/"

from .auth import AzureAuthProvider  # noqa: E402
from .client import AzureBlobClient  # noqa: E402
from .models import AccountConfig, BlobDescriptor, OperationResult  # noqa: E402
from .utils import (  # noqa: E402
    BlobLocation,
    blob_name_from_path,
    encode_content_md5,
    format_azure_error_message,
    format_last_modified,
    parse_blob_url,
)

__all__ = [
    # Main client
    "AzureBlobClient",
    # Authentication
    "AzureAuthProvider",
    # Models
    "AccountConfig",
    "BlobDescriptor",
    "OperationResult",
    # Utilities
    "BlobLocation",
    "blob_name_from_path",
    "encode_content_md5",
    "format_azure_error_message",
    "format_last_modified",
    "parse_blob_url",
]
