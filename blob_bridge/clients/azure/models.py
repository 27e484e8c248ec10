"""Pydantic models shared by the Azure blob client and its adapters."""

import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from blob_bridge import constants
from blob_bridge.common.error_codes import BlobBridgeError, ErrorKind


class AccountConfig(BaseModel):
    """Immutable storage account configuration.

    Attributes:
        account_name: Azure Storage account name, unused with development storage
        account_key: Base64 account key, unused with development storage
        use_development_storage: Whether to target the local storage emulator
    """

    account_name: str = ""
    account_key: str = Field(default="", repr=False)
    use_development_storage: bool = False

    class Config:
        frozen = True

    @classmethod
    def from_env(cls, **overrides: Any) -> "AccountConfig":
        """Build a configuration from the environment.

        Values in ``overrides`` that are not ``None`` take precedence over the
        environment.
        """
        values: Dict[str, Any] = {
            "account_name": os.getenv(
                "BLOB_BRIDGE_ACCOUNT_NAME", constants.ACCOUNT_NAME
            ),
            "account_key": os.getenv("BLOB_BRIDGE_ACCOUNT_KEY", constants.ACCOUNT_KEY),
            "use_development_storage": os.getenv(
                "BLOB_BRIDGE_USE_DEVELOPMENT_STORAGE",
                str(constants.USE_DEVELOPMENT_STORAGE),
            ).lower()
            == "true",
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


class BlobDescriptor(BaseModel):
    """Flat description of a block blob, as emitted by the listing call.

    Every field is a string; the aliases are the JSON property names.
    """

    name: str
    uri: str
    type: str
    last_modified: str = Field(alias="lastModified")
    content_type: str = Field(alias="contentType")
    content_md5: str = Field(alias="contentMD5")
    size: str

    class Config:
        populate_by_name = True

    def to_json_dict(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)


class OperationResult(BaseModel):
    """Outcome of a facade call.

    Attributes:
        ok: Whether the operation succeeded
        value: The operation's value (URI, JSON array, path) on success
        error_kind: The error category on failure
        message: The full error message on failure
    """

    ok: bool
    value: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None

    @classmethod
    def success(cls, value: Optional[str] = None) -> "OperationResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: BlobBridgeError) -> "OperationResult":
        return cls(ok=False, error_kind=error.kind, message=str(error))
