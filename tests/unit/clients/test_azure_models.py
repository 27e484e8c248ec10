"""Unit tests for Azure blob models."""

import pytest
from pydantic import ValidationError

from blob_bridge.clients.azure.models import (
    AccountConfig,
    BlobDescriptor,
    OperationResult,
)
from blob_bridge.common.error_codes import ErrorKind, UploadError


class TestAccountConfig:
    """Test cases for AccountConfig."""

    def test_defaults(self):
        """Test the default configuration is empty production storage."""
        config = AccountConfig()

        assert config.account_name == ""
        assert config.account_key == ""
        assert config.use_development_storage is False

    def test_is_immutable(self):
        """Test configurations cannot be mutated after construction."""
        config = AccountConfig(account_name="acct")

        with pytest.raises(ValidationError):
            config.account_name = "other"

    def test_key_is_hidden_from_repr(self):
        """Test the account key never shows up in repr."""
        config = AccountConfig(account_name="acct", account_key="c2VjcmV0")

        assert "c2VjcmV0" not in repr(config)

    def test_from_env(self, monkeypatch):
        """Test the configuration is read from the environment."""
        monkeypatch.setenv("BLOB_BRIDGE_ACCOUNT_NAME", "envacct")
        monkeypatch.setenv("BLOB_BRIDGE_ACCOUNT_KEY", "ZW52a2V5")
        monkeypatch.setenv("BLOB_BRIDGE_USE_DEVELOPMENT_STORAGE", "TRUE")

        config = AccountConfig.from_env()

        assert config == AccountConfig(
            account_name="envacct",
            account_key="ZW52a2V5",
            use_development_storage=True,
        )

    def test_from_env_overrides(self, monkeypatch):
        """Test explicit values win and None values fall back to the environment."""
        monkeypatch.setenv("BLOB_BRIDGE_ACCOUNT_NAME", "envacct")
        monkeypatch.setenv("BLOB_BRIDGE_USE_DEVELOPMENT_STORAGE", "false")

        config = AccountConfig.from_env(
            account_name="cliacct", account_key=None, use_development_storage=None
        )

        assert config.account_name == "cliacct"
        assert config.use_development_storage is False


class TestBlobDescriptor:
    """Test cases for BlobDescriptor."""

    def test_json_dict_uses_aliases_in_order(self):
        """Test the JSON dict uses the listing property names."""
        descriptor = BlobDescriptor(
            name="a.txt",
            uri="http://host/acct/docs/a.txt",
            type="BlockBlob",
            last_modified="01/02/2026 03:04:05 +00:00",
            content_type="text/plain",
            content_md5="",
            size="1",
        )

        assert list(descriptor.to_json_dict().items()) == [
            ("name", "a.txt"),
            ("uri", "http://host/acct/docs/a.txt"),
            ("type", "BlockBlob"),
            ("lastModified", "01/02/2026 03:04:05 +00:00"),
            ("contentType", "text/plain"),
            ("contentMD5", ""),
            ("size", "1"),
        ]


class TestOperationResult:
    """Test cases for OperationResult."""

    def test_success(self):
        """Test a success carries the value and no error."""
        result = OperationResult.success("http://host/acct/docs/a.txt")

        assert result.ok is True
        assert result.value == "http://host/acct/docs/a.txt"
        assert result.error_kind is None

    def test_failure(self):
        """Test a failure carries the error kind and full message."""
        error = UploadError("disk on fire")

        result = OperationResult.failure(error)

        assert result.ok is False
        assert result.value is None
        assert result.error_kind == ErrorKind.UPLOAD
        assert result.message == str(error)
