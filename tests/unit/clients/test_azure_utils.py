"""Unit tests for Azure blob utilities."""

import base64
from datetime import datetime, timedelta, timezone

import pytest
from azure.core.exceptions import ResourceNotFoundError

from blob_bridge.clients.azure.utils import (
    BlobLocation,
    blob_name_from_path,
    encode_content_md5,
    format_azure_error_message,
    format_last_modified,
    parse_blob_url,
)


class TestParseBlobUrl:
    """Test cases for parse_blob_url."""

    def test_virtual_host_url(self):
        """Test account-subdomain URLs take the account from the host."""
        location = parse_blob_url(
            "https://myaccount.blob.core.windows.net/reports/2026/q3.xlsx"
        )

        assert location == BlobLocation("myaccount", "reports", "2026/q3.xlsx")

    @pytest.mark.parametrize(
        "url",
        [
            "http://127.0.0.1:10000/devstoreaccount1/docs/a.txt",
            "http://localhost:10000/devstoreaccount1/docs/a.txt",
            "http://azurite:10000/devstoreaccount1/docs/a.txt",
        ],
    )
    def test_path_style_url(self, url):
        """Test emulator URLs take the account from the first path segment."""
        assert parse_blob_url(url) == BlobLocation("devstoreaccount1", "docs", "a.txt")

    def test_percent_encoded_blob_name(self):
        """Test blob names are unquoted."""
        location = parse_blob_url(
            "https://myaccount.blob.core.windows.net/docs/my%20file.txt"
        )

        assert location.blob_name == "my file.txt"

    @pytest.mark.parametrize(
        "url",
        [
            "not-a-uri",
            "http://",
            "https://myaccount.blob.core.windows.net/",
            "https://myaccount.blob.core.windows.net/docs",
            "https://myaccount.blob.core.windows.net/docs/",
            "http://127.0.0.1:10000/devstoreaccount1/docs",
        ],
    )
    def test_invalid_urls(self, url):
        """Test URLs without a container and blob name are rejected."""
        with pytest.raises(ValueError):
            parse_blob_url(url)


class TestBlobNameFromPath:
    """Test cases for blob_name_from_path."""

    def test_strips_directories(self):
        """Test only the base name is kept."""
        assert blob_name_from_path("/var/data/report.csv") == "report.csv"

    def test_rejects_directory_paths(self):
        """Test a path ending in a separator has no blob name."""
        with pytest.raises(ValueError):
            blob_name_from_path("/var/data/")


class TestFormatLastModified:
    """Test cases for format_last_modified."""

    def test_utc(self):
        """Test UTC timestamps render with a +00:00 offset."""
        value = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

        assert format_last_modified(value) == "01/02/2026 03:04:05 +00:00"

    def test_negative_offset(self):
        """Test offsets keep their sign and minutes."""
        value = datetime(
            2026, 12, 31, 23, 59, 59, tzinfo=timezone(-timedelta(hours=5, minutes=30))
        )

        assert format_last_modified(value) == "12/31/2026 23:59:59 -05:30"

    def test_naive_is_utc(self):
        """Test naive datetimes are treated as UTC."""
        assert (
            format_last_modified(datetime(2026, 6, 1, 12, 0, 0))
            == "06/01/2026 12:00:00 +00:00"
        )

    def test_none(self):
        """Test a missing timestamp renders as an empty string."""
        assert format_last_modified(None) == ""


class TestEncodeContentMd5:
    """Test cases for encode_content_md5."""

    def test_bytes_are_base64_encoded(self):
        """Test raw hash bytes are base64 encoded."""
        digest = bytearray(range(16))

        assert encode_content_md5(digest) == base64.b64encode(bytes(digest)).decode()

    @pytest.mark.parametrize("value", [None, b"", bytearray()])
    def test_missing_hash(self, value):
        """Test a missing hash renders as an empty string."""
        assert encode_content_md5(value) == ""

    def test_string_passthrough(self):
        """Test an already encoded hash is returned unchanged."""
        assert encode_content_md5("AAECAw==") == "AAECAw=="


class TestFormatAzureErrorMessage:
    """Test cases for format_azure_error_message."""

    def test_plain_exception(self):
        """Test non-HTTP errors only carry context and message."""
        message = format_azure_error_message(OSError("disk full"), "download x")

        assert message == "Context: download x | Error: disk full"

    def test_http_error_without_response(self):
        """Test HTTP errors without a response still format."""
        message = format_azure_error_message(ResourceNotFoundError("missing"))

        assert message.endswith("Error: missing")
