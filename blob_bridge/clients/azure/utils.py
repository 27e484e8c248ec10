"""
Azure helpers for blob-bridge.

This module provides blob URL parsing and the formatting rules used when blob
properties are rendered into listing descriptors.
"""

import base64
import ipaddress
import os
from datetime import datetime, timezone
from typing import NamedTuple, Optional, Union
from urllib.parse import unquote, urlparse

from azure.core.exceptions import HttpResponseError

from blob_bridge.observability.logger_adaptor import get_logger

logger = get_logger(__name__)

LAST_MODIFIED_FORMAT = "%m/%d/%Y %H:%M:%S"


class BlobLocation(NamedTuple):
    """Where a blob lives, as parsed from its absolute URL."""

    account_name: str
    container_name: str
    blob_name: str


def _is_path_style_host(hostname: str) -> bool:
    # Emulator and IP endpoints carry the account name as first path segment
    if hostname == "localhost" or "." not in hostname:
        return True
    try:
        ipaddress.ip_address(hostname)
        return True
    except ValueError:
        return False


def parse_blob_url(url: str) -> BlobLocation:
    """
    Parse an absolute blob URL into account, container and blob name.

    Both virtual-host style (``https://acct.blob.core.windows.net/c/b``) and
    path style (``http://127.0.0.1:10000/acct/c/b``) URLs are accepted. Blob
    names may contain ``/`` and percent-encoded characters.

    Args:
        url (str): Absolute blob URL

    Returns:
        BlobLocation: Parsed location

    Raises:
        ValueError: If the URL is not an absolute blob URL
    """
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc or not parsed.hostname:
        raise ValueError(f"Invalid blob URI format: {url}")

    hostname = parsed.hostname.lower()
    segments = unquote(parsed.path).lstrip("/").split("/")

    if _is_path_style_host(hostname):
        account_name, segments = segments[0], segments[1:]
    else:
        account_name = hostname.split(".")[0]

    if len(segments) < 2 or not segments[0] or not "/".join(segments[1:]):
        raise ValueError(f"Blob URI does not name a container and blob: {url}")

    location = BlobLocation(
        account_name=account_name,
        container_name=segments[0],
        blob_name="/".join(segments[1:]),
    )
    logger.debug(f"Parsed blob URI {url} as {location}")
    return location


def blob_name_from_path(local_file_path: str) -> str:
    """Return the blob name for a local file: its base name."""
    name = os.path.basename(local_file_path)
    if not name:
        raise ValueError(f"Local path has no file name: {local_file_path}")
    return name


def format_last_modified(value: Optional[datetime]) -> str:
    """
    Render a last-modified timestamp as ``MM/dd/yyyy HH:mm:ss +hh:mm``.

    Naive datetimes are taken to be UTC.
    """
    if value is None:
        return ""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)

    offset = value.utcoffset()
    total_minutes = int(offset.total_seconds() // 60) if offset else 0
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{value.strftime(LAST_MODIFIED_FORMAT)} {sign}{hours:02d}:{minutes:02d}"


def encode_content_md5(value: Optional[Union[bytes, bytearray, str]]) -> str:
    """Base64 encode a content hash; the service may already return a string."""
    if not value:
        return ""
    if isinstance(value, str):
        return value
    return base64.b64encode(bytes(value)).decode("ascii")


def format_azure_error_message(error: Exception, context: Optional[str] = None) -> str:
    """
    Format an Azure error message with its service error code and status.

    Args:
        error (Exception): Azure error exception
        context (Optional[str]): Additional context

    Returns:
        str: Formatted error message
    """
    formatted_parts = []

    if context:
        formatted_parts.append(f"Context: {context}")

    if isinstance(error, HttpResponseError):
        error_code = getattr(error, "error_code", None)
        status_code = getattr(error, "status_code", None)
        if error_code:
            formatted_parts.append(f"Error Code: {error_code}")
        if status_code:
            formatted_parts.append(f"Status Code: {status_code}")

    formatted_parts.append(f"Error: {error}")

    return " | ".join(formatted_parts)
