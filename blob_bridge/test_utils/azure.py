"""In-memory stand-ins for the Blob service, container and blob clients.

The fakes implement only the calls ``AzureBlobClient`` makes, with the same
signatures and the same ``azure.core`` exceptions, so client behaviour can be
tested without a storage account or emulator.
"""

import hashlib
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Iterator, List, Optional, Union
from urllib.parse import quote

from azure.core.exceptions import ResourceExistsError, ResourceNotFoundError
from azure.storage.blob import BlobProperties, BlobType, ContentSettings

from blob_bridge.clients.azure.auth import AzureAuthProvider

DEVELOPMENT_ACCOUNT_NAME = "devstoreaccount1"
DEVELOPMENT_ACCOUNT_URL = f"http://127.0.0.1:10000/{DEVELOPMENT_ACCOUNT_NAME}"

FIXED_LAST_MODIFIED = datetime(2026, 10, 18, 9, 5, 1, tzinfo=timezone.utc)


@dataclass
class StoredBlob:
    data: bytes
    blob_type: BlobType = BlobType.BLOCKBLOB
    content_type: Optional[str] = None
    last_modified: datetime = FIXED_LAST_MODIFIED

    @property
    def content_md5(self) -> bytearray:
        return bytearray(hashlib.md5(self.data).digest())


@dataclass
class StoredContainer:
    public_access: Optional[str] = None
    blobs: Dict[str, StoredBlob] = field(default_factory=dict)


class FakeBlobPrefix:
    """Virtual directory entry yielded by ``walk_blobs``."""

    def __init__(self, name: str):
        self.name = name


class FakeDownloader:
    def __init__(self, data: bytes):
        self._data = data

    def readall(self) -> bytes:
        return self._data

    def readinto(self, stream) -> int:
        stream.write(self._data)
        return len(self._data)


class FakeBlobClient:
    def __init__(self, service: "FakeBlobServiceClient", container: str, blob: str):
        self._service = service
        self.container_name = container
        self.blob_name = blob

    @property
    def url(self) -> str:
        return (
            f"{self._service.url}/{quote(self.container_name)}/"
            f"{quote(self.blob_name)}"
        )

    def _stored(self) -> StoredBlob:
        container = self._service.containers.get(self.container_name)
        if container is None:
            raise ResourceNotFoundError("The specified container does not exist.")
        blob = container.blobs.get(self.blob_name)
        if blob is None:
            raise ResourceNotFoundError("The specified blob does not exist.")
        return blob

    def upload_blob(
        self,
        data,
        blob_type: Union[str, BlobType] = BlobType.BLOCKBLOB,
        overwrite: bool = False,
        content_settings: Optional[ContentSettings] = None,
        **kwargs,
    ) -> Dict[str, str]:
        self._service.calls.append(("upload_blob", self.container_name, self.blob_name))
        container = self._service.containers.get(self.container_name)
        if container is None:
            raise ResourceNotFoundError("The specified container does not exist.")
        if self.blob_name in container.blobs and not overwrite:
            raise ResourceExistsError("The specified blob already exists.")

        payload = data.read() if hasattr(data, "read") else bytes(data)
        container.blobs[self.blob_name] = StoredBlob(
            data=payload,
            blob_type=BlobType(blob_type),
            content_type=content_settings.content_type if content_settings else None,
        )
        return {"etag": "0x1"}

    def get_blob_properties(self, **kwargs) -> BlobProperties:
        self._service.calls.append(
            ("get_blob_properties", self.container_name, self.blob_name)
        )
        stored = self._stored()
        properties = BlobProperties()
        properties.name = self.blob_name
        properties.container = self.container_name
        properties.blob_type = stored.blob_type
        properties.size = len(stored.data)
        properties.last_modified = stored.last_modified
        properties.content_settings = ContentSettings(
            content_type=stored.content_type, content_md5=stored.content_md5
        )
        return properties

    def download_blob(self, **kwargs) -> FakeDownloader:
        return FakeDownloader(self._stored().data)

    def delete_blob(self, **kwargs) -> None:
        self._service.calls.append(("delete_blob", self.container_name, self.blob_name))
        self._stored()
        del self._service.containers[self.container_name].blobs[self.blob_name]


class FakeContainerClient:
    def __init__(self, service: "FakeBlobServiceClient", container_name: str):
        self._service = service
        self.container_name = container_name

    def create_container(self, public_access=None, **kwargs) -> None:
        self._service.calls.append(("create_container", self.container_name))
        if self.container_name in self._service.containers:
            raise ResourceExistsError("The specified container already exists.")
        self._service.containers[self.container_name] = StoredContainer(
            public_access=getattr(public_access, "value", public_access)
        )

    def set_container_access_policy(
        self, signed_identifiers, public_access=None, **kwargs
    ) -> None:
        self._service.calls.append(("set_container_access_policy", self.container_name))
        container = self._service.containers.get(self.container_name)
        if container is None:
            raise ResourceNotFoundError("The specified container does not exist.")
        container.public_access = getattr(public_access, "value", public_access)

    def walk_blobs(
        self, name_starts_with: Optional[str] = None, delimiter: str = "/", **kwargs
    ) -> Iterator[Union[BlobProperties, FakeBlobPrefix]]:
        container = self._service.containers.get(self.container_name)
        if container is None:
            raise ResourceNotFoundError("The specified container does not exist.")

        seen_prefixes: List[str] = []
        for name in sorted(container.blobs):
            if delimiter in name:
                prefix = name.split(delimiter)[0] + delimiter
                if prefix not in seen_prefixes:
                    seen_prefixes.append(prefix)
                    yield FakeBlobPrefix(prefix)
                continue
            stored = container.blobs[name]
            item = BlobProperties()
            item.name = name
            item.blob_type = stored.blob_type
            item.size = len(stored.data)
            yield item

    def get_blob_client(self, blob: str) -> FakeBlobClient:
        return FakeBlobClient(self._service, self.container_name, blob)


class FakeBlobServiceClient:
    """In-memory Blob service keyed by container name."""

    def __init__(
        self,
        account_name: str = DEVELOPMENT_ACCOUNT_NAME,
        url: str = DEVELOPMENT_ACCOUNT_URL,
    ):
        self.account_name = account_name
        self.url = url
        self.containers: Dict[str, StoredContainer] = {}
        self.calls: List[tuple] = []
        self.closed = False

    def get_container_client(self, container: str) -> FakeContainerClient:
        return FakeContainerClient(self, container)

    def get_blob_client(self, container: str, blob: str) -> FakeBlobClient:
        return FakeBlobClient(self, container, blob)

    def put_blob(
        self,
        container: str,
        name: str,
        data: bytes,
        blob_type: BlobType = BlobType.BLOCKBLOB,
        content_type: Optional[str] = None,
    ) -> None:
        """Seed a blob directly, bypassing the upload path."""
        self.containers.setdefault(container, StoredContainer()).blobs[name] = (
            StoredBlob(data=data, blob_type=blob_type, content_type=content_type)
        )

    def close(self) -> None:
        self.closed = True


class FakeAuthProvider:
    """Auth provider double that validates like the real one and hands out a
    fake session."""

    def __init__(self, service_client: Optional[FakeBlobServiceClient] = None):
        self._validator = AzureAuthProvider()
        self.service_client = service_client or FakeBlobServiceClient()
        self.created = 0

    def create_service_client(self, config) -> FakeBlobServiceClient:
        self._validator.validate_config(config)
        self.created += 1
        return self.service_client
