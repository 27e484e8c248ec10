"""
Azure Blob Storage client implementation for blob-bridge.

This module provides the AzureBlobClient class, the single owner of a Blob
service session. Each public call borrows the session, performs one SDK
operation and translates its outcome: a plain value on success, or a typed
error carrying the call context and the underlying SDK message.

Example:
    >>> from blob_bridge.clients.azure import AccountConfig, AzureBlobClient
    >>>
    >>> config = AccountConfig(use_development_storage=True)
    >>> with AzureBlobClient.connect(config) as client:
    ...     uri = client.upload("Reports", "/tmp/report.xlsx", "application/ms-excel")
    ...     print(client.list_blobs("reports"))
    ...     client.download(uri, "/tmp/downloads")
    ...     client.delete(uri)
"""

from typing import List, Optional, Tuple, Type

import orjson
from azure.core.exceptions import ResourceExistsError, ResourceNotFoundError
from azure.storage.blob import (
    BlobClient,
    BlobProperties,
    BlobServiceClient,
    BlobType,
    ContainerClient,
    ContentSettings,
    PublicAccess,
)

from blob_bridge.clients import BlobStoreInterface
from blob_bridge.clients.azure import LIST_DELIMITER
from blob_bridge.clients.azure.auth import AzureAuthProvider
from blob_bridge.clients.azure.models import AccountConfig, BlobDescriptor
from blob_bridge.clients.azure.utils import (
    blob_name_from_path,
    encode_content_md5,
    format_azure_error_message,
    format_last_modified,
    parse_blob_url,
)
from blob_bridge.common.error_codes import (
    BlobBridgeError,
    DeletionError,
    DownloadError,
    ListingError,
    UploadError,
)
from blob_bridge.constants import DEFAULT_CONTENT_TYPE
from blob_bridge.observability.logger_adaptor import get_logger

logger = get_logger(__name__)


def _enum_value(value) -> str:
    return str(getattr(value, "value", value))


class AzureBlobClient(BlobStoreInterface):
    """
    Azure Blob Storage client.

    The client holds an immutable account configuration and the session
    created from it by ``initialize``. The session is never refreshed; call
    ``initialize`` again to pick up a new configuration.

    Instances are not thread-safe. Concurrent calls on one instance must be
    serialized by the caller.

    Attributes:
        config (AccountConfig): Account configuration used by ``initialize``
        auth_provider (AzureAuthProvider): Session factory
        service_client (Optional[BlobServiceClient]): The live session
    """

    def __init__(
        self,
        config: Optional[AccountConfig] = None,
        auth_provider: Optional[AzureAuthProvider] = None,
    ):
        self.config = config or AccountConfig()
        self.auth_provider = auth_provider or AzureAuthProvider()
        self.service_client: Optional[BlobServiceClient] = None

    @classmethod
    def connect(
        cls,
        config: AccountConfig,
        auth_provider: Optional[AzureAuthProvider] = None,
    ) -> "AzureBlobClient":
        """
        Create a client and initialize its session in one step.

        Raises:
            ConfigurationError: If required credentials are missing.
            InitializationError: If the session cannot be constructed.
        """
        client = cls(config, auth_provider=auth_provider)
        client.initialize()
        return client

    @property
    def is_initialized(self) -> bool:
        return self.service_client is not None

    def initialize(self, config: Optional[AccountConfig] = None) -> None:
        """
        Validate the configuration and create the storage session.

        Args:
            config (Optional[AccountConfig]): Replaces the stored configuration
                once its session has been created.

        Raises:
            ConfigurationError: If development storage is off and the account
                name or key is empty.
            InitializationError: If the session cannot be constructed.
        """
        if config is None:
            config = self.config

        logger.info("Initializing Azure Storage Account...")
        self.service_client = self.auth_provider.create_service_client(config)
        self.config = config
        logger.info(
            f"Azure Storage Account initialized: {self.service_client.account_name}"
        )

    def upload(
        self,
        container_name: str,
        local_file_path: str,
        content_type: Optional[str] = DEFAULT_CONTENT_TYPE,
    ) -> str:
        """
        Upload a local file as a block blob.

        The blob is named after the file's base name and stored in the
        lower-cased container, which is created with public read access for
        blobs when missing. An existing blob with the same name is replaced.

        Args:
            container_name (str): Target container name
            local_file_path (str): Path of the file to upload
            content_type (Optional[str]): Content type stored on the blob

        Returns:
            str: The URI of the uploaded blob

        Raises:
            UploadError: If any step of the upload fails
        """
        service_client = self._require_session(UploadError)
        logger.info(f"Uploading block blob {local_file_path}")

        try:
            container_client = self._get_or_create_container(
                service_client, container_name
            )
            blob_client = container_client.get_blob_client(
                blob_name_from_path(local_file_path)
            )

            with open(local_file_path, "rb") as data:
                blob_client.upload_blob(
                    data,
                    blob_type=BlobType.BLOCKBLOB,
                    overwrite=True,
                    content_settings=ContentSettings(
                        content_type=(
                            DEFAULT_CONTENT_TYPE
                            if content_type is None
                            else content_type
                        )
                    ),
                )

            logger.info(f"Blob is now available at {blob_client.url}")
            return blob_client.url
        except Exception as e:
            logger.error(format_azure_error_message(e, f"upload {local_file_path}"))
            raise UploadError(str(e)) from e

    def describe_blobs(self, container_name: str) -> List[BlobDescriptor]:
        """
        Describe the block blobs directly inside a container.

        Virtual directories and page or append blobs are skipped. Properties
        are fetched again for every block blob.

        Args:
            container_name (str): Exact container name, never created

        Returns:
            List[BlobDescriptor]: Descriptors in enumeration order

        Raises:
            ListingError: If enumeration or a property fetch fails
        """
        service_client = self._require_session(ListingError)
        logger.info(f"Listing blobs in container {container_name}")

        try:
            container_client = service_client.get_container_client(container_name)
            descriptors = []
            for item in container_client.walk_blobs(delimiter=LIST_DELIMITER):
                if not isinstance(item, BlobProperties):
                    logger.info(f"Skipping virtual directory {item.name}")
                    continue
                if item.blob_type != BlobType.BLOCKBLOB:
                    logger.info(
                        f"Skipping {_enum_value(item.blob_type)} {item.name}"
                    )
                    continue
                descriptors.append(self._describe_blob(container_client, item.name))
            return descriptors
        except Exception as e:
            logger.error(format_azure_error_message(e, f"list {container_name}"))
            raise ListingError(str(e)) from e

    def list_blobs(self, container_name: str) -> str:
        """
        List the block blobs directly inside a container as a JSON array.

        Each element is a flat object with the string fields ``name``,
        ``uri``, ``type``, ``lastModified``, ``contentType``, ``contentMD5``
        and ``size``. The array is compact and is ``[]`` when no block blob
        qualifies.

        Raises:
            ListingError: If enumeration or a property fetch fails
        """
        descriptors = self.describe_blobs(container_name)
        return orjson.dumps([d.to_json_dict() for d in descriptors]).decode("utf-8")

    def download(self, blob_uri: str, local_directory_path: str) -> str:
        """
        Download a blob into a local directory.

        The destination is ``{local_directory_path}/{blob name}``. Missing
        directories are not created and an existing file is overwritten.

        Args:
            blob_uri (str): Absolute blob URI
            local_directory_path (str): Existing local directory

        Returns:
            str: The destination file path

        Raises:
            DownloadError: If the blob cannot be resolved or written locally
        """
        service_client = self._require_session(DownloadError)
        logger.info(f"Download blob from {blob_uri}")

        try:
            blob_client, properties = self._resolve_blob(service_client, blob_uri)
            destination = f"{local_directory_path}/{properties.name}"

            with open(destination, "wb") as stream:
                blob_client.download_blob().readinto(stream)

            logger.info(f"Blob downloaded to file: {destination}")
            return destination
        except Exception as e:
            logger.error(format_azure_error_message(e, f"download {blob_uri}"))
            raise DownloadError(
                f"{blob_uri} to {local_directory_path} because: {str(e)}"
            ) from e

    def delete(self, blob_uri: str) -> bool:
        """
        Delete a blob identified by its URI.

        A URI that does not resolve to an existing blob is a silent no-op.
        The returned flag only reports whether the service deleted something.

        Args:
            blob_uri (str): Absolute blob URI

        Returns:
            bool: True when the blob was deleted

        Raises:
            DeletionError: If resolving or deleting the blob fails
        """
        service_client = self._require_session(DeletionError)
        logger.info(f"Deleting blob {blob_uri}")

        try:
            try:
                blob_client, _ = self._resolve_blob(service_client, blob_uri)
            except ResourceNotFoundError:
                logger.info(f"Blob {blob_uri} does not exist, nothing to delete")
                return False

            success = self._delete_if_exists(blob_client)
        except Exception as e:
            logger.error(format_azure_error_message(e, f"delete {blob_uri}"))
            raise DeletionError(f"{blob_uri} because: {str(e)}") from e

        logger.info(
            f"{'Successful' if success else 'Unsuccessful'} deleting blob {blob_uri}"
        )
        return success

    def close(self) -> None:
        """Close the session transport and forget the session."""
        if self.service_client is None:
            return
        logger.info("Closing Azure Storage session...")
        try:
            self.service_client.close()
        finally:
            self.service_client = None

    def _require_session(self, error_class: Type[BlobBridgeError]) -> BlobServiceClient:
        if self.service_client is None:
            logger.error("Blob operation called before initialize")
            raise error_class("Client is not initialized")
        return self.service_client

    def _get_or_create_container(
        self, service_client: BlobServiceClient, container_name: str
    ) -> ContainerClient:
        # Container names must be lower case
        container_client = service_client.get_container_client(container_name.lower())
        logger.info(
            f"Create container '{container_client.container_name}' "
            f"and set public access to {_enum_value(PublicAccess.BLOB)}"
        )

        try:
            container_client.create_container(public_access=PublicAccess.BLOB)
        except ResourceExistsError:
            container_client.set_container_access_policy(
                signed_identifiers={}, public_access=PublicAccess.BLOB
            )
        return container_client

    def _describe_blob(
        self, container_client: ContainerClient, blob_name: str
    ) -> BlobDescriptor:
        blob_client = container_client.get_blob_client(blob_name)
        properties = blob_client.get_blob_properties()
        content_settings = properties.content_settings

        return BlobDescriptor(
            name=properties.name,
            uri=blob_client.url,
            type=_enum_value(properties.blob_type),
            last_modified=format_last_modified(properties.last_modified),
            content_type=content_settings.content_type or "",
            content_md5=encode_content_md5(content_settings.content_md5),
            size=str(properties.size),
        )

    def _resolve_blob(
        self, service_client: BlobServiceClient, blob_uri: str
    ) -> Tuple[BlobClient, BlobProperties]:
        location = parse_blob_url(blob_uri)
        # Only blobs of the session account may be resolved
        session_account = service_client.account_name or ""
        if location.account_name.lower() != session_account.lower():
            raise ValueError(
                f"Blob URI account {location.account_name} does not match the "
                f"session account {service_client.account_name}"
            )

        blob_client = service_client.get_blob_client(
            container=location.container_name, blob=location.blob_name
        )
        return blob_client, blob_client.get_blob_properties()

    def _delete_if_exists(self, blob_client: BlobClient) -> bool:
        try:
            blob_client.delete_blob()
            return True
        except ResourceNotFoundError:
            return False

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
