"""Property-style facade for script hosts.

``BlobFacade`` keeps the settable ``account_name`` / ``account_key`` /
``use_development_storage`` surface of the legacy COM component. Values are
only read by ``initialize``; every call returns an ``OperationResult`` instead
of raising.
"""

from typing import Callable, Optional

from blob_bridge.clients.azure.auth import AzureAuthProvider
from blob_bridge.clients.azure.client import AzureBlobClient
from blob_bridge.clients.azure.models import AccountConfig, OperationResult
from blob_bridge.common.error_codes import BlobBridgeError
from blob_bridge.constants import DEFAULT_CONTENT_TYPE
from blob_bridge.observability.logger_adaptor import get_logger

logger = get_logger(__name__)


class BlobFacade:
    """Stateful blob facade: set the account fields, call ``initialize``, then
    use the blob calls."""

    def __init__(self, auth_provider: Optional[AzureAuthProvider] = None):
        self.account_name = ""
        self.account_key = ""
        self.use_development_storage = False
        self._client = AzureBlobClient(auth_provider=auth_provider)

    @classmethod
    def from_config(
        cls,
        config: AccountConfig,
        auth_provider: Optional[AzureAuthProvider] = None,
    ) -> "BlobFacade":
        facade = cls(auth_provider=auth_provider)
        facade.account_name = config.account_name
        facade.account_key = config.account_key
        facade.use_development_storage = config.use_development_storage
        return facade

    @property
    def client(self) -> AzureBlobClient:
        return self._client

    def current_config(self) -> AccountConfig:
        return AccountConfig(
            account_name=self.account_name or "",
            account_key=self.account_key or "",
            use_development_storage=bool(self.use_development_storage),
        )

    def initialize(self) -> OperationResult:
        return self._run(lambda: self._client.initialize(self.current_config()))

    def upload_block_blob(
        self,
        container_name: str,
        full_path_to_file_for_upload: str,
        file_type: str = DEFAULT_CONTENT_TYPE,
    ) -> OperationResult:
        return self._run(
            lambda: self._client.upload(
                container_name, full_path_to_file_for_upload, file_type
            )
        )

    def get_blobs_in_container(self, container_name: str) -> OperationResult:
        return self._run(lambda: self._client.list_blobs(container_name))

    def download_blob(
        self, uri: str, path_to_file_for_download: str
    ) -> OperationResult:
        return self._run(
            lambda: self._client.download(uri, path_to_file_for_download)
        )

    def delete_blob(self, uri: str) -> OperationResult:
        def _delete() -> None:
            self._client.delete(uri)

        return self._run(_delete)

    def _run(self, operation: Callable[[], Optional[str]]) -> OperationResult:
        try:
            return OperationResult.success(operation())
        except BlobBridgeError as e:
            logger.error(f"Blob {e.kind.value} failed: {str(e)}")
            return OperationResult.failure(e)
