"""
Azure authentication provider for blob-bridge.

This module provides the AzureAuthProvider class that turns an account
configuration into an authenticated Blob service session, either against a
real storage account (shared key) or against the local storage emulator.
"""

import base64
import binascii

from azure.core.credentials import AzureNamedKeyCredential
from azure.storage.blob import BlobServiceClient

from blob_bridge import constants
from blob_bridge.clients.azure import AZURE_BLOB_URL_TEMPLATE
from blob_bridge.clients.azure.models import AccountConfig
from blob_bridge.common.error_codes import ConfigurationError, InitializationError
from blob_bridge.observability.logger_adaptor import get_logger

logger = get_logger(__name__)


class AzureAuthProvider:
    """
    Azure authentication provider for Blob service sessions.

    Supported authentication methods:
    - development_storage: The emulator's well-known account
    - shared_key: Account name and account key
    """

    AUTH_TYPE_DEVELOPMENT_STORAGE = "development_storage"
    AUTH_TYPE_SHARED_KEY = "shared_key"

    def __init__(
        self,
        development_connection_string: str = constants.DEVELOPMENT_STORAGE_CONNECTION_STRING,
    ):
        self.development_connection_string = development_connection_string

    def validate_config(self, config: AccountConfig) -> None:
        """
        Check that the configuration can produce a session.

        Args:
            config (AccountConfig): Account configuration.

        Raises:
            ConfigurationError: If the account name or key is empty while
                development storage is off. The name is checked first.
        """
        if config.use_development_storage:
            return
        if not config.account_name:
            raise ConfigurationError("accountName parameter is empty")
        if not config.account_key:
            raise ConfigurationError("accountKey parameter is empty")

    def get_auth_type(self, config: AccountConfig) -> str:
        if config.use_development_storage:
            return self.AUTH_TYPE_DEVELOPMENT_STORAGE
        return self.AUTH_TYPE_SHARED_KEY

    def create_service_client(self, config: AccountConfig) -> BlobServiceClient:
        """
        Create the Blob service session for a configuration.

        Args:
            config (AccountConfig): Account configuration.

        Returns:
            BlobServiceClient: The session handle.

        Raises:
            ConfigurationError: If required credentials are missing.
            InitializationError: If the session cannot be constructed.
        """
        self.validate_config(config)

        auth_type = self.get_auth_type(config)
        logger.debug(f"Creating Blob service session with auth type: {auth_type}")

        try:
            if auth_type == self.AUTH_TYPE_DEVELOPMENT_STORAGE:
                return BlobServiceClient.from_connection_string(
                    self.development_connection_string
                )
            return self._create_shared_key_client(config)
        except Exception as e:
            logger.error(f"Failed to create Blob service session: {str(e)}")
            raise InitializationError(str(e)) from e

    def _create_shared_key_client(self, config: AccountConfig) -> BlobServiceClient:
        # Requests are signed with the decoded key, reject undecodable keys now
        try:
            base64.b64decode(config.account_key, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"accountKey is not a valid base64 string: {e}") from e

        account_url = AZURE_BLOB_URL_TEMPLATE.format(account_name=config.account_name)
        credential = AzureNamedKeyCredential(config.account_name, config.account_key)
        logger.debug(f"Creating shared key session for account: {config.account_name}")
        return BlobServiceClient(account_url=account_url, credential=credential)
