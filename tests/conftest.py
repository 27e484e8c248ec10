"""Global test configuration and fixtures."""

import pytest

from blob_bridge.clients.azure.client import AzureBlobClient
from blob_bridge.clients.azure.models import AccountConfig
from blob_bridge.test_utils.azure import FakeAuthProvider, FakeBlobServiceClient


@pytest.fixture
def fake_service() -> FakeBlobServiceClient:
    """An empty in-memory Blob service."""
    return FakeBlobServiceClient()


@pytest.fixture
def fake_auth(fake_service: FakeBlobServiceClient) -> FakeAuthProvider:
    """Auth provider handing out ``fake_service`` as the session."""
    return FakeAuthProvider(fake_service)


@pytest.fixture
def blob_client(fake_auth: FakeAuthProvider) -> AzureBlobClient:
    """An initialized client bound to the in-memory service."""
    return AzureBlobClient.connect(
        AccountConfig(use_development_storage=True), auth_provider=fake_auth
    )
