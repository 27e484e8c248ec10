import os

from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

# Account Constants
ACCOUNT_NAME = os.getenv("BLOB_BRIDGE_ACCOUNT_NAME", "")
ACCOUNT_KEY = os.getenv("BLOB_BRIDGE_ACCOUNT_KEY", "")
USE_DEVELOPMENT_STORAGE: bool = (
    os.getenv("BLOB_BRIDGE_USE_DEVELOPMENT_STORAGE", "false").lower() == "true"
)

# Well-known Azurite/emulator account, see
# https://learn.microsoft.com/azure/storage/common/storage-use-azurite
DEVELOPMENT_STORAGE_CONNECTION_STRING = os.getenv(
    "BLOB_BRIDGE_DEVELOPMENT_STORAGE_CONNECTION_STRING",
    "DefaultEndpointsProtocol=http;"
    "AccountName=devstoreaccount1;"
    "AccountKey=Eby8vdM02xNOcqFlqUwJPLlmEtlCDXJ1OUzFT50uSRZ6IFsuFq2UVErCz4I6tq/K1SZFTSu/ALBMcWBfY6x2g==;"
    "BlobEndpoint=http://127.0.0.1:10000/devstoreaccount1;",
)

# Upload Constants
DEFAULT_CONTENT_TYPE = os.getenv(
    "BLOB_BRIDGE_DEFAULT_CONTENT_TYPE", "application/x-octet-stream"
)

# Logger Constants
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
