import argparse
import sys
from typing import List, Optional

from blob_bridge.clients.azure.models import AccountConfig
from blob_bridge.constants import DEFAULT_CONTENT_TYPE
from blob_bridge.facade import BlobFacade


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blob-bridge",
        description="Upload, list, download and delete Azure Storage blobs",
    )
    parser.add_argument(
        "--account-name",
        help="Storage account name, defaults to BLOB_BRIDGE_ACCOUNT_NAME",
    )
    parser.add_argument(
        "--account-key",
        help="Storage account key, defaults to BLOB_BRIDGE_ACCOUNT_KEY",
    )
    parser.add_argument(
        "--development-storage",
        action="store_true",
        default=None,
        help="Use the local storage emulator instead of a storage account",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    upload = subparsers.add_parser("upload", help="Upload a file as a block blob")
    upload.add_argument("container", help="Container to upload into")
    upload.add_argument("file", help="Local file to upload")
    upload.add_argument(
        "--content-type",
        default=DEFAULT_CONTENT_TYPE,
        help="Content type stored on the blob",
    )

    list_blobs = subparsers.add_parser(
        "list", help="Print the block blobs of a container as JSON"
    )
    list_blobs.add_argument("container", help="Container to list")

    download = subparsers.add_parser("download", help="Download a blob by URI")
    download.add_argument("uri", help="Blob URI")
    download.add_argument("directory", help="Existing local directory")

    delete = subparsers.add_parser("delete", help="Delete a blob by URI")
    delete.add_argument("uri", help="Blob URI")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = AccountConfig.from_env(
        account_name=args.account_name,
        account_key=args.account_key,
        use_development_storage=args.development_storage,
    )
    facade = BlobFacade.from_config(config)

    result = facade.initialize()
    if result.ok:
        if args.command == "upload":
            result = facade.upload_block_blob(
                args.container, args.file, args.content_type
            )
        elif args.command == "list":
            result = facade.get_blobs_in_container(args.container)
        elif args.command == "download":
            result = facade.download_blob(args.uri, args.directory)
        else:
            result = facade.delete_blob(args.uri)

    facade.client.close()

    if not result.ok:
        print(f"Error: {result.message}", file=sys.stderr)
        return 1
    if result.value is not None:
        print(result.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
