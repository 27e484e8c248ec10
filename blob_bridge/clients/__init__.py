from abc import ABC, abstractmethod


class BlobStoreInterface(ABC):
    """Base interface class for blob store clients.

    This abstract class defines the operations any blob store implementation
    must provide: establishing a session, moving files in and out of the
    store, listing a container and deleting blobs.
    """

    @abstractmethod
    def initialize(self):
        """Establish the storage session.

        Implementations validate their configuration here and keep the
        session for every subsequent call.
        """
        pass

    @abstractmethod
    def upload(self, container_name, local_file_path, content_type=None):
        """Upload a local file and return the URI of the created blob."""
        pass

    @abstractmethod
    def list_blobs(self, container_name):
        """Return the blobs of a container as a JSON array string."""
        pass

    @abstractmethod
    def download(self, blob_uri, local_directory_path):
        """Download a blob into a local directory."""
        pass

    @abstractmethod
    def delete(self, blob_uri):
        """Delete a blob identified by its URI."""
        pass

    @abstractmethod
    def close(self):
        """Release the storage session."""
        pass
