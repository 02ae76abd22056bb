"""Storage abstraction for party logos on local disk or Google Cloud Storage."""

import logging
import os
import posixpath
from abc import ABC, abstractmethod
from pathlib import PurePosixPath
from typing import Optional, Tuple
from urllib.parse import urlparse

from google.auth import default
from google.cloud import storage

logger = logging.getLogger(__name__)


def get_storage_root() -> str:
    return os.getenv("CERCANIA_STORAGE_ROOT", "./media")


class StorageBackend(ABC):
    """Abstract base class for storage backends."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check if a file exists."""
        pass

    @abstractmethod
    def public_url(self, path: str) -> str:
        """Return the URL a browser can fetch the file from."""
        pass


class LocalStorage(StorageBackend):
    """Local filesystem storage backend, served under CERCANIA_MEDIA_URL."""

    def exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def public_url(self, path: str) -> str:
        media_url = os.getenv("CERCANIA_MEDIA_URL", "/media").rstrip("/")
        relative = os.path.relpath(path, get_storage_root())
        return f"{media_url}/{PurePosixPath(*relative.split(os.sep))}"


class GCSStorage(StorageBackend):
    """Google Cloud Storage backend."""

    def __init__(self):
        """Initialize GCS storage backend."""
        try:
            # Use Application Default Credentials from environment
            credentials, project = default()

            self.client = storage.Client(credentials=credentials, project=project)
        except Exception as e:
            raise RuntimeError(f"Failed to initialize GCS client: {e}")

    def _parse_gcs_path(self, path: str) -> Tuple[str, str]:
        """Parse a GCS path into bucket and blob name.

        Args:
            path: GCS path in format gs://bucket/path/to/file

        Returns:
            Tuple of (bucket_name, blob_name)
        """
        if not path.startswith("gs://"):
            raise ValueError(f"Invalid GCS path: {path}. Must start with gs://")

        parsed = urlparse(path)
        return parsed.netloc, parsed.path.lstrip("/")

    def exists(self, path: str) -> bool:
        bucket_name, blob_name = self._parse_gcs_path(path)
        return self.client.bucket(bucket_name).blob(blob_name).exists()

    def public_url(self, path: str) -> str:
        bucket_name, blob_name = self._parse_gcs_path(path)
        return self.client.bucket(bucket_name).blob(blob_name).public_url


class StorageFactory:
    """Factory for creating storage backends based on path format."""

    _local_storage = None
    _gcs_storage = None

    @classmethod
    def get_backend(cls, path: str) -> StorageBackend:
        """Get the appropriate storage backend for a given path.

        Args:
            path: File path (local or gs://)

        Returns:
            StorageBackend instance
        """
        if cls.is_gcs_path(path):
            if cls._gcs_storage is None:
                cls._gcs_storage = GCSStorage()
            return cls._gcs_storage
        else:
            if cls._local_storage is None:
                cls._local_storage = LocalStorage()
            return cls._local_storage

    @classmethod
    def is_gcs_path(cls, path: str) -> bool:
        """Check if a path is a GCS path."""
        return path.startswith("gs://")


def resolve_file_url(file_ref: Optional[str]) -> Optional[str]:
    """Resolve an opaque file reference (e.g. a profile logo) to a URL.

    Args:
        file_ref: Reference relative to CERCANIA_STORAGE_ROOT

    Returns:
        The public URL, or None when there is no reference, no such file,
        or the reference points outside the storage root
    """
    if not file_ref:
        return None

    relative = posixpath.normpath(file_ref.lstrip("/"))
    if relative == ".." or relative.startswith("../"):
        logger.warning(f"Rejected file reference outside storage root: {file_ref}")
        return None

    root = get_storage_root()
    if StorageFactory.is_gcs_path(root):
        path = f"{root.rstrip('/')}/{relative}"
    else:
        path = os.path.join(root, relative)

    backend = StorageFactory.get_backend(path)
    if not backend.exists(path):
        logger.debug(f"Stored file not found: {path}")
        return None

    return backend.public_url(path)
