"""Local file-system blob store for uploaded images."""
import logging
import os
from typing import Optional

import config

logger = logging.getLogger(__name__)

UPLOADS_PREFIX = "uploads"


class LocalStorage:
    """Key-addressed blob store rooted at a directory"""

    def __init__(self, root: str):
        self.root = os.path.abspath(root)

    def _full_path(self, path: str) -> str:
        full_path = os.path.abspath(os.path.join(self.root, path))
        if os.path.commonpath([self.root, full_path]) != self.root:
            raise ValueError(f"Path escapes storage root: {path}")
        return full_path

    def put(self, path: str, data: bytes) -> str:
        """Write data at path, creating parent directories as needed"""
        full_path = self._full_path(path)
        os.makedirs(os.path.dirname(full_path), exist_ok=True)
        with open(full_path, "wb") as f:
            f.write(data)
        logger.info("Stored blob %s (%d bytes)", path, len(data))
        return path

    def exists(self, path: Optional[str]) -> bool:
        """Check whether a blob is stored at path"""
        if not path:
            return False
        return os.path.isfile(self._full_path(path))

    def delete(self, path: Optional[str]) -> bool:
        """Delete the blob at path. Missing blobs are a no-op and return False"""
        if not path:
            return False
        full_path = self._full_path(path)
        try:
            os.remove(full_path)
        except FileNotFoundError:
            logger.debug("Blob %s not found, nothing to delete", path)
            return False
        logger.info("Deleted blob %s", path)
        return True

    @staticmethod
    def url(path: str) -> str:
        """Public URL of a stored blob"""
        return "/" + path.lstrip("/")


def upload_path(filename: Optional[str]) -> Optional[str]:
    """Storage path of an uploaded image filename"""
    if not filename:
        return None
    return f"{UPLOADS_PREFIX}/{filename}"


def get_storage() -> LocalStorage:
    """Storage rooted at the configured public directory"""
    return LocalStorage(config.PUBLIC_DIR)
