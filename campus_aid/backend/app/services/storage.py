# campus_aid/backend/app/services/storage.py

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import BinaryIO, Optional, Union

from .. import config
from ..errors import NotFound, ValidationFailure

logger = logging.getLogger(__name__)


class BlobStorage:
    """
    Blob store on the local filesystem.

    Files live under `root`; the URL handed back for a path is
    `<base_url>/<path>`, which main.py serves as static files.
    """

    def __init__(self, root: Optional[Path] = None, base_url: Optional[str] = None):
        self.root = Path(root or config.UPLOAD_DIR).resolve()
        self.base_url = (base_url if base_url is not None else config.FILES_BASE_URL).rstrip("/")
        self.root.mkdir(parents=True, exist_ok=True)

    def _resolve(self, path: str) -> Path:
        target = (self.root / path).resolve()
        if self.root not in target.parents:
            raise ValidationFailure(f"Invalid storage path '{path}'")
        return target

    @staticmethod
    def generate_path(folder: str, filename: str) -> str:
        """Timestamp-prefixed so two uploads of the same name rarely collide."""
        safe_name = Path(filename or "upload").name.replace(" ", "_")
        return f"{folder}/{int(time.time() * 1000)}_{safe_name}"

    def upload(self, path: str, data: Union[bytes, BinaryIO]) -> str:
        target = self._resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        payload = data if isinstance(data, bytes) else data.read()
        target.write_bytes(payload)
        logger.info("Stored %d bytes at %s", len(payload), path)
        return self.url_for(path)

    def delete(self, path: str) -> None:
        target = self._resolve(path)
        if not target.exists():
            raise NotFound(f"No stored file at '{path}'")
        target.unlink()
        logger.info("Deleted stored file %s", path)

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path}"

    def path_from_url(self, url: str) -> Optional[str]:
        prefix = f"{self.base_url}/"
        if not url or not url.startswith(prefix):
            return None
        return url[len(prefix):]


def get_storage() -> BlobStorage:
    """FastAPI dependency; overridden in tests."""
    return BlobStorage()
