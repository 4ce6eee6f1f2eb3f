"""Local filesystem implementation of the FileStore.

Files are written to ``<root>/uploads/<millisecond timestamp>-<hex><ext>``;
the locator is that path relative to ``root`` with forward slashes.
"""

import shutil
import time
import uuid
from pathlib import Path, PurePosixPath
from typing import BinaryIO

from photos.stores.interfaces import FileStore

UPLOAD_DIR = "uploads"


class LocalFileStore(FileStore):
    """Stores photo binaries on the local disk."""

    def __init__(self, root: Path | str, subdir: str = UPLOAD_DIR) -> None:
        self._root = Path(root).resolve()
        self._subdir = subdir

    def save(self, stream: BinaryIO, extension: str) -> str:
        directory = self._root / self._subdir
        directory.mkdir(parents=True, exist_ok=True)
        filename = f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}{extension.lower()}"
        if hasattr(stream, "seek"):
            stream.seek(0)
        with open(directory / filename, "wb") as destination:
            shutil.copyfileobj(stream, destination)
        return str(PurePosixPath(self._subdir, filename))

    def delete(self, locator: str) -> bool:
        path = self._resolve(locator)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        return True

    def _resolve(self, locator: str) -> Path:
        path = (self._root / locator).resolve()
        if not path.is_relative_to(self._root):
            raise PermissionError(f"Locator escapes storage root: {locator}")
        return path
