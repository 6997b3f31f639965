import logging
import mimetypes
import os
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from canvas_backend.infra.fs import atomic_write_bytes, ensure_dir
from canvas_backend.infra.ids import new_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlobRef:
    file_id: str
    path: Path

    @property
    def content_type(self) -> str:
        guessed, _ = mimetypes.guess_type(self.path.name)
        return guessed or "application/octet-stream"

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()


def extension_of(original_name: str) -> str:
    """Substring from the last ``.`` of the final path component, dot included.

    ``photo.jpg`` -> ``.jpg``, ``a.tar.gz`` -> ``.gz``, ``README`` -> ``""``.
    """
    base = original_name.replace("\\", "/").rsplit("/", 1)[-1]
    idx = base.rfind(".")
    return base[idx:] if idx != -1 else ""


def is_safe_id(identifier: str) -> bool:
    return bool(identifier) and not identifier.startswith(".") and not any(
        c in identifier for c in ("/", "\\", "\x00")
    )


class BlobStore:
    """Flat directory of uploaded files named ``<id><ext>``.

    Callers only know the identifier, so lookups go through an in-memory
    ``id -> filename`` index and fall back to a directory scan on a miss.
    """

    def __init__(self, root: Path) -> None:
        self._root = root
        self._index: dict[str, str] = {}

    def put(self, content: BinaryIO | bytes, original_name: str) -> str:
        file_id = new_id()
        name = f"{file_id}{extension_of(original_name or '')}"
        ensure_dir(self._root)
        atomic_write_bytes(self._root / name, content)
        self._index[file_id] = name
        logger.info("stored blob %s as %s", file_id, name)
        return file_id

    def get(self, file_id: str) -> BlobRef:
        if not is_safe_id(file_id):
            raise KeyError(f"File not found: {file_id}")
        name = self._index.get(file_id)
        if name is not None and (self._root / name).is_file():
            return BlobRef(file_id=file_id, path=self._root / name)
        name = self._scan_for(file_id)
        if name is None:
            raise KeyError(f"File not found: {file_id}")
        return BlobRef(file_id=file_id, path=self._root / name)

    def _scan_for(self, file_id: str) -> str | None:
        ensure_dir(self._root)
        logger.debug("index miss for %s, scanning %s", file_id, self._root)
        self._index.pop(file_id, None)
        found = None
        with os.scandir(self._root) as it:
            for entry in it:
                if entry.name.startswith(".") or not entry.is_file():
                    continue
                if found is None and (
                    entry.name == file_id or entry.name.startswith(file_id + ".")
                ):
                    found = entry.name
                stem = entry.name.split(".", 1)[0]
                self._index.setdefault(stem, entry.name)
        if found is not None:
            self._index[file_id] = found
        return found
