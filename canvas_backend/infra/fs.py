import os
import shutil
import uuid
from pathlib import Path
from typing import BinaryIO


def ensure_dir(path: Path) -> Path:
    # exist_ok covers the case where a concurrent request created it first.
    path.mkdir(parents=True, exist_ok=True)
    return path


def temp_path_for(path: Path) -> Path:
    """Hidden sibling used while writing; never matches an identifier or ``*.json``."""
    return path.with_name(f".{path.name}.{uuid.uuid4().hex}.tmp")


def atomic_write_bytes(path: Path, content: BinaryIO | bytes) -> None:
    """Write ``content`` to ``path`` via a temp file and ``os.replace``.

    Readers see either no entry or the complete one. On failure the temp
    file is removed and the original error propagates.
    """
    tmp = temp_path_for(path)
    try:
        with open(tmp, "wb") as f:
            if isinstance(content, (bytes, bytearray, memoryview)):
                f.write(content)
            else:
                shutil.copyfileobj(content, f)
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
