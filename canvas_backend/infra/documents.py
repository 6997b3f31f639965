from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from canvas_backend.infra.fs import atomic_write_bytes, ensure_dir
from canvas_backend.infra.ids import new_id
from canvas_backend.infra.storage import is_safe_id

logger = logging.getLogger(__name__)

SYSTEM_FIELDS = ("id", "createAt")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Canvas:
    """A stored document: two system-owned fields plus an opaque payload.

    The flattened form always applies ``id`` and ``createAt`` after the
    payload, so they override any caller-supplied keys of the same name.
    """

    id: str
    create_at: str
    payload: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {**self.payload, "id": self.id, "createAt": self.create_at}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Canvas:
        if not isinstance(data, dict):
            raise ValueError(f"Canvas entry is not a JSON object: {type(data).__name__}")
        payload = {k: v for k, v in data.items() if k not in SYSTEM_FIELDS}
        return cls(id=str(data.get("id", "")), create_at=str(data.get("createAt", "")), payload=payload)


class DocumentStore:
    def __init__(self, root: Path, clock: Callable[[], datetime] = utc_now) -> None:
        self._root = root
        self._clock = clock

    def _path_for(self, canvas_id: str) -> Path:
        return self._root / f"{canvas_id}.json"

    def create(self, document: dict[str, Any]) -> dict[str, Any]:
        if not isinstance(document, dict):
            raise TypeError("Canvas body must be a JSON object")
        create_at = self._clock().isoformat(timespec="microseconds")
        canvas = Canvas(id=new_id(), create_at=create_at, payload=dict(document))
        stored = canvas.to_dict()
        data = json.dumps(stored, ensure_ascii=False, indent=2, allow_nan=False).encode("utf-8")
        ensure_dir(self._root)
        atomic_write_bytes(self._path_for(canvas.id), data)
        logger.info("stored canvas %s", canvas.id)
        return stored

    def list_all(self) -> list[dict[str, Any]]:
        if not self._root.is_dir():
            ensure_dir(self._root)
            return []
        canvases = [self._read(path) for path in self._root.glob("*.json")]
        canvases.sort(key=lambda c: (c.create_at, c.id), reverse=True)
        return [c.to_dict() for c in canvases]

    def get_by_id(self, canvas_id: str) -> dict[str, Any]:
        if not is_safe_id(canvas_id):
            raise KeyError(f"Canvas not found: {canvas_id}")
        path = self._path_for(canvas_id)
        try:
            return self._read(path).to_dict()
        except FileNotFoundError:
            raise KeyError(f"Canvas not found: {canvas_id}") from None

    def _read(self, path: Path) -> Canvas:
        logger.debug("reading %s", path.name)
        return Canvas.from_dict(json.loads(path.read_text(encoding="utf-8")))
