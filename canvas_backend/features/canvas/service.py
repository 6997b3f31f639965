import logging
from typing import Any

from fastapi import HTTPException

from canvas_backend.infra.documents import DocumentStore

logger = logging.getLogger(__name__)


def _storage_error(message: str, e: Exception) -> HTTPException:
    return HTTPException(status_code=500, detail={"error": message, "details": str(e)})


class CanvasService:
    def __init__(self, *, store: DocumentStore) -> None:
        self._store = store

    def create(self, *, body: Any) -> dict[str, Any]:
        if not isinstance(body, dict):
            raise HTTPException(status_code=400, detail={"error": "Canvas must be a JSON object"})
        try:
            return self._store.create(body)
        except ValueError as e:
            # NaN and Infinity have no JSON form.
            raise HTTPException(
                status_code=400, detail={"error": "Canvas is not valid JSON", "details": str(e)}
            )
        except OSError as e:
            logger.exception("failed to save canvas")
            raise _storage_error("Failed to save canvas", e)

    def list_all(self) -> list[dict[str, Any]]:
        try:
            return self._store.list_all()
        except (OSError, ValueError) as e:
            logger.exception("failed to list canvases")
            raise _storage_error("Failed to read canvases", e)

    def get(self, *, canvas_id: str) -> dict[str, Any]:
        try:
            return self._store.get_by_id(canvas_id)
        except KeyError:
            raise HTTPException(status_code=404, detail={"error": "Canvas not found"})
        except (OSError, ValueError) as e:
            logger.exception("failed to read canvas %s", canvas_id)
            raise _storage_error("Failed to read canvas", e)
