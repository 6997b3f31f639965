import logging

from fastapi import HTTPException, UploadFile

from canvas_backend.features.files.schemas import UploadResult
from canvas_backend.infra.storage import BlobRef, BlobStore

logger = logging.getLogger(__name__)


class FilesService:
    def __init__(self, *, store: BlobStore) -> None:
        self._store = store

    def upload(self, *, file: UploadFile | str | None) -> UploadResult:
        # A plain form field named "file" arrives as str.
        if file is None or isinstance(file, str):
            raise HTTPException(status_code=400, detail={"error": "No file uploaded"})
        try:
            file_id = self._store.put(file.file, file.filename or "")
        except OSError as e:
            logger.exception("failed to store upload %r", file.filename)
            raise HTTPException(
                status_code=500,
                detail={"error": "Failed to store file", "details": str(e)},
            )
        return UploadResult(fileId=file_id, message="File uploaded successfully")

    def get(self, *, file_id: str) -> BlobRef:
        try:
            return self._store.get(file_id)
        except KeyError:
            raise HTTPException(status_code=404, detail={"error": "File not found"})
        except OSError as e:
            logger.exception("failed to read file directory for %s", file_id)
            raise HTTPException(
                status_code=500,
                detail={"error": "Failed to read files", "details": str(e)},
            )
