from fastapi import APIRouter, File, Request, UploadFile
from fastapi.responses import FileResponse

from canvas_backend.features.files.schemas import UploadResult
from canvas_backend.features.files.service import FilesService

router = APIRouter(tags=["files"])


@router.post("/upload")
def upload_file(
    request: Request, file: UploadFile | str | None = File(default=None)
) -> UploadResult:
    return FilesService(store=request.app.state.files).upload(file=file)


@router.get("/file/{file_id}")
def get_file(request: Request, file_id: str) -> FileResponse:
    ref = FilesService(store=request.app.state.files).get(file_id=file_id)
    return FileResponse(ref.path, media_type=ref.content_type)
