from pydantic import BaseModel


class UploadResult(BaseModel):
    fileId: str
    message: str
