"""Pydantic schemas for study material uploads."""

from datetime import datetime

from mentora.schemas.base import BaseSchema, SuccessResponse


class UploadedFileRead(BaseSchema):
    id: str
    original_name: str
    size: int
    type: str | None
    uploaded_at: datetime
    text_extracted: bool
    preview: str
    user_id: str


class UploadResponse(SuccessResponse):
    message: str = "File uploaded and processed successfully"
    file: UploadedFileRead
