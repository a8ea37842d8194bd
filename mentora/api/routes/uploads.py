"""API routes for study material upload."""

import logging
import random
import time
from pathlib import PurePath

from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status

from mentora.api.deps import Stores
from mentora.config import get_settings
from mentora.schemas.uploads import UploadedFileRead, UploadResponse
from mentora.services import text_extractor
from mentora.stores.models import utcnow

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(tags=["uploads"])

ALLOWED_EXTENSIONS = {
    ".pdf", ".txt", ".doc", ".docx",
    ".png", ".jpg", ".jpeg", ".webp", ".gif",
    ".mp3", ".wav", ".mp4", ".mov",
}
_ALLOWED_MIME_WORDS = ("pdf", "text", "doc", "msword", "image", "audio", "video")


def _is_allowed(filename: str, content_type: str | None) -> bool:
    extension = PurePath(filename).suffix.lower()
    mimetype = (content_type or "").lower()
    return extension in ALLOWED_EXTENSIONS and any(w in mimetype for w in _ALLOWED_MIME_WORDS)


def _stored_name(filename: str) -> str:
    """Unique id for an upload, keeping the original extension."""
    return f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}{PurePath(filename).suffix}"


@router.post("/upload", response_model=UploadResponse)
async def upload_material(
    stores: Stores,
    file: UploadFile | None = File(None),
    user_id: str = Form("anonymous", alias="userId"),
) -> UploadResponse:
    """
    Upload a study file and add its text to the user's material buffer.

    Plain text is read directly and PDFs go through PyMuPDF; other
    accepted formats are recorded with a placeholder sentence. The
    buffer feeds the file excerpt in every later chat prompt.
    """
    if file is None or not file.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")

    if not _is_allowed(file.filename, file.content_type):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only documents, images, audio, and video files are allowed",
        )

    data = await file.read()
    if len(data) > settings.max_upload_size_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail="File exceeds the upload size limit",
        )

    extracted = await text_extractor.extract(data, file.content_type)
    stores.files.append(user_id, file.filename, extracted)

    logger.info(
        "Stored upload %s for %s (%d bytes, %d chars extracted)",
        file.filename, user_id, len(data), len(extracted),
    )

    preview_len = settings.file_preview_chars
    preview = extracted[:preview_len] + ("..." if len(extracted) > preview_len else "")

    return UploadResponse(
        file=UploadedFileRead(
            id=_stored_name(file.filename),
            original_name=file.filename,
            size=len(data),
            type=file.content_type,
            uploaded_at=utcnow(),
            text_extracted=bool(extracted),
            preview=preview,
            user_id=user_id,
        )
    )
