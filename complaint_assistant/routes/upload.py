from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, File, UploadFile
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from complaint_assistant.core.errors import AppError, InvalidUpload
from complaint_assistant.schemas.outputs import ErrorResponse, UploadFileResponse
from complaint_assistant.services.file_extractor import MAX_UPLOAD_BYTES, extract_text, is_supported

logger = logging.getLogger(__name__)

router = APIRouter(tags=["upload"])

UPLOAD_FAILED = "Er is een fout opgetreden bij het uploaden van het bestand."
NO_FILE = "Geen bestand geüpload."
TOO_LARGE = "Bestand is te groot. Maximum grootte is 5MB."


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "/upload-file",
    response_model=UploadFileResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def upload_file(file: Optional[UploadFile] = File(None)):
    if file is None or not file.filename:
        return _error(400, NO_FILE)

    if not is_supported(file.filename):
        logger.info("Rejected upload %r: unsupported extension", file.filename)
        return _error(400, InvalidUpload.message)

    if file.size is not None and file.size > MAX_UPLOAD_BYTES:
        logger.info("Rejected upload %r: %d bytes", file.filename, file.size)
        return _error(400, TOO_LARGE)

    # never hold more than one byte past the limit
    raw = await file.read(MAX_UPLOAD_BYTES + 1)
    if len(raw) > MAX_UPLOAD_BYTES:
        logger.info("Rejected upload %r: over %d bytes", file.filename, MAX_UPLOAD_BYTES)
        return _error(400, TOO_LARGE)

    try:
        text = await run_in_threadpool(extract_text, raw, file.filename)
    except AppError as e:
        logger.error("Error processing file %s: %s (%s)", file.filename, e.message, e.detail)
        return _error(500, UPLOAD_FAILED)
    except Exception:
        logger.exception("Error processing file %s", file.filename)
        return _error(500, UPLOAD_FAILED)

    return {"text": text}
