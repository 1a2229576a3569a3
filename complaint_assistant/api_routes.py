from __future__ import annotations
from fastapi import APIRouter
from complaint_assistant.routes.process import router as process_router
from complaint_assistant.routes.upload import router as upload_router

router = APIRouter(prefix="/api")
router.include_router(upload_router)
router.include_router(process_router)
