from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool

from complaint_assistant.api_routes import router as api_router
from complaint_assistant.core.errors import AppError, InvalidInput
from complaint_assistant.core.settings import Settings
from complaint_assistant.services.llm_client import CompletionClient, LLMConfig, build_llm

logger = logging.getLogger(__name__)

ROOT = Path(__file__).resolve().parents[1]  # project root
GENERIC_ERROR = "Er is een fout opgetreden bij het verwerken van uw verzoek."


def llm_config_from_settings(settings: Settings) -> LLMConfig:
    return LLMConfig(
        provider=settings.llm_provider,
        model=settings.llm_model,
        temperature=settings.llm_temperature,
        max_tokens=settings.llm_max_tokens,
        base_url=settings.llm_base_url,
        timeout=settings.llm_timeout,
        openai_api_key=settings.OPENAI_API_KEY,
        gemini_api_key=settings.GEMINI_API_KEY,
    )


async def _startup_check(llm: CompletionClient, model: str) -> None:
    logger.info("Testing completion service connection with model: %s", model)
    try:
        reply = await run_in_threadpool(llm.ping)
    except AppError as e:
        logger.error("Completion service connection failed: %s (%s)", e.message, e.detail)
        return
    except Exception:
        logger.exception("Completion service connection failed")
        return
    logger.info("Completion service connection successful: %r", reply)


def create_app(settings: Settings, llm: Optional[CompletionClient] = None) -> FastAPI:
    if llm is None:
        llm = build_llm(llm_config_from_settings(settings))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.llm_startup_check:
            await _startup_check(app.state.llm, settings.llm_model)
        yield

    app = FastAPI(title="Complaint Letter Assistant", lifespan=lifespan)
    app.state.llm = llm
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.mount("/static", StaticFiles(directory=ROOT / "static"), name="static")
    templates = Jinja2Templates(directory=ROOT / "templates")

    app.include_router(api_router)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        logger.error("%s on %s: %s (%s)", type(exc).__name__, request.url.path, exc.message, exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info("Invalid request on %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": InvalidInput.message})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(status_code=500, content={"error": GENERIC_ERROR})

    @app.get("/", response_class=HTMLResponse)
    def home(request: Request):
        return templates.TemplateResponse(request, "index.html", {"max_upload_mb": 5})

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
