from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from complaint_assistant.core.deps import get_llm
from complaint_assistant.core.errors import AppError, InvalidInput, InvalidMode
from complaint_assistant.schemas.inputs import MAX_TEXT_LENGTH, Mode, ProcessTextRequest
from complaint_assistant.schemas.outputs import ErrorResponse, PromptCheckResponse, ProcessTextResponse
from complaint_assistant.services.llm_client import CompletionClient
from complaint_assistant.services.prompts import SAMPLE_LETTER, build_prompts

logger = logging.getLogger(__name__)

router = APIRouter(tags=["process"])

PROCESS_FAILED = "Er is een fout opgetreden bij het verwerken van de tekst"
TEXT_TOO_LONG = f"Tekst mag niet langer zijn dan {MAX_TEXT_LENGTH} karakters."


def parse_process_request(payload: Any) -> ProcessTextRequest:
    """Validate a raw `{text, type}` body, raising InvalidInput / InvalidMode."""
    if not isinstance(payload, dict):
        raise InvalidInput(detail=f"Body is {type(payload).__name__}, expected object")

    text = payload.get("text")
    if not text or not isinstance(text, str):
        raise InvalidInput()

    if len(text) > MAX_TEXT_LENGTH:
        raise InvalidInput(TEXT_TOO_LONG)

    try:
        mode = Mode(payload.get("type"))
    except (ValueError, TypeError):
        raise InvalidMode() from None

    return ProcessTextRequest(text=text, mode=mode)


def run_mode(llm: CompletionClient, text: str, mode: Mode) -> str:
    prompts = build_prompts(text, mode)
    return llm.complete(prompts.system_instruction, prompts.user_instruction)


@router.post(
    "/process-text",
    response_model=ProcessTextResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def process_text(payload: Any = Body(None), llm: CompletionClient = Depends(get_llm)):
    try:
        req = parse_process_request(payload)
    except AppError as e:
        return JSONResponse(status_code=e.status_code, content={"error": e.message})

    logger.info("Processing request: type=%s textLength=%d", req.mode.value, len(req.text))

    try:
        processed = run_mode(llm, req.text, req.mode)
    except AppError as e:
        logger.error("Error processing text: %s (%s)", e.message, e.detail)
        return JSONResponse(status_code=500, content={"error": PROCESS_FAILED, "details": str(e)})
    except Exception as e:
        logger.exception("Error processing text")
        return JSONResponse(status_code=500, content={"error": PROCESS_FAILED, "details": str(e)})

    logger.info("Successfully processed text")
    return {"processedText": processed}


@router.get("/test-prompts", response_model=PromptCheckResponse, responses={500: {"model": ErrorResponse}})
def check_prompts(llm: CompletionClient = Depends(get_llm)):
    """Run both modes against a fixed sample letter."""
    try:
        return {
            "rewrite": run_mode(llm, SAMPLE_LETTER, Mode.REWRITE),
            "response": run_mode(llm, SAMPLE_LETTER, Mode.RESPONSE),
        }
    except Exception as e:
        logger.error("Test prompts error: %s", e)
        return JSONResponse(status_code=500, content={"error": "Error testing prompts", "details": str(e)})
