from __future__ import annotations

from fastapi import Request

from complaint_assistant.services.llm_client import CompletionClient


def get_llm(request: Request) -> CompletionClient:
    return request.app.state.llm
