from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

MAX_TEXT_LENGTH = 4000


class Mode(str, Enum):
    REWRITE = "rewrite"
    RESPONSE = "response"


class ProcessTextRequest(BaseModel):
    # Typed container only; routes.process.parse_process_request does the
    # validation so each failure gets its own message.
    model_config = ConfigDict(populate_by_name=True)

    text: str
    mode: Mode = Field(alias="type")
