from pydantic import BaseModel


class UploadFileResponse(BaseModel):
    text: str


class ProcessTextResponse(BaseModel):
    processedText: str


class PromptCheckResponse(BaseModel):
    rewrite: str
    response: str


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
