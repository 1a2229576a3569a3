from __future__ import annotations

from typing import Any, Optional


class AppError(Exception):
    """Base error. `message` is safe to show to the end user, `detail` is for logs only."""

    status_code: int = 500
    message: str = "Er is een fout opgetreden bij het verwerken van uw verzoek."

    def __init__(self, message: Optional[str] = None, detail: Optional[str] = None):
        if message is not None:
            self.message = message
        self.detail = detail
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ConfigError(AppError):
    pass


# -----------------------------
# Client input (400)
# -----------------------------
class InvalidUpload(AppError):
    status_code = 400
    message = "Alleen .txt, .doc, .docx en .pdf bestanden zijn toegestaan."


class InvalidInput(AppError):
    status_code = 400
    message = "Tekst is verplicht en moet een string zijn."


class InvalidMode(AppError):
    status_code = 400
    message = 'Type moet "rewrite" of "response" zijn.'


# -----------------------------
# Extraction (500)
# -----------------------------
class ExtractionEmpty(AppError):
    message = "Kon geen tekst uit het bestand halen."


class ExtractionFailed(AppError):
    message = "Kon het bestand niet lezen."


# -----------------------------
# Completion service (500)
# -----------------------------
class UpstreamMalformed(AppError):
    message = "Ongeldig antwoord van AI service"


class UpstreamUnavailable(AppError):
    message = "AI service is niet bereikbaar"

    def __init__(
        self,
        message: Optional[str] = None,
        detail: Optional[str] = None,
        status: Optional[int] = None,
        body: Any = None,
    ):
        super().__init__(message, detail)
        self.status = status
        self.body = body
