from __future__ import annotations

from pydantic import BaseModel, model_validator

from getres_lens.models import Document, Position


class HealthResponse(BaseModel):
    status: str = "ok"


class ReadinessResponse(BaseModel):
    status: str = "ok"
    source: str = "up"


class RefreshResponse(BaseModel):
    records: int
    generation: int


class PathResponse(BaseModel):
    id: str
    names: list[str]
    path: str


class DocumentRequest(BaseModel):
    """A buffer given either as ``text`` or as ``lines``."""

    text: str | None = None
    lines: list[str] | None = None
    language: str | None = None
    uri: str | None = None

    @model_validator(mode="after")
    def _require_content(self) -> DocumentRequest:
        if self.text is None and self.lines is None:
            raise ValueError("Either 'text' or 'lines' must be provided.")
        return self

    def to_document(self) -> Document:
        if self.lines is not None:
            return Document(lines=self.lines, language=self.language, uri=self.uri)
        return Document.from_text(self.text or "", language=self.language, uri=self.uri)


class ScanRequest(DocumentRequest):
    cursor: Position | None = None


class PositionRequest(DocumentRequest):
    position: Position
