import re

from pydantic import BaseModel, ConfigDict, Field

ResourceId = str | int

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def id_key(value: ResourceId | None) -> str | None:
    """Normalize an id or pid for comparison; ``None`` stays ``None``."""
    if value is None:
        return None
    return str(value)


class Resource(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: ResourceId
    pid: ResourceId | None = None
    name: str
    code: str = ""

    @property
    def key(self) -> str:
        return str(self.id)

    @property
    def parent_key(self) -> str | None:
        return id_key(self.pid)


class TreeNode(BaseModel):
    resource: Resource
    children: list["TreeNode"] = []


TreeNode.model_rebuild()  # necessary for recursive types


class Position(BaseModel):
    line: int = Field(ge=0)
    character: int = Field(ge=0)


class Document(BaseModel):
    lines: list[str]
    language: str | None = None
    uri: str | None = None

    @classmethod
    def from_text(cls, text: str, language: str | None = None, uri: str | None = None) -> "Document":
        """Split on CRLF, CR and LF only, the way editors number lines."""
        lines = _LINE_BREAK.split(text)
        if lines[-1] == "":
            lines.pop()
        return cls(lines=lines, language=language, uri=uri)


class TokenSpan(BaseModel):
    """A ``getRes(<digits>)`` occurrence within one line."""

    resource_id: str
    start: int
    end: int
    token_start: int
    token_end: int


class Match(BaseModel):
    line: int
    resource_id: str
    start: int
    end: int
    token_start: int
    token_end: int
    path: str | None = None
    cursor_overlap: bool = False


class Annotation(BaseModel):
    line: int
    character: int
    text: str
    style: str = "muted"


class StatusPayload(BaseModel):
    resource_id: str
    text: str


class ScanResult(BaseModel):
    matches: list[Match] = []
    annotations: list[Annotation] = []
    status: StatusPayload | None = None


class HoverBlock(BaseModel):
    text: str
    language: str


class HoverPayload(BaseModel):
    resource_id: str
    blocks: list[HoverBlock]


class CompletionItem(BaseModel):
    label: str
    detail: str
    insert_text: str
    sort_text: str
    kind: str = "value"
