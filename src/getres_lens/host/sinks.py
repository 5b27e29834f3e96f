from __future__ import annotations

import logging

from rich.console import Console
from rich.markup import escape

from getres_lens.models import Annotation, StatusPayload

logger = logging.getLogger(__name__)

_LEVEL_STYLES = {"info": "green", "warning": "yellow", "error": "red"}


class RecordingSink:
    """Keeps the latest annotations and status; used by the API, MCP server, and tests."""

    def __init__(self) -> None:
        self.annotations: list[Annotation] = []
        self.status: StatusPayload | None = None
        self.messages: list[tuple[str, str]] = []

    def set_annotations(self, annotations: list[Annotation]) -> None:
        self.annotations = list(annotations)

    def set_status(self, status: StatusPayload) -> None:
        self.status = status

    def notify(self, message: str, level: str = "info") -> None:
        self.messages.append((level, message))


class ConsoleSink:
    """Prints annotations and status lines to a rich console."""

    def __init__(self, console: Console | None = None, label: str | None = None) -> None:
        self.console = console or Console()
        self.label = label

    def set_annotations(self, annotations: list[Annotation]) -> None:
        prefix = escape(f"{self.label}:") if self.label else ""
        for annotation in annotations:
            location = f"{annotation.line + 1}:{annotation.character}"
            self.console.print(f"{prefix}{location} [dim]{escape(annotation.text)}[/dim]")

    def set_status(self, status: StatusPayload) -> None:
        self.console.print(f"[black on yellow] {escape(status.text)} [/black on yellow]")

    def notify(self, message: str, level: str = "info") -> None:
        style = _LEVEL_STYLES.get(level, "white")
        self.console.print(f"[{style}]{escape(message)}[/{style}]")
        logger.debug("Host notification (%s): %s", level, message)
