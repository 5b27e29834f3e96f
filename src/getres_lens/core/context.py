from __future__ import annotations

import logging
from pathlib import Path

from getres_lens.config import Settings
from getres_lens.core.languages import detect_language_from_path, normalize_language, normalize_languages
from getres_lens.core.ports.host import HostSink
from getres_lens.core.ports.source import ResourceSource
from getres_lens.core.scanner import complete, hover, scan
from getres_lens.core.store import ResourceStore
from getres_lens.errors import ConfigError, RefreshError
from getres_lens.models import CompletionItem, Document, HoverPayload, Position, ScanResult

logger = logging.getLogger(__name__)


class LensContext:
    """Everything a host session needs, created once at startup and passed around.

    Owns the resource store, the source it refreshes from, and the sink that
    receives annotations and status text.
    """

    def __init__(self, source: ResourceSource, sink: HostSink, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        self.source = source
        self.sink = sink
        self.store = ResourceStore(source)
        try:
            self.languages = normalize_languages(self.settings.languages)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

    @classmethod
    def from_settings(cls, settings: Settings, sink: HostSink) -> LensContext:
        from getres_lens.db.factory import create_source

        return cls(create_source(settings), sink, settings)

    async def refresh(self) -> bool:
        try:
            records = await self.store.refresh()
        except RefreshError as exc:
            logger.error("%s", exc)
            self.sink.notify("Failed to fetch resources. Please check your resource source.", level="error")
            return False
        self.sink.notify(f"Resources refreshed ({len(records)} records).")
        return True

    async def dispose(self) -> None:
        await self.source.dispose()

    def accepts(self, document: Document) -> bool:
        language = document.language
        if language is not None:
            try:
                language = normalize_language(language)
            except ValueError:
                return False
        elif document.uri is not None:
            language = detect_language_from_path(Path(document.uri))
        # Documents of unknown language are scanned.
        return language is None or language in self.languages

    def handle_selection_change(self, document: Document, cursor: Position | None) -> ScanResult | None:
        if not self.accepts(document):
            return None
        result = scan(document.lines, cursor, self.store)
        self.sink.set_annotations(result.annotations)
        if result.status is not None:
            self.sink.set_status(result.status)
        return result

    def handle_document_change(self, document: Document, cursor: Position | None) -> ScanResult | None:
        return self.handle_selection_change(document, cursor)

    def hover(self, document: Document, position: Position) -> HoverPayload | None:
        if not self.accepts(document):
            return None
        return hover(document.lines, position, self.store)

    def complete(self, document: Document, position: Position) -> list[CompletionItem] | None:
        if not self.accepts(document) or not 0 <= position.line < len(document.lines):
            return None
        prefix = document.lines[position.line][: position.character]
        return complete(prefix, self.store)
