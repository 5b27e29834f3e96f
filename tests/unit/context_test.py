"""Tests for LensContext event handling."""

from __future__ import annotations

from pathlib import Path

import pytest

from getres_lens.config import Settings
from getres_lens.core.context import LensContext
from getres_lens.db import InMemoryResourceSource, JsonFileResourceSource
from getres_lens.errors import ConfigError
from getres_lens.host.sinks import RecordingSink
from getres_lens.models import Document, Position


class TestSelectionChange:
    def test_pushes_annotations(self, lens: LensContext, sink: RecordingSink) -> None:
        document = Document.from_text("const a = getRes(3);", language="javascript")

        result = lens.handle_selection_change(document, Position(line=0, character=0))

        assert result is not None
        assert [a.text for a in sink.annotations] == ["Shop-Banner-Logo"]
        assert sink.status is None

    def test_pushes_status_on_overlap(self, lens: LensContext, sink: RecordingSink) -> None:
        document = Document.from_text("const a = getRes(3);", language="javascript")

        lens.handle_selection_change(document, Position(line=0, character=17))

        assert sink.annotations == []
        assert sink.status is not None
        assert sink.status.text == "3:Shop-Banner-Logo"

    def test_status_left_alone_without_overlap(self, lens: LensContext, sink: RecordingSink) -> None:
        document = Document.from_text("getRes(3)\ngetRes(404)", language="javascript")
        lens.handle_selection_change(document, Position(line=0, character=7))
        status = sink.status

        lens.handle_selection_change(document, Position(line=1, character=8))

        assert sink.status is status
        assert [a.text for a in sink.annotations] == ["Shop-Banner-Logo"]

    def test_annotations_replaced_each_time(self, lens: LensContext, sink: RecordingSink) -> None:
        lens.handle_document_change(Document.from_text("getRes(1) getRes(2)"), None)
        assert len(sink.annotations) == 2

        lens.handle_document_change(Document.from_text("getRes(4)"), None)

        assert [a.text for a in sink.annotations] == ["Shop-Footer"]


class TestLanguageGating:
    def test_other_language_is_ignored(self, lens: LensContext, sink: RecordingSink) -> None:
        document = Document.from_text("getRes(1)", language="python")

        assert lens.handle_selection_change(document, None) is None
        assert sink.annotations == []

    def test_language_from_uri(self, lens: LensContext) -> None:
        assert lens.accepts(Document.from_text("", uri="src/app.tsx"))
        assert not lens.accepts(Document.from_text("", uri="src/app.py"))

    def test_unknown_language_name_is_rejected(self, lens: LensContext) -> None:
        assert not lens.accepts(Document.from_text("", language="cobol"))

    def test_language_aliases(self, lens: LensContext) -> None:
        assert lens.accepts(Document.from_text("", language="JavaScriptReact"))

    def test_untyped_document_is_scanned(self, lens: LensContext) -> None:
        assert lens.accepts(Document.from_text("getRes(1)"))

    def test_configured_languages(self, memory_source: InMemoryResourceSource) -> None:
        context = LensContext(memory_source, RecordingSink(), Settings(languages=frozenset({"python"})))

        assert context.accepts(Document.from_text("", language="py"))
        assert not context.accepts(Document.from_text("", language="javascript"))


class TestHoverAndComplete:
    def test_hover(self, lens: LensContext) -> None:
        document = Document.from_text("x = getRes(2)", language="typescript")

        payload = lens.hover(document, Position(line=0, character=8))

        assert payload is not None
        assert payload.blocks[0].text == "Shop-Banner"
        assert payload.blocks[1].text == ".banner { height: 120px; }"

    def test_complete_uses_line_prefix(self, lens: LensContext) -> None:
        document = Document.from_text("x = getRes()", language="javascript")

        items = lens.complete(document, Position(line=0, character=11))

        assert items is not None
        assert len(items) == 5

    def test_complete_not_triggered(self, lens: LensContext) -> None:
        document = Document.from_text("x = getRes()", language="javascript")

        assert lens.complete(document, Position(line=0, character=12)) is None
        assert lens.complete(document, Position(line=4, character=0)) is None


class TestRefresh:
    @pytest.mark.asyncio
    async def test_success_notifies(self, memory_source: InMemoryResourceSource, sink: RecordingSink) -> None:
        context = LensContext(memory_source, sink)

        assert await context.refresh() is True
        assert len(context.store) == 5
        assert sink.messages == [("info", "Resources refreshed (5 records).")]

    @pytest.mark.asyncio
    async def test_failure_notifies_and_keeps_data(
        self, lens: LensContext, memory_source: InMemoryResourceSource, sink: RecordingSink
    ) -> None:
        memory_source.fail_with = ConnectionError("down")

        assert await lens.refresh() is False
        assert len(lens.store) == 5
        assert sink.messages[-1][0] == "error"

    @pytest.mark.asyncio
    async def test_dispose_releases_source(self, lens: LensContext, memory_source: InMemoryResourceSource) -> None:
        await lens.dispose()

        assert memory_source.disposed is True


class TestFromSettings:
    def test_json_source(self, tmp_path: Path) -> None:
        settings = Settings(source="json", json_path=str(tmp_path / "r.json"))

        context = LensContext.from_settings(settings, RecordingSink())

        assert isinstance(context.source, JsonFileResourceSource)

    def test_memory_source(self) -> None:
        context = LensContext.from_settings(Settings(source="memory"), RecordingSink())

        assert isinstance(context.source, InMemoryResourceSource)

    def test_json_source_needs_path(self) -> None:
        with pytest.raises(ConfigError):
            LensContext.from_settings(Settings(source="json"), RecordingSink())

    def test_unknown_source(self) -> None:
        with pytest.raises(ConfigError):
            LensContext.from_settings(Settings(source="mongo"), RecordingSink())

    def test_unsupported_language_is_config_error(self) -> None:
        settings = Settings(source="memory", languages=frozenset({"ruby"}))

        with pytest.raises(ConfigError, match="Unsupported language 'ruby'"):
            LensContext.from_settings(settings, RecordingSink())
