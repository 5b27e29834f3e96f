from collections.abc import Iterable
from pathlib import Path

_LANGUAGE_ALIASES = {
    "javascript": "javascript",
    "js": "javascript",
    "javascriptreact": "javascript",
    "jsx": "javascript",
    "typescript": "typescript",
    "ts": "typescript",
    "typescriptreact": "typescript",
    "tsx": "typescript",
    "vue": "vue",
    "html": "html",
    "htm": "html",
    "python": "python",
    "py": "python",
}

_EXTENSION_LANGUAGE_MAP = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".vue": "vue",
    ".htm": "html",
    ".html": "html",
    ".py": "python",
}

_SUPPORTED_LANGUAGES = frozenset(_LANGUAGE_ALIASES.values())


def normalize_language(language: str) -> str:
    normalized = language.strip().lower()
    resolved = _LANGUAGE_ALIASES.get(normalized, normalized)
    if resolved not in _SUPPORTED_LANGUAGES:
        raise ValueError(f"Unsupported language '{language}'. Supported: {sorted(_SUPPORTED_LANGUAGES)}")
    return resolved


def normalize_languages(languages: Iterable[str]) -> frozenset[str]:
    return frozenset(normalize_language(language) for language in languages)


def detect_language_from_path(file_path: Path) -> str | None:
    return _EXTENSION_LANGUAGE_MAP.get(file_path.suffix.lower())


def extensions_for(languages: Iterable[str]) -> frozenset[str]:
    wanted = set(languages)
    return frozenset(ext for ext, language in _EXTENSION_LANGUAGE_MAP.items() if language in wanted)
