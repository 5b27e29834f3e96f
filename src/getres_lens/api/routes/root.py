from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from getres_lens import __version__

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root discovery endpoint listing the API links."""
    return {
        "meta": {
            "title": "getres-lens API",
            "description": "Resolve getRes(<id>) references in source text to resource paths.",
            "version": __version__,
        },
        "links": {
            "self": "/",
            "resources": "/resources",
            "tree": "/resources/tree",
            "refresh": "/refresh",
            "scan": "/scan",
            "hover": "/hover",
            "completions": "/completions",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
