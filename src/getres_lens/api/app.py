from __future__ import annotations

from fastapi import FastAPI

from getres_lens import __version__
from getres_lens.api.dependencies import configure
from getres_lens.api.lifespan import lifespan
from getres_lens.api.routes.health import router as health_router
from getres_lens.api.routes.lens import router as lens_router
from getres_lens.api.routes.resources import router as resources_router
from getres_lens.api.routes.root import router as root_router
from getres_lens.config import Settings


def create_app(settings: Settings | None = None) -> FastAPI:
    configure(settings)
    app = FastAPI(
        title="getres-lens API",
        description="Resolve getRes(<id>) references in source text to resource paths.",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(resources_router)
    app.include_router(lens_router)

    return app
