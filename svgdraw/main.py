"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from svgdraw import __version__
from svgdraw.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.svgdraw_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="svgdraw",
        description="Basic SVG paths, text and styles replayed as page-drawing primitives",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from svgdraw.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
