"""FastAPI application entrypoint for docdown service mode."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..assembler import render
from ..index import PackageIndex
from ..logging import get_logger
from ..style import DEFAULT_STYLE, HeadingPattern

logger = get_logger("service")


class RenderRequest(BaseModel):
    package: PackageIndex
    plain: bool = False
    heading: str = HeadingPattern.TITLE_CASE_1WORD.value
    signature: bool = False
    include_import: bool = True


class RenderResponse(BaseModel):
    markdown: str


class HealthResponse(BaseModel):
    status: str


def create_app() -> FastAPI:
    """Create the FastAPI application exposing docdown rendering."""

    app = FastAPI(title="docdown Service", version="1.0.0")

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/render", response_model=RenderResponse)
    async def render_package(payload: RenderRequest) -> RenderResponse:
        # Style and document are built per request and never shared.
        style = DEFAULT_STYLE.with_overrides(
            plain=payload.plain,
            include_signature=payload.signature,
            include_import=payload.include_import,
            synopsis_heading=HeadingPattern.parse(payload.heading),
        )
        document = payload.package.to_document()
        logger.debug("Rendering %s via service", document.name)
        return RenderResponse(markdown=render(document, style))

    @app.exception_handler(ValueError)
    async def value_error_handler(
        _: Any, exc: ValueError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)
