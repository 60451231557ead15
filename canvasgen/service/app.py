"""FastAPI application exposing the canvasgen pipeline over HTTP."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, List, Optional, TypeVar

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from ..errors import InvalidIdentifier
from ..identifiers import require_identifier
from ..orchestrator import GenerationOrchestrator

_T = TypeVar("_T")


class ComponentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Any JSON value; require_identifier rejects non-strings.
    component_id: Any = Field(default=None, alias="componentId")


class GenerateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    files: Optional[List[str]] = None
    component_path: Optional[str] = Field(default=None, alias="componentPath")
    component_tag: Optional[str] = Field(default=None, alias="componentTag")
    origin: Optional[str] = None
    error: Optional[str] = None


class ExtractResponse(BaseModel):
    success: bool
    source: Optional[str] = None
    error: Optional[str] = None


class DeleteResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    deleted: bool = False
    updated_files: List[str] = Field(default_factory=list, alias="updatedFiles")


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> GenerationOrchestrator:
    return GenerationOrchestrator()


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


async def _run_blocking(func: Callable[[], _T]) -> _T:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, func)


def create_app(
    orchestrator_factory: Callable[[], GenerationOrchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing canvasgen operations."""

    app = FastAPI(title="canvasgen service", version="0.1.0")

    async def get_orchestrator() -> GenerationOrchestrator:
        # Fresh per request; the pipeline holds no state between calls.
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post(
        "/generate-component",
        response_model=GenerateResponse,
        response_model_exclude_none=True,
    )
    async def generate_component(
        payload: ComponentRequest,
        orchestrator: GenerationOrchestrator = Depends(get_orchestrator),
    ):
        try:
            safe_id = require_identifier(payload.component_id)
        except InvalidIdentifier as exc:
            return _failure(400, str(exc))

        manifest = await _run_blocking(lambda: orchestrator.generate(safe_id))
        if not manifest.success:
            return _failure(500, manifest.error or "Generation failed")
        return GenerateResponse(
            success=True,
            files=manifest.files,
            component_path=manifest.component_path,
            component_tag=manifest.component_tag,
            origin=manifest.origin,
        )

    @app.post(
        "/extract-component",
        response_model=ExtractResponse,
        response_model_exclude_none=True,
    )
    async def extract_component(
        payload: ComponentRequest,
        orchestrator: GenerationOrchestrator = Depends(get_orchestrator),
    ):
        try:
            safe_id = require_identifier(payload.component_id)
        except InvalidIdentifier as exc:
            return _failure(400, str(exc))

        result = await _run_blocking(lambda: orchestrator.extract(safe_id))
        return ExtractResponse(success=result.success, source=result.source, error=result.error)

    @app.post("/delete-component", response_model=DeleteResponse)
    async def delete_component(
        payload: ComponentRequest,
        orchestrator: GenerationOrchestrator = Depends(get_orchestrator),
    ):
        try:
            safe_id = require_identifier(payload.component_id)
        except InvalidIdentifier as exc:
            return _failure(400, str(exc))

        report = await _run_blocking(lambda: orchestrator.delete(safe_id))
        if not report.success:
            return _failure(500, report.error or "Deletion failed")
        return DeleteResponse(
            success=True,
            deleted=report.deleted,
            updated_files=report.updated_files,
        )

    return app


def run_service(
    host: str = "127.0.0.1",
    port: int = 4202,
    orchestrator_factory: Callable[[], GenerationOrchestrator] = _default_orchestrator,
) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(create_app(orchestrator_factory), host=host, port=port)


__all__ = ["create_app", "run_service"]
