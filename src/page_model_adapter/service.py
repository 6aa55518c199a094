from __future__ import annotations

import logging
import uuid
from typing import Any, Literal

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .adapter import downgrade_to_legacy, ensure_v2, ensure_v3
from .detector import classify
from .logging_config import set_trace_id
from .models.common import AdapterModel, DocumentVersion

logger = logging.getLogger(__name__)

TRACE_HEADER = "X-Cloud-Trace-Context"


class PageModelRequest(BaseModel):
    model: Any = Field(default=None, description="Stored page document of any generation")


class NormalizeRequest(PageModelRequest):
    target: Literal["v2", "v3"] = "v3"


class ClassifyResponse(AdapterModel):
    version: DocumentVersion


class NormalizeResponse(AdapterModel):
    source_version: DocumentVersion
    version: DocumentVersion
    model: dict[str, Any]
    warnings: list[str]


def create_app(*, allow_implicit_downgrade: bool = False) -> FastAPI:
    app = FastAPI(title="Page Model Adapter API", version="0.1.0")

    @app.middleware("http")
    async def bind_trace_id(request: Request, call_next):
        # Cloud Run sends "TRACE_ID/SPAN_ID;o=1"
        header = request.headers.get(TRACE_HEADER, "")
        set_trace_id(header.split("/", 1)[0] or uuid.uuid4().hex)
        try:
            return await call_next(request)
        finally:
            set_trace_id(None)

    @app.post("/v1/page-models:classify", response_model=ClassifyResponse)
    async def classify_page_model(request: PageModelRequest) -> ClassifyResponse:
        return ClassifyResponse(version=classify(request.model))

    @app.post("/v1/page-models:normalize", response_model=NormalizeResponse)
    async def normalize_page_model(request: NormalizeRequest) -> NormalizeResponse:
        source_version = classify(request.model)
        if request.target == "v2":
            document = ensure_v2(request.model, allow_downgrade=allow_implicit_downgrade)
        else:
            document = ensure_v3(request.model)
        logger.info(
            f"Normalized {source_version.value} page model to {request.target}",
            extra={"source_version": source_version.value, "target": request.target},
        )
        return NormalizeResponse(
            source_version=source_version,
            version=DocumentVersion(request.target),
            model=document.dump(),
            warnings=list(document.conversion_warnings),
        )

    @app.post("/v1/page-models:downgrade")
    async def downgrade_page_model(request: PageModelRequest) -> JSONResponse:
        legacy = downgrade_to_legacy(ensure_v2(request.model, allow_downgrade=True))
        return JSONResponse({"model": legacy.dump()})

    @app.get("/health")
    async def healthcheck() -> JSONResponse:
        return JSONResponse({"status": "ok"})

    return app


__all__ = ["create_app", "NormalizeRequest", "NormalizeResponse", "PageModelRequest", "ClassifyResponse"]
