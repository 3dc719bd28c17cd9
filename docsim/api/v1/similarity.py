"""Similarity APIs: single-pair comparison and corpus detection."""
from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from docsim.core.errors import InvalidParameterError
from docsim.core.logging import get_logger
from docsim.models.detection import (
    CompareRequest,
    CompareResponse,
    DetectRequest,
    DetectResponse,
)
from docsim.api.deps import get_detection_pipeline
from docsim.services.detection_pipeline import DetectionPipeline, DetectionResult
from docsim.services.report import render_report

logger = get_logger(__name__)
router = APIRouter(prefix="/similarity", tags=["Similarity"])


async def _detect(payload: DetectRequest, pipeline: DetectionPipeline) -> DetectionResult:
    if payload.names is not None and len(payload.names) != len(payload.documents):
        raise InvalidParameterError(
            "names",
            len(payload.names),
            reason=f"expected {len(payload.documents)} names, one per document",
        )
    # CPU 密集计算放到线程中，避免阻塞事件循环
    return await asyncio.to_thread(
        pipeline.run,
        payload.documents,
        payload.min_length,
        payload.top_k,
    )


@router.post("/compare", response_model=CompareResponse, summary="Compare two texts")
async def compare_texts(
    payload: CompareRequest,
    pipeline: DetectionPipeline = Depends(get_detection_pipeline),
) -> CompareResponse:
    entry = await asyncio.to_thread(pipeline.compare, payload.text_a, payload.text_b, payload.min_length)
    return CompareResponse(
        similarity=entry.similarity,
        edit_distance=entry.edit_distance,
        containment=entry.containment,
        left_html=entry.highlight.left_html,
        right_html=entry.highlight.right_html,
    )


@router.post("/detect", response_model=DetectResponse, summary="Rank the most similar document pairs")
async def detect(
    payload: DetectRequest,
    pipeline: DetectionPipeline = Depends(get_detection_pipeline),
) -> DetectResponse:
    result = await _detect(payload, pipeline)
    return DetectResponse(**result.to_dict())


@router.post("/report", response_class=HTMLResponse, summary="Render the HTML similarity report")
async def report(
    payload: DetectRequest,
    pipeline: DetectionPipeline = Depends(get_detection_pipeline),
) -> HTMLResponse:
    result = await _detect(payload, pipeline)
    return HTMLResponse(render_report(result, payload.names))
