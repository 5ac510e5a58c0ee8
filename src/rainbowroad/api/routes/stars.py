"""Batch star resolution endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError as SchemaError

from rainbowroad.api.dependencies import Aggregator, Metrics
from rainbowroad.api.schemas import StarsRequest, StarsResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["stars"])

MALFORMED_REQUEST = "Malformed Request."
METHOD_NOT_SUPPORTED = "Method is not supported."


@router.post(
    "/stars",
    response_model=StarsResponse,
    operation_id="getStars",
    summary="Resolve star counts",
    description=(
        "Resolve the GitHub star count of every repository in the request. "
        "Per-repository failures are reported in the result rows."
    ),
    responses={400: {"description": "Body is not a valid stars request"}},
)
async def get_stars(
    request: Request,
    aggregator: Aggregator,
    metrics: Metrics,
) -> StarsResponse | PlainTextResponse:
    """Resolve star counts for a batch of repositories."""
    metrics.record_request()

    # Parsed by hand so a bad envelope is a plain 400 rather than a 422
    body = await request.body()
    try:
        stars_request = StarsRequest.model_validate_json(body)
    except SchemaError as e:
        logger.info(f"Rejected malformed stars request: {e.error_count()} error(s)")
        return PlainTextResponse(MALFORMED_REQUEST, status_code=400)

    results = await aggregator.resolve_all(stars_request.identifiers)

    metrics.record_request_success()
    return StarsResponse.from_results(results)


@router.api_route(
    "/stars",
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
async def stars_method_not_supported(metrics: Metrics) -> PlainTextResponse:
    """Only POST is served on /stars."""
    metrics.record_request()
    return PlainTextResponse(METHOD_NOT_SUPPORTED, status_code=404)
