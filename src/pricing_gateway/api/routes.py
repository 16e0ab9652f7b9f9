"""
Gateway routes - request router for the pricing endpoints.

    GET  /              index page
    GET  /favicon.ico   404
    POST /rules         price each part through the markup/discount/manufacturability rules
    POST /flow          price each part through the pricing flow (?batch=true: one call)

Any other GET is a 404, any other POST is checked for a valid body and then
404s, and any other method is a 405.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse, Response

from ..config.settings import Settings
from ..engine import FlowEngine, Part, PricingEngine
from ..engine.models import BODY_NOT_ARRAY
from ..errors import AssetMissingError, ClientInputError
from ..services.diagnostics import log_evaluation_error, log_evaluation_response
from ..utils import strict_json


router = APIRouter()

HTML_MEDIA_TYPE = "text/html; charset=utf-8"
FALLBACK_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


# Dependencies

def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_pricing_engine(request: Request) -> PricingEngine:
    return request.app.state.pricing_engine


def get_flow_engine(request: Request) -> FlowEngine:
    return request.app.state.flow_engine


async def read_parts(request: Request) -> list[Part]:
    """Decode the request body as a JSON array of parts."""
    raw = await request.body()
    try:
        body = strict_json.loads(raw)
    except ValueError as e:
        raise ClientInputError(BODY_NOT_ARRAY) from e
    return Part.parse_batch(body)


def failure_response(err: Exception, path: str, parts: list[Part]) -> PlainTextResponse:
    """Log a processing failure and return its message as a 500."""
    log_evaluation_error(err, path, parts)
    return PlainTextResponse(str(err) or "Error", status_code=500)


# Endpoints

@router.get("/")
async def serve_index(settings: Settings = Depends(get_app_settings)):
    """Serve the static index page."""
    path = settings.index_html
    if path is None or not path.is_file():
        raise AssetMissingError(path)
    return FileResponse(path, media_type=HTML_MEDIA_TYPE)


@router.get("/favicon.ico")
async def favicon():
    return Response(status_code=404)


@router.post("/rules")
async def price_with_rules(
    request: Request,
    parts: list[Part] = Depends(read_parts),
    engine: PricingEngine = Depends(get_pricing_engine),
    settings: Settings = Depends(get_app_settings),
):
    """Price parts through the individual decision rules."""
    path = request.url.path
    try:
        results = await engine.price_parts(parts)
    except Exception as e:
        return failure_response(e, path, parts)

    payload = [result.to_dict() for result in results]
    log_evaluation_response(path, parts, payload, settings.log_responses)
    return JSONResponse(payload)


@router.post("/flow")
async def price_with_flow(
    request: Request,
    batch: Optional[str] = None,
    parts: list[Part] = Depends(read_parts),
    engine: FlowEngine = Depends(get_flow_engine),
    settings: Settings = Depends(get_app_settings),
):
    """Price parts through the pricing flow, per part or as one batch."""
    path = request.url.path
    try:
        payload = await engine.run(parts, batch=batch == "true")
    except Exception as e:
        return failure_response(e, path, parts)

    log_evaluation_response(path, parts, payload, settings.log_responses)
    return JSONResponse(payload)


@router.api_route("/{path:path}", methods=FALLBACK_METHODS, include_in_schema=False)
async def fallback(request: Request, path: str):
    """Unknown routes and disallowed methods."""
    if request.method == "GET":
        return PlainTextResponse("Not Found", status_code=404)

    if request.method != "POST":
        return PlainTextResponse("Method Not Allowed", status_code=405)

    # A malformed body is reported before the unknown path
    await read_parts(request)
    return PlainTextResponse("Not Found", status_code=404)
