"""Gateway API routes."""
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

from gateway.service import GatewayService

router = APIRouter(tags=["gateway"])


@router.post("/")
async def post_cep(request: Request) -> Response:
    service: GatewayService = request.app.state.gateway_service
    # Parsed by the service: malformed JSON answers 422 "invalid zipcode".
    body = await request.body()
    result = await service.forward(body, request.state.trace_context)
    if result.payload is not None:
        return JSONResponse(result.payload.model_dump(), status_code=result.status_code)
    return Response(
        content=result.content,
        status_code=result.status_code,
        media_type=result.media_type,
    )
