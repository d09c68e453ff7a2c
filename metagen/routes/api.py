"""
API Routes for metagen

Handles meta tag generation via streaming, plus form metadata and health.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from metagen.config import get_settings
from metagen.models.request import GenerationRequest
from metagen.models.response import FormSchema, HealthResponse
from metagen.services.form_schema import get_form_schema
from metagen.services.relay_service import RelayService, get_relay_service

router = APIRouter()


@router.post("/api/generate")
async def generate(
    generation: GenerationRequest,
    relay: RelayService = Depends(get_relay_service),
):
    """Stream generated meta tags back as plain UTF-8 text."""
    body = await relay.handle(generation)

    return StreamingResponse(
        body,
        media_type="text/plain; charset=utf-8",
        headers={
            "Cache-Control": "no-cache",
            "X-Accel-Buffering": "no"
        }
    )


@router.get("/api/form", response_model=FormSchema)
async def get_form():
    """Get the generation form definition for client-side rendering."""
    return get_form_schema()


@router.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    settings = get_settings()
    return HealthResponse(service=settings.app_name, model=settings.ai_model)
