"""
Component generation routes for ComponentCraft
"""
from fastapi import APIRouter, Depends, Query
from typing import Optional
import logging

from models.component import (
    ContextSuggestions,
    GeneratedComponent,
    GenerationRequest,
    ServiceStatus,
    VariationsRequest,
    VariationsResponse,
)
from models.context import ContextInsights
from routes.dependencies import get_generation_service
from services.generation_service import GenerationService

router = APIRouter(prefix="/api/components", tags=["Components"])
logger = logging.getLogger(__name__)


@router.post("/generate", response_model=GeneratedComponent)
async def generate_component(
    request: GenerationRequest,
    generation_service: GenerationService = Depends(get_generation_service)
):
    """
    Generate a component. Always succeeds; degraded results are labelled in metadata.source
    """
    logger.info(f"Component generation requested: {request.prompt[:80]}")
    return await generation_service.generate(request)


@router.post("/variations", response_model=VariationsResponse)
async def generate_variations(
    request: VariationsRequest,
    generation_service: GenerationService = Depends(get_generation_service)
):
    return await generation_service.generate_variations(request, request.count)


@router.get("/context", response_model=ContextInsights)
async def get_context(
    project_directory: Optional[str] = Query(default=None, alias="projectDirectory"),
    generation_service: GenerationService = Depends(get_generation_service)
):
    return await generation_service.get_context(project_directory)


@router.post("/context/refresh", response_model=ContextInsights)
async def refresh_context(
    project_directory: Optional[str] = Query(default=None, alias="projectDirectory"),
    generation_service: GenerationService = Depends(get_generation_service)
):
    return await generation_service.refresh_context(project_directory)


@router.get("/suggestions", response_model=ContextSuggestions)
async def get_suggestions(
    prompt: str = Query(..., min_length=1),
    generation_service: GenerationService = Depends(get_generation_service)
):
    return await generation_service.get_context_suggestions(prompt)


@router.get("/status", response_model=ServiceStatus)
async def get_status(generation_service: GenerationService = Depends(get_generation_service)):
    return await generation_service.get_status()
