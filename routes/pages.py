"""
Page composition routes for ComponentCraft
"""
from fastapi import APIRouter, HTTPException, status, Depends
from typing import List, Optional
import logging

from models.page import (
    GeneratedPage,
    GeneratedSection,
    PageGenerationRequest,
    PageTemplate,
    SectionPreviewRequest,
)
from routes.dependencies import get_page_composer
from services.page_composer import PageComposer, TemplateNotFoundError, UnknownSectionTypeError

router = APIRouter(prefix="/api/pages", tags=["Pages"])
logger = logging.getLogger(__name__)


@router.get("/templates", response_model=List[PageTemplate])
async def list_templates(composer: PageComposer = Depends(get_page_composer)):
    return composer.get_templates()


@router.get("/templates/{template_id}", response_model=PageTemplate)
async def get_template(template_id: str, composer: PageComposer = Depends(get_page_composer)):
    template = composer.get_template(template_id)
    if not template:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Template '{template_id}' not found")
    return template


@router.post("/templates", response_model=PageTemplate, status_code=status.HTTP_201_CREATED)
async def create_template(template: PageTemplate, composer: PageComposer = Depends(get_page_composer)):
    return composer.create_custom_template(template)


@router.post("/generate", response_model=GeneratedPage)
async def generate_page(request: PageGenerationRequest, composer: PageComposer = Depends(get_page_composer)):
    """
    Generate every section of a page template in order
    """
    def log_progress(message: str, percent: float) -> None:
        logger.info(f"[{request.template_id}] {percent:.0f}% {message}")

    try:
        return await composer.generate_page(request.template_id, request.customizations, log_progress)
    except TemplateNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/sections/{section_type}/preview", response_model=GeneratedSection)
async def preview_section(
    section_type: str,
    request: Optional[SectionPreviewRequest] = None,
    composer: PageComposer = Depends(get_page_composer)
):
    try:
        return await composer.generate_section_preview(section_type, request.theme if request else None)
    except UnknownSectionTypeError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
