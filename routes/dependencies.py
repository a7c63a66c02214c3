"""
Request dependencies for ComponentCraft routes
"""
from fastapi import Depends, HTTPException, Request, status

from services.container import ComponentServices
from services.generation_service import GenerationService
from services.history_service import HistoryService
from services.page_composer import PageComposer


def get_services(request: Request) -> ComponentServices:
    """
    Services built at startup and stored on the application state
    """
    services = getattr(request.app.state, "services", None)
    if services is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Component services are not initialized"
        )
    return services


def get_generation_service(services: ComponentServices = Depends(get_services)) -> GenerationService:
    return services.generation


def get_history_service(services: ComponentServices = Depends(get_services)) -> HistoryService:
    return services.history


def get_page_composer(services: ComponentServices = Depends(get_services)) -> PageComposer:
    return services.pages
