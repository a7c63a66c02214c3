"""
Component history and collection routes for ComponentCraft
"""
from fastapi import APIRouter, HTTPException, status, Depends, Query, Request
from fastapi.responses import Response
from typing import List, Optional
import logging

from models.history import Collection, CollectionCreate, HistoryEntry, HistoryStatistics, RatingRequest
from routes.dependencies import get_history_service
from services.history_service import HistoryService

router = APIRouter(prefix="/api", tags=["History"])
logger = logging.getLogger(__name__)


def _not_found(kind: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{kind} not found")


@router.get("/history", response_model=List[HistoryEntry])
async def list_history(
    q: Optional[str] = Query(default=None, description="Substring of name, prompt, tag or category"),
    category: Optional[str] = Query(default=None),
    favorites: bool = Query(default=False),
    history: HistoryService = Depends(get_history_service)
):
    """
    Components, most recent first
    """
    entries = history.search(q) if q else history.list_all()
    if category:
        entries = [entry for entry in entries if entry.metadata.category == category]
    if favorites:
        entries = [entry for entry in entries if entry.stats.favorite]
    return entries


@router.get("/history/statistics", response_model=HistoryStatistics)
async def get_statistics(history: HistoryService = Depends(get_history_service)):
    return history.statistics()


@router.post("/history/import", response_model=HistoryEntry, status_code=status.HTTP_201_CREATED)
async def import_component(request: Request, history: HistoryService = Depends(get_history_service)):
    """
    Import an exported component document; it is recorded as a new entry
    """
    body = await request.body()
    entry = await history.import_entry(body.decode("utf-8", errors="replace"))
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid component export document"
        )
    return entry


@router.delete("/history")
async def clear_history(history: HistoryService = Depends(get_history_service)):
    await history.clear_history()
    return {"message": "History cleared"}


@router.get("/history/{entry_id}", response_model=HistoryEntry)
async def get_component(entry_id: str, history: HistoryService = Depends(get_history_service)):
    entry = await history.get(entry_id)
    if not entry:
        raise _not_found("Component")
    return entry


@router.delete("/history/{entry_id}")
async def delete_component(entry_id: str, history: HistoryService = Depends(get_history_service)):
    if not await history.delete(entry_id):
        raise _not_found("Component")
    return {"message": "Component deleted successfully"}


@router.post("/history/{entry_id}/favorite")
async def toggle_favorite(entry_id: str, history: HistoryService = Depends(get_history_service)):
    favorite = await history.toggle_favorite(entry_id)
    if favorite is None:
        raise _not_found("Component")
    return {"id": entry_id, "favorite": favorite}


@router.post("/history/{entry_id}/rating", response_model=HistoryEntry)
async def rate_component(
    entry_id: str,
    rating: RatingRequest,
    history: HistoryService = Depends(get_history_service)
):
    entry = await history.rate(entry_id, rating.rating)
    if not entry:
        raise _not_found("Component")
    return entry


@router.get("/history/{entry_id}/export")
async def export_component(entry_id: str, history: HistoryService = Depends(get_history_service)):
    document = history.export_entry(entry_id)
    if document is None:
        raise _not_found("Component")
    return Response(content=document, media_type="application/json")


@router.get("/collections", response_model=List[Collection])
async def list_collections(history: HistoryService = Depends(get_history_service)):
    return history.list_collections()


@router.post("/collections", response_model=Collection, status_code=status.HTTP_201_CREATED)
async def create_collection(data: CollectionCreate, history: HistoryService = Depends(get_history_service)):
    return await history.create_collection(
        name=data.name,
        description=data.description,
        component_ids=data.component_ids,
        tags=data.tags,
        is_public=data.is_public,
    )


@router.get("/collections/{collection_id}", response_model=Collection)
async def get_collection(collection_id: str, history: HistoryService = Depends(get_history_service)):
    collection = history.get_collection(collection_id)
    if not collection:
        raise _not_found("Collection")
    return collection


@router.post("/collections/{collection_id}/components/{component_id}", response_model=Collection)
async def add_to_collection(
    collection_id: str,
    component_id: str,
    history: HistoryService = Depends(get_history_service)
):
    if not history.get_collection(collection_id):
        raise _not_found("Collection")
    if not await history.add_to_collection(collection_id, component_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Component does not exist or is already in the collection"
        )
    return history.get_collection(collection_id)


@router.delete("/collections/{collection_id}/components/{component_id}", response_model=Collection)
async def remove_from_collection(
    collection_id: str,
    component_id: str,
    history: HistoryService = Depends(get_history_service)
):
    if not history.get_collection(collection_id):
        raise _not_found("Collection")
    if not await history.remove_from_collection(collection_id, component_id):
        raise _not_found("Component in collection")
    return history.get_collection(collection_id)
