"""GET/POST /api/history: recent generations."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.config import settings
from app.dependencies import get_store
from app.history.store import HistoryStore, HistoryStoreError
from app.models.art import HistoryCreate
from app.models.responses import HistoryItemResponse, HistoryListResponse

router = APIRouter()


@router.get("/history", response_model=HistoryListResponse)
async def list_history(store: HistoryStore = Depends(get_store)) -> HistoryListResponse:
    try:
        items = store.list(limit=settings.history_limit)
    except HistoryStoreError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e
    return HistoryListResponse(items=items)


@router.post("/history", response_model=HistoryItemResponse, status_code=201)
async def save_history(
    payload: HistoryCreate,
    store: HistoryStore = Depends(get_store),
) -> HistoryItemResponse:
    try:
        entry = store.save(payload)
    except HistoryStoreError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e
    return HistoryItemResponse(item=entry)


@router.get("/history/{entry_id}", response_model=HistoryItemResponse)
async def get_history_entry(
    entry_id: str,
    store: HistoryStore = Depends(get_store),
) -> HistoryItemResponse:
    entry = store.get(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="History entry not found")
    return HistoryItemResponse(item=entry)
