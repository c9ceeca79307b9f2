import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from smartwaste.core.converters import item_to_schema, pending_to_schema
from smartwaste.core.errors import SmartWasteError
from smartwaste.core.session import Session
from smartwaste.db.database import get_session
from smartwaste.db.inventory import ItemDraft
from smartwaste.routers.errors import to_http_exception
from smartwaste.schemas.inventory import (
    InventoryItemCreate,
    InventoryItemOut,
    OutcomeCommit,
    PendingRemovalOut,
)
from smartwaste.schemas.logs import WasteLogEntryOut

logger = logging.getLogger(__name__)
router = APIRouter()


def _pending_out(session: Session) -> Dict:
    return pending_to_schema(session.workflow_state, session.pending_removal, session.store.today())


@router.get("/items", response_model=List[InventoryItemOut])
async def list_inventory_items(session: Session = Depends(get_session)):
    """
    List in-stock items, most urgent first.

    Overdue items lead, then items expiring within two days, then the rest;
    within a bucket the earliest expiry comes first.
    """
    today = session.store.today()
    return [item_to_schema(item, today) for item in session.rank()]


@router.get("/items/{item_id}", response_model=InventoryItemOut)
async def get_inventory_item(item_id: int, session: Session = Depends(get_session)):
    try:
        item = session.store.get_item(item_id)
    except SmartWasteError as e:
        raise to_http_exception(e)
    return item_to_schema(item, session.store.today())


@router.post("/items", response_model=InventoryItemOut, status_code=status.HTTP_201_CREATED)
async def create_inventory_item(payload: InventoryItemCreate, session: Session = Depends(get_session)):
    try:
        item = session.add_item(ItemDraft(**payload.model_dump()))
    except SmartWasteError as e:
        raise to_http_exception(e)
    return item_to_schema(item, session.store.today())


@router.delete("/items/{item_id}", response_model=Dict)
async def remove_inventory_item(item_id: int, session: Session = Depends(get_session)):
    """Remove an item straight away, without logging an outcome."""
    try:
        item = session.remove_item_immediately(item_id)
    except SmartWasteError as e:
        raise to_http_exception(e)
    return {"ok": True, "id": item.id}


@router.post("/items/{item_id}/removal", response_model=PendingRemovalOut)
async def request_item_removal(item_id: int, session: Session = Depends(get_session)):
    """Start the removal of an item; its outcome is collected next."""
    try:
        session.request_removal(item_id)
    except SmartWasteError as e:
        raise to_http_exception(e)
    return _pending_out(session)


@router.get("/removal", response_model=PendingRemovalOut)
async def get_pending_removal(session: Session = Depends(get_session)):
    return _pending_out(session)


@router.delete("/removal", response_model=PendingRemovalOut)
async def cancel_pending_removal(session: Session = Depends(get_session)):
    session.cancel_pending_removal()
    return _pending_out(session)


@router.post("/removal/commit", response_model=WasteLogEntryOut, status_code=status.HTTP_201_CREATED)
async def commit_pending_removal(payload: OutcomeCommit, session: Session = Depends(get_session)):
    """Log the outcome for the pending item and take it out of stock."""
    try:
        entry = session.commit_outcome(payload.outcome, payload.notes)
    except SmartWasteError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception("commit_pending_removal failed")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return entry.to_schema
