from fastapi import APIRouter, Depends

from smartwaste.core.converters import outcomes_to_schema
from smartwaste.core.session import Session
from smartwaste.db.database import get_session
from smartwaste.schemas.logs import WasteLogOut

router = APIRouter()


@router.get("/", response_model=WasteLogOut)
async def list_waste_log(session: Session = Depends(get_session)):
    """Removed items and what happened to them, most recent first"""
    return {
        **outcomes_to_schema(session.outcome_counts()),
        "entries": [entry.to_schema for entry in session.list_waste_log()],
    }
