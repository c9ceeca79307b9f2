from typing import Optional

from fastapi import APIRouter, Depends, Query

from smartwaste.core.converters import dashboard_to_schema
from smartwaste.core.errors import SmartWasteError
from smartwaste.core.session import Session
from smartwaste.db.database import get_session
from smartwaste.routers.errors import to_http_exception
from smartwaste.schemas.dashboard import DashboardOut
from smartwaste.schemas.inventory import ExpiryStatusOut

router = APIRouter()


@router.get("/", response_model=DashboardOut)
async def get_dashboard(
    limit: Optional[int] = Query(None, ge=0, le=50),
    session: Session = Depends(get_session),
):
    """Risk snapshot: counts per bucket, saved vs wasted, and the top urgent items."""
    return dashboard_to_schema(session.dashboard(limit))


@router.get("/classify", response_model=ExpiryStatusOut)
async def classify_expiry(expiry: str, session: Session = Depends(get_session)):
    try:
        status = session.classify(expiry)
    except SmartWasteError as e:
        raise to_http_exception(e)
    return status.to_schema
