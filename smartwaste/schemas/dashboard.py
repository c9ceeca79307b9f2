from typing import List, Union

from pydantic import BaseModel

from .inventory import ExpiryStatusOut


class UrgentItemOut(BaseModel):
    id: int
    name: str
    quantity: Union[int, float]
    unit: str
    expiry: str
    status: ExpiryStatusOut
    suggested_action: str


class DashboardOut(BaseModel):
    total_items: int
    overdue: int
    expiring_soon: int
    ok: int
    total_logs: int
    saved: int
    wasted: int
    top_urgent: List[UrgentItemOut]
