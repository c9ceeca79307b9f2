from typing import List, Literal, Optional, Union

from pydantic import BaseModel

Outcome = Literal["sold_used", "donated", "wasted"]


class WasteLogEntryOut(BaseModel):
    id: int
    item_id: int
    name: str
    quantity: Union[int, float]
    unit: str
    expiry: str
    outcome: Outcome
    outcome_label: str
    notes: Optional[str] = None
    at_iso: str


class WasteLogOut(BaseModel):
    total_logs: int
    saved: int
    wasted: int
    entries: List[WasteLogEntryOut]
