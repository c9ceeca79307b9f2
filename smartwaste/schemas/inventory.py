from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, field_validator

Tone = Literal["danger", "warning", "ok"]
WorkflowState = Literal["idle", "awaiting_outcome"]


class InventoryItemCreate(BaseModel):
    # Only trimmed here; the store validates and reports the ValidationError kind.
    name: Optional[str] = ""
    # Raw JSON value; lax coercion would turn true into 1.
    quantity: Any = 1
    unit: Optional[str] = "pcs"
    expiry: Optional[str] = ""

    @field_validator("name", "unit", "expiry")
    @classmethod
    def _strip(cls, v: Optional[str]) -> str:
        return (v or "").strip()


class ExpiryStatusOut(BaseModel):
    tone: Tone
    days: int
    label: str


class InventoryItemOut(BaseModel):
    id: int
    name: str
    quantity: Union[int, float]
    unit: str
    expiry: str
    status: ExpiryStatusOut


class PendingRemovalOut(BaseModel):
    state: WorkflowState
    item: Optional[InventoryItemOut] = None


class OutcomeCommit(BaseModel):
    outcome: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("notes")
    @classmethod
    def _strip_nullable(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None
