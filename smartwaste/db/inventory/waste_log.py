from dataclasses import dataclass
from enum import Enum
from typing import Optional

from smartwaste.core.errors import ValidationError, ValidationKind
from .item import Quantity


class Outcome(str, Enum):
    SOLD_USED = "sold_used"
    DONATED = "donated"
    WASTED = "wasted"

    @property
    def label(self) -> str:
        return _OUTCOME_LABEL[self]

    @property
    def is_saved(self) -> bool:
        # Anything that didn't end up in the bin counts as saved.
        return self is not Outcome.WASTED

    @classmethod
    def parse(cls, value) -> "Outcome":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip())
            except ValueError:
                pass
        allowed = ", ".join(o.value for o in cls)
        raise ValidationError(
            ValidationKind.INVALID_OUTCOME,
            f"Outcome must be one of {allowed} (got {value!r})",
        )


_OUTCOME_LABEL = {
    Outcome.SOLD_USED: "Sold / Used",
    Outcome.DONATED: "Donated",
    Outcome.WASTED: "Wasted",
}


@dataclass(frozen=True)
class WasteLogEntry:
    id: int
    item_id: int

    # Snapshot of the item at logging time; survives the item's removal.
    name: str
    quantity: Quantity
    unit: str
    expiry: str

    outcome: Outcome
    notes: Optional[str]
    at_iso: str

    @property
    def to_schema(self) -> dict:
        return {
            "id": self.id,
            "item_id": self.item_id,
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "expiry": self.expiry,
            "outcome": self.outcome.value,
            "outcome_label": self.outcome.label,
            "notes": self.notes,
            "at_iso": self.at_iso,
        }
