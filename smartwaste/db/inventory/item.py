from dataclasses import dataclass
from typing import Any, Mapping, Union

Quantity = Union[int, float]


@dataclass(frozen=True)
class ItemDraft:
    """Raw "add item" input, exactly as the form collected it."""

    name: Any = ""
    quantity: Any = 1
    unit: Any = "pcs"
    expiry: Any = ""

    @classmethod
    def from_mapping(cls, data: Mapping) -> "ItemDraft":
        return cls(
            name=data.get("name", ""),
            quantity=data.get("quantity", 1),
            unit=data.get("unit", "pcs"),
            expiry=data.get("expiry", ""),
        )


@dataclass(frozen=True)
class InventoryItem:
    id: int
    name: str
    quantity: Quantity
    unit: str
    expiry: str  # canonical YYYY-MM-DD

    @property
    def to_schema(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "expiry": self.expiry,
        }
