"""
In-memory inventory records.

Records:
- InventoryItem (one perishable stock line, never edited in place)
- WasteLogEntry (append-only snapshot written when an item leaves stock)
"""

from .item import InventoryItem, ItemDraft
from .waste_log import Outcome, WasteLogEntry

__all__ = ["InventoryItem", "ItemDraft", "Outcome", "WasteLogEntry"]
