"""
In-memory inventory store.

Owns the in-stock items and the waste log. Nothing here is persisted: a new
store starts empty (or seeded) every time the process starts.
"""

import itertools
import logging
import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from numbers import Real
from typing import Callable, Dict, List, Mapping, Optional, Tuple, Union

from smartwaste.core import ranking
from smartwaste.core.errors import NotFoundError, ValidationError, ValidationKind
from smartwaste.core.risk import ExpiryStatus, Tone, classify, parse_expiry, suggested_action
from smartwaste.db.inventory import InventoryItem, ItemDraft, Outcome, WasteLogEntry

logger = logging.getLogger(__name__)

DEFAULT_UNIT = "pcs"

Clock = Callable[[], datetime]

# ASCII-only numeric text; int()/float() alone would also take "1_000" or other scripts' digits.
_INT_TEXT = re.compile(r"^[+-]?[0-9]+$")
_FLOAT_TEXT = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")


def _local_now() -> datetime:
    # Aware local time, so log timestamps carry their UTC offset.
    return datetime.now().astimezone()


@dataclass(frozen=True)
class PendingRemoval:
    """Handle for an item whose removal was requested but not yet logged.

    Carries its own snapshot of the item so the log entry can be written even
    if the item has left stock in the meantime.
    """

    item: InventoryItem

    @property
    def item_id(self) -> int:
        return self.item.id


@dataclass(frozen=True)
class OutcomeCounts:
    total: int
    saved: int
    wasted: int


@dataclass(frozen=True)
class UrgentItem:
    item: InventoryItem
    status: ExpiryStatus

    @property
    def suggested_action(self) -> str:
        return suggested_action(self.status.tone)


@dataclass(frozen=True)
class DashboardSummary:
    total_items: int
    by_tone: Dict[Tone, int]
    outcomes: OutcomeCounts
    top_urgent: List[UrgentItem]


def _clean_text(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _parse_quantity(value) -> Union[int, float]:
    invalid = ValidationError(ValidationKind.INVALID_QUANTITY, "Quantity must be a number greater than 0.")

    if isinstance(value, bool):
        raise invalid
    if isinstance(value, str):
        text = value.strip()
        if _INT_TEXT.match(text):
            try:
                value = int(text)
            except ValueError:
                # Past the interpreter's int string-conversion digit limit.
                raise invalid from None
        elif _FLOAT_TEXT.match(text):
            value = float(text)
        else:
            raise invalid
    if not isinstance(value, Real):
        raise invalid
    # Large ints can't be converted to float, so only floats get the finiteness check.
    if isinstance(value, float) and not math.isfinite(value):
        raise invalid
    if value <= 0:
        raise invalid
    return value


class InventoryStore:
    def __init__(self, clock: Optional[Clock] = None):
        self._clock: Clock = clock or _local_now
        self._items: List[InventoryItem] = []
        self._waste_log: List[WasteLogEntry] = []
        self._item_ids = itertools.count(1)
        self._entry_ids = itertools.count(1)

    def today(self) -> date:
        return self._clock().date()

    # ---------- commands ----------

    def add_item(self, draft: Union[ItemDraft, Mapping]) -> InventoryItem:
        """Validate a draft and put the new item at the top of the stock list."""
        if isinstance(draft, Mapping):
            draft = ItemDraft.from_mapping(draft)

        name = _clean_text(draft.name)
        if not name:
            raise ValidationError(ValidationKind.MISSING_NAME, "Please enter an item name.")

        expiry = draft.expiry
        if expiry is None or (isinstance(expiry, str) and not expiry.strip()):
            raise ValidationError(ValidationKind.MISSING_EXPIRY, "Please select an expiry date.")
        expiry = parse_expiry(expiry).isoformat()

        quantity = _parse_quantity(draft.quantity)
        unit = _clean_text(draft.unit) or DEFAULT_UNIT

        item = InventoryItem(
            id=next(self._item_ids),
            name=name,
            quantity=quantity,
            unit=unit,
            expiry=expiry,
        )
        self._items.insert(0, item)
        logger.info("Added item %s (%s %s %s, expires %s)", item.id, item.name, item.quantity, item.unit, item.expiry)
        return item

    def remove_item_immediately(self, item_id: int) -> InventoryItem:
        """Drop an item from stock without writing a log entry."""
        index = self._index_of(item_id)
        if index is None:
            raise NotFoundError(item_id)
        item = self._items.pop(index)
        logger.info("Removed item %s (%s) without logging an outcome", item.id, item.name)
        return item

    def request_removal(self, item: InventoryItem) -> PendingRemoval:
        if self._index_of(item.id) is None:
            raise NotFoundError(item.id)
        return PendingRemoval(item=item)

    def commit_outcome(self, pending: PendingRemoval, outcome, notes: Optional[str] = None) -> WasteLogEntry:
        """Log what happened to the pending item, then take it out of stock.

        The outcome is validated before anything is touched. If the item is
        already gone from stock the entry is still written and the removal is
        a no-op.
        """
        outcome = Outcome.parse(outcome)
        snapshot = pending.item

        entry = WasteLogEntry(
            id=next(self._entry_ids),
            item_id=snapshot.id,
            name=snapshot.name,
            quantity=snapshot.quantity,
            unit=snapshot.unit,
            expiry=snapshot.expiry,
            outcome=outcome,
            notes=_clean_text(notes) or None,
            at_iso=self._clock().isoformat(timespec="microseconds"),
        )
        self._waste_log.append(entry)

        index = self._index_of(snapshot.id)
        if index is None:
            logger.info("Item %s was already out of stock when its outcome was logged", snapshot.id)
        else:
            del self._items[index]
        logger.info("Logged outcome %s for item %s (%s)", outcome.value, snapshot.id, snapshot.name)
        return entry

    # ---------- queries ----------

    def get_item(self, item_id: int) -> InventoryItem:
        index = self._index_of(item_id)
        if index is None:
            raise NotFoundError(item_id)
        return self._items[index]

    def list_inventory(self) -> Tuple[InventoryItem, ...]:
        return tuple(self._items)

    def list_waste_log(self) -> Tuple[WasteLogEntry, ...]:
        """Log entries, most recent first."""
        # Compare parsed instants rather than strings so offsets are honored.
        return tuple(
            sorted(self._waste_log, key=lambda e: (datetime.fromisoformat(e.at_iso), e.id), reverse=True)
        )

    def total_items(self) -> int:
        return len(self._items)

    def count_by_tone(self, today: Optional[date] = None) -> Dict[Tone, int]:
        today = today or self.today()
        counts = {tone: 0 for tone in Tone}
        for item in self._items:
            counts[classify(item.expiry, today).tone] += 1
        return counts

    def outcome_counts(self) -> OutcomeCounts:
        saved = sum(1 for e in self._waste_log if e.outcome.is_saved)
        return OutcomeCounts(total=len(self._waste_log), saved=saved, wasted=len(self._waste_log) - saved)

    def top_urgent(self, n: int, today: Optional[date] = None) -> List[InventoryItem]:
        return ranking.top_urgent(self._items, n, today or self.today())

    def dashboard(self, n: int = 3, today: Optional[date] = None) -> DashboardSummary:
        today = today or self.today()
        return DashboardSummary(
            total_items=self.total_items(),
            by_tone=self.count_by_tone(today),
            outcomes=self.outcome_counts(),
            top_urgent=[UrgentItem(item=item, status=classify(item.expiry, today)) for item in self.top_urgent(n, today)],
        )

    def _index_of(self, item_id) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None
