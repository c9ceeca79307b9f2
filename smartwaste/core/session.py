"""
Session context: one store, one removal workflow, and the command/query
surface the presentation layer talks to.
"""

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Callable, List, Optional

from smartwaste.core import ranking
from smartwaste.core.errors import SmartWasteError
from smartwaste.core.risk import DateLike, ExpiryStatus, classify
from smartwaste.core.workflow import OutcomeWorkflow, WorkflowState
from smartwaste.db.inventory import InventoryItem, WasteLogEntry
from smartwaste.db.store import DashboardSummary, InventoryStore, PendingRemoval

logger = logging.getLogger(__name__)


@contextmanager
def _command(name: str):
    try:
        yield
    except SmartWasteError as exc:
        logger.warning("%s rejected: %s", name, exc)
        raise


class Session:
    def __init__(
        self,
        store: Optional[InventoryStore] = None,
        clock: Optional[Callable[[], datetime]] = None,
        top_n: int = 3,
    ):
        if store is not None and clock is not None:
            raise ValueError("Pass either a store or a clock for a new store, not both")
        self.store = store if store is not None else InventoryStore(clock=clock)
        self.workflow = OutcomeWorkflow(self.store)
        self.top_n = top_n

    # ---------- queries ----------

    def list_inventory(self):
        return self.store.list_inventory()

    def list_waste_log(self):
        return self.store.list_waste_log()

    def classify(self, expiry: DateLike) -> ExpiryStatus:
        return classify(expiry, self.store.today())

    def rank(self, items=None) -> List[InventoryItem]:
        if items is None:
            items = self.store.list_inventory()
        return ranking.rank(items, self.store.today())

    def dashboard(self, n: Optional[int] = None) -> DashboardSummary:
        return self.store.dashboard(self.top_n if n is None else n)

    def total_items(self) -> int:
        return self.store.total_items()

    def count_by_tone(self):
        return self.store.count_by_tone()

    def outcome_counts(self):
        return self.store.outcome_counts()

    @property
    def pending_removal(self) -> Optional[PendingRemoval]:
        return self.workflow.pending

    @property
    def workflow_state(self) -> WorkflowState:
        return self.workflow.state

    # ---------- commands ----------

    def add_item(self, draft) -> InventoryItem:
        with _command("add_item"):
            return self.store.add_item(draft)

    def request_removal(self, item_or_id) -> PendingRemoval:
        """Start logging an outcome for an item, given the item or its id."""
        with _command("request_removal"):
            item = item_or_id
            if not isinstance(item_or_id, InventoryItem):
                item = self.store.get_item(item_or_id)
            return self.workflow.request_removal(item)

    def cancel_pending_removal(self) -> Optional[PendingRemoval]:
        return self.workflow.cancel()

    def commit_outcome(self, outcome, notes: Optional[str] = None) -> WasteLogEntry:
        with _command("commit_outcome"):
            return self.workflow.submit(outcome, notes)

    def remove_item_immediately(self, item_id) -> InventoryItem:
        with _command("remove_item_immediately"):
            return self.store.remove_item_immediately(item_id)
