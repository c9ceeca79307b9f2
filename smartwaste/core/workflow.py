"""
Outcome logging workflow.

    IDLE --request_removal--> AWAITING_OUTCOME --submit--> IDLE (item logged and removed)
                                               --cancel--> IDLE (nothing changes)

Only one removal can be pending; a new request replaces the current one.
"""

import logging
from enum import Enum
from typing import Optional

from smartwaste.core.errors import ValidationError, ValidationKind

logger = logging.getLogger(__name__)


class WorkflowState(str, Enum):
    IDLE = "idle"
    AWAITING_OUTCOME = "awaiting_outcome"


class OutcomeWorkflow:
    def __init__(self, store):
        self._store = store
        self._pending = None

    @property
    def pending(self):
        return self._pending

    @property
    def state(self) -> WorkflowState:
        if self._pending is None:
            return WorkflowState.IDLE
        return WorkflowState.AWAITING_OUTCOME

    def request_removal(self, item):
        pending = self._store.request_removal(item)
        if self._pending is not None:
            logger.info("Replacing pending removal of item %s with item %s", self._pending.item_id, item.id)
        self._pending = pending
        return pending

    def cancel(self):
        """Drop the pending removal, if any, and return it."""
        pending, self._pending = self._pending, None
        return pending

    def submit(self, outcome, notes: Optional[str] = None):
        if self._pending is None:
            raise ValidationError(ValidationKind.NO_PENDING_REMOVAL, "No item is waiting for an outcome.")
        # An invalid outcome raises here and the pending item stays put.
        entry = self._store.commit_outcome(self._pending, outcome, notes)
        self._pending = None
        return entry
