from datetime import date
from typing import Dict, Optional

from smartwaste.core.risk import Tone, classify
from smartwaste.core.workflow import WorkflowState
from smartwaste.db.inventory import InventoryItem
from smartwaste.db.store import DashboardSummary, OutcomeCounts, PendingRemoval, UrgentItem


def item_to_schema(item: InventoryItem, today: date) -> Dict:
    """Item fields plus its current expiry status"""
    return {**item.to_schema, "status": classify(item.expiry, today).to_schema}


def urgent_to_schema(urgent: UrgentItem) -> Dict:
    return {
        **urgent.item.to_schema,
        "status": urgent.status.to_schema,
        "suggested_action": urgent.suggested_action,
    }


def pending_to_schema(state: WorkflowState, pending: Optional[PendingRemoval], today: date) -> Dict:
    return {
        "state": state.value,
        "item": item_to_schema(pending.item, today) if pending else None,
    }


def outcomes_to_schema(outcomes: OutcomeCounts) -> Dict:
    return {"total_logs": outcomes.total, "saved": outcomes.saved, "wasted": outcomes.wasted}


def dashboard_to_schema(summary: DashboardSummary) -> Dict:
    return {
        "total_items": summary.total_items,
        "overdue": summary.by_tone[Tone.DANGER],
        "expiring_soon": summary.by_tone[Tone.WARNING],
        "ok": summary.by_tone[Tone.OK],
        **outcomes_to_schema(summary.outcomes),
        "top_urgent": [urgent_to_schema(u) for u in summary.top_urgent],
    }
