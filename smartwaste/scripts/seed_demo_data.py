"""
Seed a session with a few demo items, dated relative to today so the
dashboard always shows one item per risk bucket.

Run standalone to print the resulting dashboard:
  python -m smartwaste.scripts.seed_demo_data
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import List, Optional

from smartwaste.core.converters import dashboard_to_schema
from smartwaste.core.session import Session
from smartwaste.db.inventory import InventoryItem, ItemDraft

# (name, quantity, unit, days until expiry)
DEMO_ITEMS = [
    ("Milk", 8, "L", 5),
    ("Chicken breast", 12, "pcs", 1),
    ("Tomatoes", 30, "pcs", -1),
]


def seed_demo_data(session: Session, today: Optional[date] = None) -> List[InventoryItem]:
    today = today or session.store.today()
    created = []
    # add_item prepends, so insert in reverse to keep DEMO_ITEMS order in the listing.
    for name, quantity, unit, offset in reversed(DEMO_ITEMS):
        draft = ItemDraft(name=name, quantity=quantity, unit=unit, expiry=(today + timedelta(days=offset)).isoformat())
        created.append(session.add_item(draft))
    created.reverse()
    return created


def main() -> None:
    session = Session()
    items = seed_demo_data(session)
    print(f"[seed_demo_data] created_items={len(items)}")
    summary = dashboard_to_schema(session.dashboard())
    print(
        f"[seed_demo_data] overdue={summary['overdue']} expiring_soon={summary['expiring_soon']} ok={summary['ok']}"
    )
    for row in summary["top_urgent"]:
        print(f"  {row['name']}: {row['status']['label']} ({row['status']['days']}d) -> {row['suggested_action']}")


if __name__ == "__main__":
    main()
