"""
Process-wide session holder.

The app serves a single operator, so one Session lives for the lifetime of the
process. Nothing is written to disk; restarting the process starts over.
"""

from typing import Optional

from smartwaste.core.config import settings
from smartwaste.core.session import Session

_session: Optional[Session] = None


def create_session(seed: bool = False) -> Session:
    global _session
    _session = Session(top_n=settings.dashboard_top_n)
    if seed:
        # Imported here to keep the seed script out of the import path of the store.
        from smartwaste.scripts.seed_demo_data import seed_demo_data

        seed_demo_data(_session)
    return _session


def get_session() -> Session:
    if _session is None:
        return create_session(seed=settings.seed_demo_data)
    return _session


def reset_session() -> None:
    global _session
    _session = None
