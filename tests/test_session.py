import pytest

from smartwaste.core.errors import NotFoundError, ValidationError, ValidationKind
from smartwaste.core.risk import Tone
from smartwaste.core.session import Session
from smartwaste.core.workflow import WorkflowState
from smartwaste.db.store import InventoryStore
from smartwaste.db.inventory import ItemDraft
from smartwaste.scripts.seed_demo_data import seed_demo_data

from conftest import TODAY, days_from_today


def test_milk_and_tomatoes_scenario(session):
    milk = session.add_item(ItemDraft(name="Milk", quantity=8, unit="L", expiry=days_from_today(5)))
    assert session.classify(milk.expiry).tone is Tone.OK

    tomatoes = session.add_item(ItemDraft(name="Tomatoes", quantity=30, unit="pcs", expiry=days_from_today(-1)))
    ranked = session.rank()
    assert ranked[0] == tomatoes
    status = session.classify(ranked[0].expiry)
    assert status.tone is Tone.DANGER
    assert status.days == -1

    session.request_removal(tomatoes)
    assert session.workflow_state is WorkflowState.AWAITING_OUTCOME
    session.commit_outcome("wasted", "spoiled")

    assert tomatoes not in session.list_inventory()
    log = session.list_waste_log()
    assert len(log) == 1
    assert log[0].outcome.value == "wasted"
    assert log[0].notes == "spoiled"
    assert log[0].name == "Tomatoes"
    assert session.workflow_state is WorkflowState.IDLE


def test_blank_name_is_rejected(session):
    before = session.total_items()
    with pytest.raises(ValidationError) as exc_info:
        session.add_item({"name": "", "quantity": 1, "unit": "pcs", "expiry": "2026-01-01"})
    assert exc_info.value.kind is ValidationKind.MISSING_NAME
    assert session.total_items() == before


def test_request_removal_by_id(session):
    item = session.add_item(ItemDraft(name="Milk", quantity=1, expiry=days_from_today(2)))
    pending = session.request_removal(item.id)
    assert pending.item == item
    assert session.pending_removal == pending


def test_request_removal_of_unknown_id(session):
    with pytest.raises(NotFoundError):
        session.request_removal(42)
    assert session.workflow_state is WorkflowState.IDLE


def test_cancel_pending_removal(session):
    item = session.add_item(ItemDraft(name="Milk", quantity=1, expiry=days_from_today(2)))
    session.request_removal(item)
    session.cancel_pending_removal()
    assert session.pending_removal is None
    assert session.list_inventory() == (item,)
    assert session.list_waste_log() == ()


def test_rank_explicit_items(session):
    a = session.add_item(ItemDraft(name="A", quantity=1, expiry=days_from_today(9)))
    b = session.add_item(ItemDraft(name="B", quantity=1, expiry=days_from_today(0)))
    assert session.rank([a, b]) == [b, a]


def test_dashboard_uses_configured_top_n(session):
    for offset in range(5):
        session.add_item(ItemDraft(name=f"item {offset}", quantity=1, expiry=days_from_today(offset)))
    assert len(session.dashboard().top_urgent) == 3
    assert len(session.dashboard(4).top_urgent) == 4


def test_seed_demo_data(session):
    items = seed_demo_data(session, TODAY)
    assert [i.name for i in items] == ["Milk", "Chicken breast", "Tomatoes"]
    assert session.list_inventory() == tuple(items)
    counts = session.count_by_tone()
    assert counts == {Tone.DANGER: 1, Tone.WARNING: 1, Tone.OK: 1}


def test_session_wraps_given_store(clock):
    store = InventoryStore(clock=clock)
    session = Session(store=store)
    assert session.store is store
    assert session.workflow_state is WorkflowState.IDLE


def test_store_and_clock_together_are_rejected(clock):
    with pytest.raises(ValueError):
        Session(store=InventoryStore(), clock=clock)
