import pytest

from smartwaste.core.errors import ValidationError, ValidationKind
from smartwaste.core.workflow import OutcomeWorkflow, WorkflowState
from smartwaste.db.inventory import ItemDraft, Outcome

from conftest import days_from_today


@pytest.fixture
def workflow(store):
    return OutcomeWorkflow(store)


def add(store, name):
    return store.add_item(ItemDraft(name=name, quantity=1, expiry=days_from_today(1)))


def test_starts_idle(workflow):
    assert workflow.state is WorkflowState.IDLE
    assert workflow.pending is None


def test_request_moves_to_awaiting_outcome(workflow, store):
    item = add(store, "Milk")
    pending = workflow.request_removal(item)
    assert workflow.state is WorkflowState.AWAITING_OUTCOME
    assert workflow.pending == pending
    assert pending.item == item
    assert store.list_inventory() == (item,)


def test_cancel_returns_to_idle_without_side_effects(workflow, store):
    item = add(store, "Milk")
    inventory_before = store.list_inventory()
    log_before = store.list_waste_log()

    workflow.request_removal(item)
    cancelled = workflow.cancel()

    assert cancelled.item == item
    assert workflow.state is WorkflowState.IDLE
    assert store.list_inventory() == inventory_before
    assert store.list_waste_log() == log_before


def test_cancel_when_idle_is_harmless(workflow):
    assert workflow.cancel() is None
    assert workflow.state is WorkflowState.IDLE


def test_submit_commits_and_returns_to_idle(workflow, store):
    item = add(store, "Milk")
    workflow.request_removal(item)
    entry = workflow.submit("sold_used", "staff lunch")

    assert workflow.state is WorkflowState.IDLE
    assert entry.outcome is Outcome.SOLD_USED
    assert entry.notes == "staff lunch"
    assert store.list_inventory() == ()
    assert store.list_waste_log() == (entry,)


def test_last_request_wins(workflow, store):
    milk = add(store, "Milk")
    cream = add(store, "Cream")
    workflow.request_removal(milk)
    workflow.request_removal(cream)
    assert workflow.pending.item == cream

    entry = workflow.submit("donated")
    assert entry.item_id == cream.id
    assert store.list_inventory() == (milk,)


def test_submit_without_pending_is_rejected(workflow, store):
    add(store, "Milk")
    with pytest.raises(ValidationError) as exc_info:
        workflow.submit("wasted")
    assert exc_info.value.kind is ValidationKind.NO_PENDING_REMOVAL
    assert store.total_items() == 1


def test_submit_with_missing_outcome_keeps_pending(workflow, store):
    item = add(store, "Milk")
    workflow.request_removal(item)
    with pytest.raises(ValidationError) as exc_info:
        workflow.submit(None)
    assert exc_info.value.kind is ValidationKind.INVALID_OUTCOME
    assert workflow.state is WorkflowState.AWAITING_OUTCOME
    assert store.list_inventory() == (item,)
    assert store.list_waste_log() == ()

    workflow.submit("wasted")
    assert store.list_inventory() == ()


def test_item_is_logged_exactly_once(workflow, store):
    item = add(store, "Milk")
    workflow.request_removal(item)
    workflow.submit("wasted")
    with pytest.raises(ValidationError):
        workflow.submit("wasted")
    assert len(store.list_waste_log()) == 1
