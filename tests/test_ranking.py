from smartwaste.core.ranking import rank, top_urgent
from smartwaste.db.inventory import InventoryItem

from conftest import TODAY, days_from_today


def make(item_id, offset, name=None):
    return InventoryItem(
        id=item_id,
        name=name or f"item-{item_id}",
        quantity=1,
        unit="pcs",
        expiry=days_from_today(offset),
    )


def test_danger_then_warning_then_ok():
    ok, warning, danger = make(1, 10), make(2, 1), make(3, -2)
    assert rank([ok, warning, danger], TODAY) == [danger, warning, ok]


def test_earliest_expiry_first_within_a_tone():
    late, early = make(1, 9), make(2, 4)
    most_overdue, just_overdue = make(3, -5), make(4, -1)
    ranked = rank([late, just_overdue, early, most_overdue], TODAY)
    assert ranked == [most_overdue, just_overdue, early, late]


def test_equal_keys_keep_input_order():
    a, b, c = make(1, 1, "a"), make(2, 1, "b"), make(3, 1, "c")
    assert rank([b, c, a], TODAY) == [b, c, a]
    assert rank([a, b, c], TODAY) == [a, b, c]


def test_rank_does_not_mutate_input():
    items = [make(1, 5), make(2, -1)]
    snapshot = list(items)
    ranked = rank(items, TODAY)
    assert items == snapshot
    assert ranked is not items


def test_rank_empty():
    assert rank([], TODAY) == []


def test_top_urgent():
    items = [make(1, 7), make(2, 0), make(3, -3), make(4, 2), make(5, 30)]
    assert [i.id for i in top_urgent(items, 3, TODAY)] == [3, 2, 4]
    assert [i.id for i in top_urgent(items, 4, TODAY)] == [3, 2, 4, 1]
    assert top_urgent(items, 0, TODAY) == []
    assert len(top_urgent(items, 10, TODAY)) == 5
