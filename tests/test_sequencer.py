"""Adjacent-swap reordering tests against an in-memory store."""

from types import SimpleNamespace

import pytest

from backoffice.models.menu import MenuItem
from backoffice.services.notifications import Notifier
from backoffice.services.sequencer import Direction, move_item
from backoffice.services.store import StoreWriteError


class FakeStore:
    """Records update calls; optionally fails on the n-th call."""

    def __init__(self, orders: dict[int, int | None], fail_on_call: int | None = None) -> None:
        self.rows = {record_id: SimpleNamespace(id=record_id, display_order=order) for record_id, order in orders.items()}
        self.calls: list[tuple[int, dict]] = []
        self.fail_on_call = fail_on_call

    def update(self, model, record_id, fields):
        self.calls.append((record_id, dict(fields)))
        if self.fail_on_call == len(self.calls):
            raise StoreWriteError("simulated failure")
        row = self.rows[record_id]
        for key, value in fields.items():
            setattr(row, key, value)
        return row

    def sorted_records(self) -> list[SimpleNamespace]:
        return sorted(self.rows.values(), key=lambda row: (row.display_order or 0, row.id))

    def orders(self) -> dict[int, int | None]:
        return {record_id: row.display_order for record_id, row in self.rows.items()}


def test_moving_first_up_and_last_down_writes_nothing() -> None:
    store = FakeStore({1: 0, 2: 1, 3: 2})
    notifier = Notifier()
    records = store.sorted_records()

    first = move_item(store, MenuItem, records, 1, Direction.UP, notifier)
    last = move_item(store, MenuItem, records, 3, Direction.DOWN, notifier)

    assert (first.moved, first.reason) == (False, "boundary")
    assert (last.moved, last.reason) == (False, "boundary")
    assert store.calls == []
    assert notifier.messages == []


def test_single_record_cannot_move_either_way() -> None:
    store = FakeStore({7: 3})
    records = store.sorted_records()

    assert move_item(store, MenuItem, records, 7, "up", Notifier()).reason == "boundary"
    assert move_item(store, MenuItem, records, 7, "down", Notifier()).reason == "boundary"
    assert store.calls == []


def test_unknown_id_is_a_silent_noop() -> None:
    store = FakeStore({1: 0, 2: 1})
    notifier = Notifier()

    result = move_item(store, MenuItem, store.sorted_records(), 99, Direction.DOWN, notifier)

    assert result.moved is False
    assert result.reason == "not_found"
    assert store.calls == []
    assert notifier.messages == []


def test_move_up_swaps_orders_by_id() -> None:
    store = FakeStore({1: 5, 2: 10, 3: 20})

    result = move_item(store, MenuItem, store.sorted_records(), 2, Direction.UP, Notifier())

    assert result.moved is True
    assert store.orders() == {1: 10, 2: 5, 3: 20}
    assert store.calls == [(2, {"display_order": 5}), (1, {"display_order": 10})]


def test_move_down_then_up_restores_original_orders() -> None:
    store = FakeStore({1: 5, 2: 10, 3: 20})
    original = store.orders()

    move_item(store, MenuItem, store.sorted_records(), 1, Direction.DOWN, Notifier())
    assert store.orders() == {1: 10, 2: 5, 3: 20}
    move_item(store, MenuItem, store.sorted_records(), 1, Direction.UP, Notifier())

    assert store.orders() == original
    assert len(store.calls) == 4


def test_second_write_failure_keeps_first_write_and_notifies_once() -> None:
    store = FakeStore({1: 0, 2: 1, 3: 2}, fail_on_call=2)
    notifier = Notifier()

    result = move_item(store, MenuItem, store.sorted_records(), 2, Direction.UP, notifier)

    assert result.moved is False
    assert result.failed is True
    assert len(store.calls) == 2
    # first write applied, second never landed: both rows now share 0
    assert store.orders() == {1: 0, 2: 0, 3: 2}
    assert len(notifier.messages) == 1
    assert notifier.messages[0].variant == "destructive"
    assert notifier.messages[0].description == "Não foi possível reordenar os itens."


def test_first_write_failure_leaves_store_untouched() -> None:
    store = FakeStore({1: 0, 2: 1}, fail_on_call=1)
    notifier = Notifier()

    result = move_item(store, MenuItem, store.sorted_records(), 1, Direction.DOWN, notifier, label="as categorias")

    assert result.failed is True
    assert len(store.calls) == 1
    assert store.orders() == {1: 0, 2: 1}
    assert [message.description for message in notifier.messages] == ["Não foi possível reordenar as categorias."]


def test_missing_display_order_is_treated_as_zero() -> None:
    store = FakeStore({1: None, 2: 4})

    move_item(store, MenuItem, store.sorted_records(), 2, Direction.UP, Notifier())

    assert store.orders() == {1: 4, 2: 0}


def test_duplicate_orders_swap_to_the_same_values() -> None:
    store = FakeStore({1: 3, 2: 3})

    result = move_item(store, MenuItem, store.sorted_records(), 2, Direction.UP, Notifier())

    assert result.moved is True
    assert len(store.calls) == 2
    assert store.orders() == {1: 3, 2: 3}


def test_unknown_direction_is_rejected() -> None:
    store = FakeStore({1: 0, 2: 1})

    with pytest.raises(ValueError):
        move_item(store, MenuItem, store.sorted_records(), 1, "sideways", Notifier())
    assert store.calls == []
