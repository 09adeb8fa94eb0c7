"""Adjacent-swap re-sequencing of records ordered by ``display_order``.

A move swaps the ``display_order`` values of the target and its neighbour in
the already-sorted list. The two rows are written one after the other with
separate commits: if the second write fails the first one stays applied and
both rows report the same ``display_order`` until the next successful move.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from backoffice.services.notifications import Notifier
from backoffice.services.store import StoreWriteError

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"


class OrderedRecord(Protocol):
    id: Any
    display_order: int | None


class RecordWriter(Protocol):
    def update(self, model: Any, record_id: Any, fields: Mapping[str, Any]) -> Any: ...


@dataclass(frozen=True)
class MoveResult:
    moved: bool
    reason: str | None = None

    @property
    def failed(self) -> bool:
        return self.reason == "store_error"


def move_item(
    store: RecordWriter,
    model: Any,
    records: Sequence[OrderedRecord],
    target_id: Any,
    direction: Direction | str,
    notifier: Notifier,
    *,
    label: str = "os itens",
) -> MoveResult:
    """Swap the target's display_order with its neighbour in ``records``.

    ``records`` must already be sorted ascending by display_order. Unknown ids
    and moves past either end are silent no-ops. Store failures are reported
    once through ``notifier`` and never raised.
    """
    direction = Direction(direction)
    current_index = next((index for index, record in enumerate(records) if record.id == target_id), None)
    if current_index is None:
        logger.debug("[SEQUENCER] id=%s not in list; nothing to move.", target_id)
        return MoveResult(moved=False, reason="not_found")

    if (direction is Direction.UP and current_index == 0) or (
        direction is Direction.DOWN and current_index == len(records) - 1
    ):
        return MoveResult(moved=False, reason="boundary")

    adjacent_index = current_index - 1 if direction is Direction.UP else current_index + 1
    target = records[current_index]
    adjacent = records[adjacent_index]

    new_order_for_target = adjacent.display_order or 0
    new_order_for_adjacent = target.display_order or 0

    try:
        store.update(model, target.id, {"display_order": new_order_for_target})
        store.update(model, adjacent.id, {"display_order": new_order_for_adjacent})
    except StoreWriteError:
        logger.exception(
            "[SEQUENCER] Failed to swap display_order of id=%s and id=%s; no rollback attempted.",
            target.id,
            adjacent.id,
        )
        notifier.error("Erro", f"Não foi possível reordenar {label}.")
        return MoveResult(moved=False, reason="store_error")

    logger.info(
        "[SEQUENCER] Moved id=%s %s: display_order %s -> %s (swapped with id=%s).",
        target.id,
        direction.value,
        new_order_for_adjacent,
        new_order_for_target,
        adjacent.id,
    )
    return MoveResult(moved=True)
