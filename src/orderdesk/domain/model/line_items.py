"""Line-Item Aggregate — the lines of the order being edited.

The aggregate holds lines in insertion order.  In create mode lines are
added from the catalog and carry a client-generated id until the order is
saved; in edit mode lines come from the service and only their quantity
may change.  The unit price on a line is a snapshot and never changes.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Union

from orderdesk.domain.exceptions import EntityNotFoundError, ValidationError
from orderdesk.domain.model.catalog import CatalogStore
from orderdesk.domain.model.product import EntityId
from orderdesk.domain.model.value_objects import Money, Quantity


class EditorMode(Enum):
    CREATE = "create"
    EDIT = "edit"


@dataclass(frozen=True)
class PendingLineId:
    """A line that exists only on the client so far."""

    local_id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __str__(self) -> str:
        return str(self.local_id)


@dataclass(frozen=True)
class PersistedLineId:
    """A line the service has stored under *service_id*."""

    service_id: EntityId

    def __str__(self) -> str:
        return str(self.service_id)


LineId = Union[PendingLineId, PersistedLineId]


@dataclass(frozen=True)
class OrderLine:
    line_id: LineId
    product_id: EntityId
    product_name: str
    unit_price: Money  # snapshot taken when the line was added
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @property
    def is_persisted(self) -> bool:
        return isinstance(self.line_id, PersistedLineId)


@dataclass(frozen=True)
class Totals:
    product_count: int
    final_price: Money


def summarize(lines: Iterable[OrderLine]) -> Totals:
    """Product count is the sum of quantities, not the number of lines."""
    count = 0
    price = Money.zero()
    for line in lines:
        count += line.quantity.value
        price = price + line.line_total
    return Totals(product_count=count, final_price=price)


class LineItemAggregate:

    def __init__(self, mode: EditorMode, lines: Iterable[OrderLine] = ()) -> None:
        self._mode = mode
        self._lines: list[OrderLine] = []
        for line in lines:
            self._append(line)

    @property
    def mode(self) -> EditorMode:
        return self._mode

    @property
    def lines(self) -> list[OrderLine]:
        return list(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __bool__(self) -> bool:
        return bool(self._lines)

    # --- Mutations ------------------------------------------------------------

    def add_line(
        self,
        catalog: CatalogStore,
        product_id: EntityId | None,
        quantity: int,
    ) -> list[OrderLine]:
        """Append a line for a catalog product (create mode only).

        Name and price are copied from the catalog entry.  Nothing is
        changed when validation fails.
        """
        if self._mode is not EditorMode.CREATE:
            raise ValidationError("Products can only be added to a new order")

        product = catalog.find(product_id)
        if product is None or not _is_positive_int(quantity):
            raise ValidationError("Select product and quantity > 0")

        self._append(
            OrderLine(
                line_id=PendingLineId(),
                product_id=product.id,
                product_name=product.name,
                unit_price=product.unit_price,
                quantity=Quantity(quantity),
            )
        )
        return self.lines

    def set_quantity(self, line_id: LineId, quantity: int) -> OrderLine:
        """Replace a line's quantity in place (edit mode only)."""
        if self._mode is not EditorMode.EDIT:
            raise ValidationError("Quantities can only be changed on an existing order")

        index = self._index_of(line_id)
        updated = replace(self._lines[index], quantity=Quantity(quantity))
        self._lines[index] = updated
        return updated

    # --- Queries --------------------------------------------------------------

    def totals(self) -> Totals:
        return summarize(self._lines)

    def find(self, line_id: LineId) -> OrderLine | None:
        for line in self._lines:
            if line.line_id == line_id:
                return line
        return None

    # --- Internal helpers -----------------------------------------------------

    def _append(self, line: OrderLine) -> None:
        if self.find(line.line_id) is not None:
            raise ValidationError(f"Duplicate line id '{line.line_id}'")
        self._lines.append(line)

    def _index_of(self, line_id: LineId) -> int:
        for i, line in enumerate(self._lines):
            if line.line_id == line_id:
                return i
        raise EntityNotFoundError(f"Line '{line_id}' not found in this order")


def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
