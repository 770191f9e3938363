"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry display-ready data from the workflows to the CLI without
exposing domain internals.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderdesk.domain.model.order import OrderStatus
from orderdesk.domain.model.product import EntityId


@dataclass(frozen=True)
class OrderRowDTO:
    """One row of the order list."""

    id: EntityId
    order_number: str
    date: str
    status: OrderStatus
    product_count: int
    final_price: str  # formatted, e.g. "$28.50"
    can_edit: bool
    can_delete: bool
    can_change_status: bool

    @property
    def status_label(self) -> str:
        return self.status.label


@dataclass(frozen=True)
class LineDTO:
    """A single line as shown in the order editor."""

    line_id: str
    product_name: str
    unit_price: str
    quantity: int
    line_total: str


@dataclass(frozen=True)
class EditorSnapshotDTO:
    """Everything the order editor shows at one moment."""

    title: str
    order_number: str
    order_number_editable: bool
    date: str
    product_count: int
    final_price: str
    lines: list[LineDTO]
    can_add_lines: bool
    can_edit_quantities: bool
    saving: bool
