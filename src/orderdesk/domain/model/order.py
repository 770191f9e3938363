"""Order entity and its status lifecycle.

Orders are created and persisted by the remote service; the client only
decides which actions it offers for a given status.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from orderdesk.domain.exceptions import ValidationError
from orderdesk.domain.model.product import EntityId


class OrderStatus(IntEnum):
    """Wire values are the integers the service expects."""

    PENDING = 1
    IN_PROGRESS = 2
    COMPLETED = 3

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]

    @staticmethod
    def parse(raw: OrderStatus | int | str) -> OrderStatus:
        """Accept the wire number, its string form or a name/label."""
        if isinstance(raw, OrderStatus):
            return raw
        key = _normalize(str(raw))
        for status in OrderStatus:
            if key in (str(status.value), _normalize(status.name), _normalize(status.label)):
                return status
        raise ValidationError(f"Unknown order status: {raw!r}")


def _normalize(text: str) -> str:
    # "In Progress", "IN_PROGRESS" and "InProgress" are the same status.
    return text.strip().lower().replace("_", "").replace(" ", "").replace("-", "")


_STATUS_LABELS = {
    OrderStatus.PENDING: "Pending",
    OrderStatus.IN_PROGRESS: "In Progress",
    OrderStatus.COMPLETED: "Completed",
}


@dataclass
class Order:
    """An order header as the service reports it.

    Completed orders are terminal: the client offers no edit, status
    change or delete for them.
    """

    id: EntityId
    order_number: str
    status: OrderStatus = OrderStatus.PENDING
    date: str | None = None  # service-assigned, ISO 8601

    @property
    def is_completed(self) -> bool:
        return self.status == OrderStatus.COMPLETED

    @property
    def can_edit(self) -> bool:
        return not self.is_completed

    @property
    def can_delete(self) -> bool:
        return not self.is_completed

    @property
    def can_change_status(self) -> bool:
        return not self.is_completed
