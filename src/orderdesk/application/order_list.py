"""Application service: Order List view.

Loads every order with its per-order totals and offers the row actions
(status change, delete, edit).  Completed orders are terminal and every
action on them is refused locally.  Local rows change only after the
service has accepted the request.
"""

from __future__ import annotations

import logging

from orderdesk.application.dto import OrderRowDTO
from orderdesk.application.outcome import Outcome, View
from orderdesk.domain.exceptions import DomainException, ValidationError
from orderdesk.domain.model.line_items import Totals, summarize
from orderdesk.domain.model.order import Order, OrderStatus
from orderdesk.domain.model.product import EntityId, same_id
from orderdesk.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)

LOAD_ERROR = "Error loading orders"
STATUS_ERROR = "Error updating order status"
DELETE_ERROR = "Error deleting order"


class OrderListView:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo
        self._entries: list[tuple[Order, Totals]] = []

    @property
    def rows(self) -> list[OrderRowDTO]:
        return [self._to_row(order, totals) for order, totals in self._entries]

    def load(self) -> Outcome:
        try:
            orders = self._order_repo.list_all()
            lines = self._order_repo.lines_for_orders([o.id for o in orders])
        except DomainException as exc:
            logger.warning("Loading orders failed: %s", exc)
            return Outcome.load_failed(LOAD_ERROR)

        self._entries = [
            (order, summarize(lines.get(order.id, []))) for order in orders
        ]
        return Outcome.success(self.rows)

    def change_status(self, order_id: EntityId, status: OrderStatus | int | str) -> Outcome:
        order = self._find(order_id)
        if order is None:
            return Outcome.invalid(f"Order #{order_id} not found")
        if not order.can_change_status:
            return Outcome.invalid(f"Order #{order_id} is completed")
        try:
            new_status = OrderStatus.parse(status)
        except ValidationError as exc:
            return Outcome.invalid(str(exc))

        try:
            self._order_repo.update_status(order.id, new_status)
        except DomainException as exc:
            logger.warning("Updating status of order %s failed: %s", order_id, exc)
            return Outcome.save_failed(STATUS_ERROR)

        order.status = new_status
        return Outcome.success(new_status)

    def delete(self, order_id: EntityId) -> Outcome:
        order = self._find(order_id)
        if order is None:
            return Outcome.invalid(f"Order #{order_id} not found")
        if not order.can_delete:
            return Outcome.invalid(f"Order #{order_id} is completed")

        try:
            self._order_repo.delete(order.id)
        except DomainException as exc:
            logger.warning("Deleting order %s failed: %s", order_id, exc)
            return Outcome.save_failed(DELETE_ERROR)

        self._entries = [(o, t) for o, t in self._entries if o is not order]
        return Outcome.success(order.id)

    def edit_target(self, order_id: EntityId) -> Outcome:
        """Where the edit action of a row leads."""
        order = self._find(order_id)
        if order is None:
            return Outcome.invalid(f"Order #{order_id} not found")
        if not order.can_edit:
            return Outcome.invalid(f"Order #{order_id} is completed")
        return Outcome.success(order.id, next_view=View.ORDER_EDIT)

    # --- Internal helpers -----------------------------------------------------

    def _find(self, order_id: EntityId) -> Order | None:
        for order, _ in self._entries:
            if same_id(order.id, order_id):
                return order
        return None

    @staticmethod
    def _to_row(order: Order, totals: Totals) -> OrderRowDTO:
        return OrderRowDTO(
            id=order.id,
            order_number=order.order_number,
            date=(order.date or "")[:10],
            status=order.status,
            product_count=totals.product_count,
            final_price=str(totals.final_price),
            can_edit=order.can_edit,
            can_delete=order.can_delete,
            can_change_status=order.can_change_status,
        )
