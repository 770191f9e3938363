"""Abstract repository for orders and their lines.

Defined in the domain layer so the workflows never depend on the
transport.  The concrete implementation talks to the remote order
service.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from orderdesk.domain.model.line_items import OrderLine, PersistedLineId
from orderdesk.domain.model.order import Order, OrderStatus
from orderdesk.domain.model.product import EntityId


class OrderRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order."""

    @abstractmethod
    def get_by_id(self, order_id: EntityId) -> Order:
        """Return one order header."""

    @abstractmethod
    def create(self, order_number: str) -> Order:
        """Create an empty order and return it with its service id."""

    @abstractmethod
    def delete(self, order_id: EntityId) -> None:
        """Delete an order together with its lines."""

    @abstractmethod
    def update_status(self, order_id: EntityId, status: OrderStatus) -> Order | None:
        """Change an order's status."""

    @abstractmethod
    def list_lines(self, order_id: EntityId) -> list[OrderLine]:
        """Return the persisted lines of an order."""

    @abstractmethod
    def add_line(
        self, order_id: EntityId, product_id: EntityId, quantity: int
    ) -> OrderLine | None:
        """Attach a line; the service resolves the price."""

    @abstractmethod
    def update_line(
        self, order_id: EntityId, line_id: PersistedLineId, quantity: int
    ) -> OrderLine | None:
        """Replace a persisted line's quantity."""

    @abstractmethod
    def delete_line(self, order_id: EntityId, line_id: PersistedLineId) -> None:
        """Remove a persisted line."""

    def lines_for_orders(
        self, order_ids: Iterable[EntityId]
    ) -> dict[EntityId, list[OrderLine]]:
        """Return the lines of several orders at once.

        The default asks for each order in turn; implementations with a
        cheaper way to fetch many orders override it.
        """
        return {order_id: self.list_lines(order_id) for order_id in order_ids}
