"""HTTP implementation of OrderRepository."""

from __future__ import annotations

from typing import Any

from orderdesk.domain.exceptions import ServiceError, ValidationError
from orderdesk.domain.model.line_items import OrderLine, PersistedLineId
from orderdesk.domain.model.order import Order, OrderStatus
from orderdesk.domain.model.product import EntityId
from orderdesk.domain.model.value_objects import Money, Quantity
from orderdesk.domain.repository.order_repository import OrderRepository
from orderdesk.infrastructure.http.api_client import ApiClient, resource_path


class HttpOrderRepository(OrderRepository):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    # --- Orders ---------------------------------------------------------------

    def list_all(self) -> list[Order]:
        return [self._to_order(raw) for raw in _as_list(self._client.get("orders"))]

    def get_by_id(self, order_id: EntityId) -> Order:
        return self._to_order(self._client.get(resource_path("orders", order_id)))

    def create(self, order_number: str) -> Order:
        raw = self._client.post("orders", {"orderNumber": order_number})
        return self._to_order(raw)

    def delete(self, order_id: EntityId) -> None:
        self._client.delete(resource_path("orders", order_id))

    def update_status(self, order_id: EntityId, status: OrderStatus) -> Order | None:
        raw = self._client.patch(
            resource_path("orders", order_id, "status"), {"status": int(status)}
        )
        return self._to_order(raw) if raw else None

    # --- Lines ----------------------------------------------------------------

    def list_lines(self, order_id: EntityId) -> list[OrderLine]:
        raw = self._client.get(resource_path("orders", order_id, "items"))
        return [self._to_line(item) for item in _as_list(raw)]

    def add_line(
        self, order_id: EntityId, product_id: EntityId, quantity: int
    ) -> OrderLine | None:
        raw = self._client.post(
            resource_path("orders", order_id, "items"),
            {"productId": product_id, "quantity": quantity},
        )
        return self._to_line(raw) if raw else None

    def update_line(
        self, order_id: EntityId, line_id: PersistedLineId, quantity: int
    ) -> OrderLine | None:
        raw = self._client.put(
            resource_path("orders", order_id, "items", line_id.service_id),
            {"quantity": quantity},
        )
        return self._to_line(raw) if raw else None

    def delete_line(self, order_id: EntityId, line_id: PersistedLineId) -> None:
        self._client.delete(resource_path("orders", order_id, "items", line_id.service_id))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_order(raw: Any) -> Order:
        try:
            return Order(
                id=raw["id"],
                order_number=raw["orderNumber"],
                status=OrderStatus.parse(raw.get("status", OrderStatus.PENDING)),
                date=raw.get("date"),
            )
        except (KeyError, TypeError, AttributeError, ValidationError) as exc:
            raise ServiceError(f"Malformed order in response: {raw!r}") from exc

    @staticmethod
    def _to_line(raw: Any) -> OrderLine:
        try:
            return OrderLine(
                line_id=PersistedLineId(raw["id"]),
                product_id=raw["productId"],
                product_name=raw.get("productName") or "",
                unit_price=Money.of(raw["unitPrice"]),
                quantity=_whole_quantity(raw["quantity"]),
            )
        except (KeyError, TypeError, ValueError, AttributeError, ValidationError) as exc:
            raise ServiceError(f"Malformed order line in response: {raw!r}") from exc


def _as_list(raw: Any) -> list:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ServiceError(f"Expected a JSON array, got {type(raw).__name__}")
    return raw


def _whole_quantity(raw: Any) -> Quantity:
    # 3.0 is accepted, 2.9 is not truncated.
    if isinstance(raw, float) and raw.is_integer():
        raw = int(raw)
    return Quantity(raw)
