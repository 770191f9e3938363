"""HTTP implementation of ProductRepository."""

from __future__ import annotations

from typing import Any

from orderdesk.domain.exceptions import ServiceError, ValidationError
from orderdesk.domain.model.product import EntityId, Product
from orderdesk.domain.model.value_objects import Money
from orderdesk.domain.repository.product_repository import ProductRepository
from orderdesk.infrastructure.http.api_client import ApiClient, resource_path


class HttpProductRepository(ProductRepository):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    def list_all(self) -> list[Product]:
        raw = self._client.get("products")
        if raw is None:
            return []
        if not isinstance(raw, list):
            raise ServiceError(f"Expected a JSON array, got {type(raw).__name__}")
        return [self._to_domain(item) for item in raw]

    def create(self, name: str, unit_price: Money) -> Product | None:
        raw = self._client.post("products", self._to_raw(name, unit_price))
        return self._to_domain(raw) if raw else None

    def update(self, product_id: EntityId, name: str, unit_price: Money) -> Product | None:
        raw = self._client.put(
            resource_path("products", product_id), self._to_raw(name, unit_price)
        )
        return self._to_domain(raw) if raw else None

    def delete(self, product_id: EntityId) -> None:
        self._client.delete(resource_path("products", product_id))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(name: str, unit_price: Money) -> dict:
        return {"name": name, "unitPrice": unit_price.to_json()}

    @staticmethod
    def _to_domain(raw: Any) -> Product:
        try:
            return Product(
                id=raw["id"],
                name=raw["name"],
                unit_price=Money.of(raw["unitPrice"]),
            )
        except (KeyError, TypeError, ValidationError) as exc:
            raise ServiceError(f"Malformed product in response: {raw!r}") from exc
