"""Abstract repository for the product catalog."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderdesk.domain.model.product import EntityId, Product
from orderdesk.domain.model.value_objects import Money


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def create(self, name: str, unit_price: Money) -> Product | None:
        """Add a product; the service assigns its id."""

    @abstractmethod
    def update(self, product_id: EntityId, name: str, unit_price: Money) -> Product | None:
        """Replace a product's name and price."""

    @abstractmethod
    def delete(self, product_id: EntityId) -> None:
        """Remove a product from the catalog."""
