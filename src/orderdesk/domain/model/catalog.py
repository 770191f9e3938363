"""Catalog Store — the products an order line can be built from.

Fetched once when the order editor opens in create mode and read-only
afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable

from orderdesk.domain.model.product import EntityId, Product, same_id


class CatalogStore:

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: tuple[Product, ...] = tuple(products)

    def find(self, product_id: EntityId | None) -> Product | None:
        """Return the product with *product_id*, or None."""
        for product in self._products:
            if same_id(product.id, product_id):
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._products)

    def __len__(self) -> int:
        return len(self._products)
