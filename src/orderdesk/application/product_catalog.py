"""Application service: Product Catalog manager.

A product list plus one form shared by "add" and "update".  Picking a
product for editing fills the form and switches it to update mode.
Every successful write is followed by a fresh fetch of the whole list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from orderdesk.application.outcome import Outcome
from orderdesk.domain.exceptions import DomainException, ValidationError
from orderdesk.domain.model.product import EntityId, Product, same_id
from orderdesk.domain.model.value_objects import Money
from orderdesk.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

LOAD_ERROR = "Error loading products"
SAVE_ERROR = "Error saving product"
DELETE_ERROR = "Error deleting product"
FORM_INVALID = "Name and unit price are required"


@dataclass
class ProductForm:
    editing_id: EntityId | None = None
    name: str = ""
    unit_price: str = ""

    @property
    def is_update(self) -> bool:
        return self.editing_id is not None


class ProductCatalogManager:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo
        self._products: list[Product] = []
        self.form = ProductForm()

    @property
    def products(self) -> list[Product]:
        return list(self._products)

    def load(self) -> Outcome:
        try:
            self._products = self._product_repo.list_all()
        except DomainException as exc:
            logger.warning("Loading products failed: %s", exc)
            return Outcome.load_failed(LOAD_ERROR)
        return Outcome.success(self.products)

    # --- Form -----------------------------------------------------------------

    def edit(self, product_id: EntityId) -> Outcome:
        product = self._find(product_id)
        if product is None:
            return Outcome.invalid(f"Product with ID '{product_id}' not found")
        self.form = ProductForm(
            editing_id=product.id,
            name=product.name,
            unit_price=str(product.unit_price.amount),
        )
        return Outcome.success(product)

    def reset_form(self) -> None:
        self.form = ProductForm()

    def save(self) -> Outcome:
        """Create or update from the form, then re-fetch the list."""
        name = self.form.name.strip()
        try:
            price = Money.of(self.form.unit_price)
        except ValidationError:
            return Outcome.invalid(FORM_INVALID)
        if not name or price.is_zero:
            return Outcome.invalid(FORM_INVALID)

        try:
            if self.form.is_update:
                self._product_repo.update(self.form.editing_id, name, price)
            else:
                self._product_repo.create(name, price)
        except DomainException as exc:
            logger.warning("Saving product %r failed: %s", name, exc)
            return Outcome.save_failed(SAVE_ERROR)

        updated = self.form.is_update
        self.reset_form()
        loaded = self.load()
        if not loaded.ok:
            return loaded
        return Outcome.success(
            self.products,
            message=f"Product '{name}' {'updated' if updated else 'added'}",
        )

    def delete(self, product_id: EntityId) -> Outcome:
        product = self._find(product_id)
        target = product.id if product is not None else product_id
        try:
            self._product_repo.delete(target)
        except DomainException as exc:
            logger.warning("Deleting product %s failed: %s", product_id, exc)
            return Outcome.save_failed(DELETE_ERROR)
        return self.load()

    # --- Internal helpers -----------------------------------------------------

    def _find(self, product_id: EntityId) -> Product | None:
        for product in self._products:
            if same_id(product.id, product_id):
                return product
        return None
