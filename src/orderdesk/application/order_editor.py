"""Application service: Order Editor workflow.

One editor instance serves one screen.  Its mode is fixed when it is
built: without an order id it creates a new order, with one it edits the
quantities of that order's lines.

Saving walks the line-item aggregate and pushes each line to the service
one request at a time:

* create mode: one "create order" call, then one "add line" call per
  line, in aggregate order.  The price is never sent.
* edit mode: one "update line" call per line, changed or not.

The first failing request ends the save.  Nothing already written is
rolled back, and saving again re-sends everything.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from orderdesk.application.dto import EditorSnapshotDTO, LineDTO
from orderdesk.application.outcome import Outcome, View
from orderdesk.domain.exceptions import DomainException, EntityNotFoundError, ValidationError
from orderdesk.domain.model.catalog import CatalogStore
from orderdesk.domain.model.line_items import (
    EditorMode,
    LineId,
    LineItemAggregate,
    OrderLine,
    PendingLineId,
    PersistedLineId,
    Totals,
)
from orderdesk.domain.model.order import Order
from orderdesk.domain.model.product import EntityId
from orderdesk.domain.repository.order_repository import OrderRepository
from orderdesk.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

LOAD_PRODUCTS_ERROR = "Error loading products"
LOAD_ORDER_ERROR = "Error loading order"
SAVE_ERROR = "Error saving changes"
ORDER_NUMBER_REQUIRED = "Order number is required"
NO_PRODUCTS = "Add at least one product"
SAVE_IN_PROGRESS = "Save already in progress"
ORDER_COMPLETED = "Completed orders cannot be edited"


class OrderEditor:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        order_id: EntityId | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._order_id = order_id
        self._mode = EditorMode.CREATE if order_id is None else EditorMode.EDIT

        self._order: Order | None = None
        self._order_number = ""
        self._catalog = CatalogStore()
        self._aggregate = LineItemAggregate(self._mode)
        self._saving = False

    # --- State ----------------------------------------------------------------

    @property
    def mode(self) -> EditorMode:
        return self._mode

    @property
    def is_edit(self) -> bool:
        return self._mode is EditorMode.EDIT

    @property
    def order_number(self) -> str:
        return self._order_number

    @property
    def catalog(self) -> CatalogStore:
        return self._catalog

    @property
    def lines(self) -> list[OrderLine]:
        return self._aggregate.lines

    @property
    def saving(self) -> bool:
        return self._saving

    @property
    def _locked(self) -> bool:
        # Completed orders are terminal.
        return self._order is not None and not self._order.can_edit

    @property
    def display_date(self) -> str:
        if self._order is not None and self._order.date:
            return self._order.date[:10]
        if self.is_edit:
            return ""
        return datetime.now(timezone.utc).strftime("%Y-%m-%d")

    def totals(self) -> Totals:
        return self._aggregate.totals()

    # --- Loading --------------------------------------------------------------

    def load(self) -> Outcome:
        """Fetch the catalog (create) or the order and its lines (edit)."""
        if self.is_edit:
            return self._load_order()
        return self._load_catalog()

    def _load_catalog(self) -> Outcome:
        try:
            products = self._product_repo.list_all()
        except DomainException as exc:
            logger.warning("Loading products failed: %s", exc)
            return Outcome.load_failed(LOAD_PRODUCTS_ERROR)
        self._catalog = CatalogStore(products)
        return Outcome.success(self._catalog)

    def _load_order(self) -> Outcome:
        # The order number is kept even when the lines fail to load.
        try:
            order = self._order_repo.get_by_id(self._order_id)
            self._order = order
            self._order_number = order.order_number
            lines = self._order_repo.list_lines(self._order_id)
            self._aggregate = LineItemAggregate(EditorMode.EDIT, lines)
        except DomainException as exc:
            logger.warning("Loading order %s failed: %s", self._order_id, exc)
            return Outcome.load_failed(LOAD_ORDER_ERROR)
        return Outcome.success(self._order)

    # --- Mutations ------------------------------------------------------------

    def set_order_number(self, value: str) -> Outcome:
        if self.is_edit:
            return Outcome.invalid("Order number cannot be changed")
        self._order_number = value
        return Outcome.success(value)

    def add_line(self, product_id: EntityId | None, quantity: int) -> Outcome:
        try:
            lines = self._aggregate.add_line(self._catalog, product_id, quantity)
        except ValidationError as exc:
            return Outcome.invalid(str(exc))
        return Outcome.success(lines)

    def set_quantity(self, line_id: LineId | EntityId, quantity: int) -> Outcome:
        if self._locked:
            return Outcome.invalid(ORDER_COMPLETED)
        try:
            line = self._aggregate.set_quantity(self._resolve_line_id(line_id), quantity)
        except (ValidationError, EntityNotFoundError) as exc:
            return Outcome.invalid(str(exc))
        return Outcome.success(line)

    # --- Save -----------------------------------------------------------------

    def save(self) -> Outcome:
        if self._locked:
            return Outcome.invalid(ORDER_COMPLETED)
        if not self._order_number.strip():
            return Outcome.invalid(ORDER_NUMBER_REQUIRED)
        if not self.is_edit and not self._aggregate:
            return Outcome.invalid(NO_PRODUCTS)
        if self._saving:
            return Outcome.invalid(SAVE_IN_PROGRESS)

        self._saving = True
        try:
            order_id = self._save_lines()
        except DomainException as exc:
            logger.warning("Saving order %r failed: %s", self._order_number, exc)
            return Outcome.save_failed(SAVE_ERROR)
        finally:
            self._saving = False

        logger.info(
            "Saved order %r (%s, %d lines)",
            self._order_number, self._mode.value, len(self._aggregate),
        )
        return Outcome.success(order_id, next_view=View.ORDER_LIST)

    def _save_lines(self) -> EntityId:
        if self.is_edit:
            order_id = self._order_id
        else:
            order_id = self._order_repo.create(self._order_number.strip()).id

        for line in self._aggregate.lines:
            self._push_line(order_id, line)
        return order_id

    def _push_line(self, order_id: EntityId, line: OrderLine) -> None:
        if line.is_persisted:
            self._order_repo.update_line(order_id, line.line_id, line.quantity.value)
        else:
            self._order_repo.add_line(order_id, line.product_id, line.quantity.value)

    # --- Presentation ---------------------------------------------------------

    def snapshot(self) -> EditorSnapshotDTO:
        totals = self.totals()
        return EditorSnapshotDTO(
            title="Edit Order" if self.is_edit else "Add Order",
            order_number=self._order_number,
            order_number_editable=not self.is_edit,
            date=self.display_date,
            product_count=totals.product_count,
            final_price=str(totals.final_price),
            lines=[
                LineDTO(
                    line_id=str(line.line_id),
                    product_name=line.product_name,
                    unit_price=str(line.unit_price),
                    quantity=line.quantity.value,
                    line_total=str(line.line_total),
                )
                for line in self._aggregate.lines
            ],
            can_add_lines=not self.is_edit,
            can_edit_quantities=self.is_edit and not self._locked,
            saving=self._saving,
        )

    # --- Internal helpers -----------------------------------------------------

    def _resolve_line_id(self, line_id: LineId | EntityId) -> LineId:
        """Accept a tagged id or the plain id shown to the user."""
        if isinstance(line_id, (PendingLineId, PersistedLineId)):
            return line_id
        for line in self._aggregate.lines:
            if str(line.line_id) == str(line_id):
                return line.line_id
        raise EntityNotFoundError(f"Line '{line_id}' not found in this order")
