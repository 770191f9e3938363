"""Outcome — the result channel between workflows and whatever renders them.

Workflows never raise for failures the user should see.  They return an
Outcome naming what went wrong (or where to go next) and leave the
presentation to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class OutcomeKind(Enum):
    OK = "ok"
    INVALID = "invalid"          # local validation, no request was sent
    LOAD_FAILED = "load_failed"
    SAVE_FAILED = "save_failed"


class View(Enum):
    """Navigation targets."""

    ORDER_LIST = "order-list"
    ORDER_CREATE = "order-create"
    ORDER_EDIT = "order-edit"
    PRODUCTS = "products"


@dataclass(frozen=True)
class Outcome:
    kind: OutcomeKind
    message: str = ""
    value: Any = None
    next_view: View | None = None

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.OK

    @staticmethod
    def success(
        value: Any = None, *, message: str = "", next_view: View | None = None
    ) -> Outcome:
        return Outcome(OutcomeKind.OK, message, value, next_view)

    @staticmethod
    def invalid(message: str) -> Outcome:
        return Outcome(OutcomeKind.INVALID, message)

    @staticmethod
    def load_failed(message: str) -> Outcome:
        return Outcome(OutcomeKind.LOAD_FAILED, message)

    @staticmethod
    def save_failed(message: str) -> Outcome:
        return Outcome(OutcomeKind.SAVE_FAILED, message)
