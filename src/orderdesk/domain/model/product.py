"""Product entity.

Products are owned by the remote catalog. The client only holds copies
and changes them through explicit update calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from orderdesk.domain.model.value_objects import Money

# Identifiers are assigned by the service and treated as opaque.
EntityId = Union[int, str]


def same_id(left: EntityId | None, right: EntityId | None) -> bool:
    """Compare opaque ids typed on the command line with ids from JSON."""
    if left is None or right is None:
        return False
    return str(left) == str(right)


@dataclass(frozen=True)
class Product:
    """A product in the catalog."""

    id: EntityId
    name: str
    unit_price: Money
