"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from orderdesk.infrastructure.config import Settings
from orderdesk.infrastructure.http.api_client import ApiClient
from orderdesk.infrastructure.http.http_order_repository import HttpOrderRepository
from orderdesk.infrastructure.http.http_product_repository import (
    HttpProductRepository,
)

# One HTTP session per configuration, shared by both repositories.
_clients: dict[Settings, ApiClient] = {}


def api_client(settings: Settings) -> ApiClient:
    client = _clients.get(settings)
    if client is None:
        client = _clients[settings] = ApiClient(settings.api_url, timeout=settings.timeout)
    return client


def close_clients() -> None:
    """Close every session opened so far."""
    while _clients:
        _, client = _clients.popitem()
        client.close()


def order_repository(settings: Settings) -> HttpOrderRepository:
    return HttpOrderRepository(api_client(settings))


def product_repository(settings: Settings) -> HttpProductRepository:
    return HttpProductRepository(api_client(settings))
