"""Thin JSON-over-HTTP client for the order service.

Every transport problem, non-2xx status or unreadable body surfaces as
``ServiceError`` so callers above the infrastructure layer never see a
``requests`` exception.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests

from orderdesk.domain.exceptions import ServiceError

logger = logging.getLogger(__name__)


def resource_path(*parts: object) -> str:
    """Join path segments, escaping ids: resource_path("orders", 7, "items")."""
    return "/".join(quote(str(part), safe="") for part in parts)


class ApiClient:

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def get(self, path: str) -> Any:
        return self._request("GET", path)

    def post(self, path: str, payload: dict) -> Any:
        return self._request("POST", path, payload)

    def put(self, path: str, payload: dict) -> Any:
        return self._request("PUT", path, payload)

    def patch(self, path: str, payload: dict) -> Any:
        return self._request("PATCH", path, payload)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    def close(self) -> None:
        self._session.close()

    # --- Internal helpers -----------------------------------------------------

    def _request(self, method: str, path: str, payload: dict | None = None) -> Any:
        url = f"{self._base_url}/{path.lstrip('/')}"
        logger.debug("%s %s %s", method, url, payload if payload is not None else "")

        try:
            resp = self._session.request(method, url, json=payload, timeout=self._timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ServiceError(f"{method} /{path.lstrip('/')} failed: {exc}") from exc

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            logger.warning("%s %s returned a non-JSON body", method, url)
            raise ServiceError(f"{method} /{path.lstrip('/')} returned invalid JSON") from exc
