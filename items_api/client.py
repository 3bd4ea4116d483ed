"""Items API client.

This module defines a simple client wrapper around the Items REST API
served by :mod:`items_api.app`.  It uses the ``requests`` library
internally and exposes one method per endpoint:

* :meth:`ItemsAPI.list_items` – return all items.
* :meth:`ItemsAPI.get_item` – fetch a single item by its identifier.
* :meth:`ItemsAPI.create_item` – add a new item.
* :meth:`ItemsAPI.update_item` – change some fields of an item.
* :meth:`ItemsAPI.delete_item` – remove an item.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with keys ``status_code`` and ``message``.  The client never raises
for HTTP or transport errors.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ITEMS_PATH = "/api/v1/items"


class ItemsAPI:
    """Client for interacting with the Items API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/v1/items/``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _item_path(item_id: str) -> str:
        return f"{ITEMS_PATH}/{item_id}"

    # ------------------------------------------------------------------
    # Item operations
    # ------------------------------------------------------------------
    def list_items(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all items.

        Returns:
            A tuple ``(items, error)``. ``items`` is empty on failure.
        """
        data, error = self._request("GET", f"{ITEMS_PATH}/")
        if error:
            return [], error
        if isinstance(data, dict) and isinstance(data.get("items"), list):
            return data["items"], None
        return [], None

    def get_item(self, item_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve a single item by ID."""
        return self._request("GET", self._item_path(item_id))

    def create_item(
        self, name: str, quality: str, value: float
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create an item and return it with its server-assigned id."""
        payload = {"name": name, "quality": quality, "value": value}
        return self._request("POST", f"{ITEMS_PATH}/", json_body=payload)

    def update_item(
        self, item_id: str, **fields: Any
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Update some of ``name``, ``quality`` and ``value`` of an item.

        Fields passed as ``None`` are not sent.
        """
        payload = {key: value for key, value in fields.items() if value is not None}
        return self._request("PUT", self._item_path(item_id), json_body=payload)

    def delete_item(self, item_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Delete an item and return the removed record."""
        return self._request("DELETE", self._item_path(item_id))
