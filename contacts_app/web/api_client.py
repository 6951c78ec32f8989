# contacts_app/web/api_client.py
"""
HTTP client the web front-end uses to talk to the contacts API.

Each public method maps to one API route. Any non-2xx response is raised
as :class:`ApiError` carrying the upstream status code and the ``message``
field of the API's JSON error body, so route handlers can let it propagate
to the error page.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """An API call failed; ``status_code`` mirrors the upstream response."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ContactsApiClient:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_body: Any = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("Sending %s request to %s", method, url)
        try:
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request to %s failed: %s", url, exc)
            raise ApiError(502, f"Contacts API is unreachable: {exc}") from exc

        if not response.ok:
            try:
                message = response.json().get("message") or response.reason
            except (ValueError, AttributeError):
                message = response.text or response.reason
            logger.warning("API %s %s returned %s: %s", method, path, response.status_code, message)
            raise ApiError(response.status_code, message)

        if not response.content:
            return None
        return response.json()

    # ------------------------------------------------------------------
    # Contacts
    # ------------------------------------------------------------------
    def list_contacts(self, sort: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {"sort": sort} if sort else None
        return self._request("GET", "/contacts", params=params)

    def search_contacts(self, q: str, sort: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {"q": q}
        if sort:
            params["sort"] = sort
        return self._request("GET", "/contacts/search", params=params)

    def get_contact(self, contact_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/contacts/{contact_id}")

    def create_contact(self, data: Dict[str, Any]) -> str:
        """Returns the new contact's id."""
        return self._request("POST", "/contacts", json_body=data)["_id"]

    def update_contact(self, contact_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/contacts/{contact_id}", json_body=data)["contact"]

    def delete_contact(self, contact_id: str) -> None:
        self._request("DELETE", f"/contacts/{contact_id}")

    def toggle_favorite(self, contact_id: str) -> bool:
        return self._request("PATCH", f"/contacts/{contact_id}/favorite")["favorite"]

    # ------------------------------------------------------------------
    # Notes
    # ------------------------------------------------------------------
    def add_note(self, contact_id: str, note: str) -> int:
        return self._request("POST", f"/contacts/{contact_id}/notes", json_body={"note": note})["index"]

    def get_note(self, contact_id: str, note_index: int) -> str:
        return self._request("GET", f"/contacts/{contact_id}/notes/{note_index}")["note"]
