"""Account service API client.

A thin wrapper around the Account Service HTTP API built on the
``requests`` library.  It exposes:

* :meth:`AccountServiceAPI.get_account` – call the ``get_account``
  operation for an account number.
* :meth:`AccountServiceAPI.health` – check that the service is up.

Every method returns a tuple ``(data, error)``.  ``error`` is ``None``
when the call succeeded at the transport level *and* the envelope's
``returnCode`` is in the 2xx range; otherwise it is a dictionary with
``status_code`` and ``message`` keys.  Transport failures have
``status_code`` set to the HTTP status (or ``None`` when no response
was received); business failures carry the envelope's ``returnCode``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "/api/v1"


class AccountServiceAPI:
    """Client for the Account Service API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = DEFAULT_PREFIX,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            prefix: Path prefix of the versioned API.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + "/" + prefix.strip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request and decode the JSON body."""
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
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

    def get_account(self, account_number: str) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Fetch an account envelope.

        Args:
            account_number: Business key of the account.
        Returns:
            A tuple ``(envelope, error)``.  On a business failure the
            envelope is still returned alongside the error.
        """
        data, error = self._request(
            "POST", "/accounts/get-account", json_body={"accountNumber": account_number}
        )
        if error:
            return None, error
        if not isinstance(data, dict):
            return None, {"status_code": None, "message": "Unexpected response body"}
        return_code = data.get("returnCode")
        if return_code is not None and not 200 <= return_code < 300:
            logger.warning("get_account(%s) returned %s: %s", account_number, return_code, data.get("message"))
            return data, {"status_code": return_code, "message": data.get("message") or ""}
        return data, None

    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Return the service health document."""
        return self._request("GET", "/health")
