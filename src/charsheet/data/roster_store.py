"""Remote key/value store holding a user's whole roster document."""
from __future__ import annotations

import json
import logging
from http.client import HTTPException
from typing import Any, Callable, Mapping, Protocol
from urllib import error, request

from charsheet.data.errors import DataTransportError
from charsheet.data.json_loader import parse_json

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class RosterStore(Protocol):
    """Anything that can fetch and replace a roster document."""

    def retrieve(self) -> object:
        ...

    def store(self, payload: Mapping[str, Any]) -> object:
        ...


class HttpRosterStore:
    """Stores the roster as JSON at ``{base_url}/{user_id}/character``."""

    def __init__(
        self,
        base_url: str,
        user_id: str,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        opener: Callable[..., Any] | None = None,
    ) -> None:
        if not base_url:
            raise ValueError("A base URL is required.")
        if not user_id:
            raise ValueError("A user id is required.")
        self._url = f"{base_url.rstrip('/')}/{user_id}/character"
        self._timeout = timeout
        self._opener = opener or request.urlopen

    @property
    def url(self) -> str:
        return self._url

    def retrieve(self) -> object:
        """GET the stored document and return it decoded."""
        text = self._send("GET", headers={"Accept": "application/json"})
        return parse_json(text, source=self._url)

    def store(self, payload: Mapping[str, Any]) -> object:
        """POST the full roster document; the response body is not validated."""
        body = json.dumps(payload).encode("utf-8")
        text = self._send("POST", data=body, headers={"Content-Type": "application/json"})
        try:
            return json.loads(text) if text else None
        except json.JSONDecodeError:
            logger.info(f"Ignoring non-JSON store response from {self._url}")
            return None

    def _send(self, method: str, *, headers: Mapping[str, str], data: bytes | None = None) -> str:
        try:
            req = request.Request(self._url, data=data, method=method, headers=dict(headers))
            with self._opener(req, timeout=self._timeout) as response:
                raw = response.read()
        except error.HTTPError as exc:
            raise DataTransportError(f"{method} {self._url} failed with HTTP {exc.code}") from exc
        except (error.URLError, HTTPException, OSError, ValueError) as exc:
            raise DataTransportError(f"{method} {self._url} failed: {exc}") from exc
        return raw.decode("utf-8", errors="replace")
