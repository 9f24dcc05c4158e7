"""Shared plumbing for the LinkedIn REST service calls."""

from __future__ import annotations

import json
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Iterator, Mapping, Protocol
from urllib.parse import quote, quote_plus

from lcli.model import APIError


@dataclass
class Response:
    """An HTTP response from the LinkedIn API."""

    status_code: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Whether the status code is in the 2xx range."""
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        """The body decoded as UTF-8."""
        return self.body.decode("utf-8", errors="replace")

    def header(self, name: str) -> str:
        """Look up a header case-insensitively; empty when absent."""
        wanted = name.lower()
        return next((value for key, value in self.headers.items() if key.lower() == wanted), "")


class Doer(Protocol):
    """Executes requests against the LinkedIn API."""

    def do(self, method: str, path: str, body: Any = None) -> Response:
        """Send a request with an optional JSON body and return the response."""


def decode_json(resp: Response) -> Any:
    """Decode the response body as JSON, raising ValueError on bad input."""
    try:
        return json.loads(resp.body)
    except ValueError as exc:
        raise ValueError(f"decode json: {exc}") from exc


def _fits(payload: Mapping[str, Any]) -> bool:
    status = payload.get("status")
    if status is not None and (isinstance(status, bool) or not isinstance(status, int)):
        return False
    return all(
        payload.get(key) is None or isinstance(payload.get(key), str)
        for key in ("message", "serviceErrorCode", "traceId")
    )


def check_error(resp: Response) -> None:
    """Raise the matching APIError when the response is not a 2xx success."""
    if resp.ok:
        return
    status = resp.status_code
    try:
        payload = json.loads(resp.body)
    except ValueError:
        raise APIError(status, resp.text) from None
    if payload is None:
        raise APIError(status)
    if not isinstance(payload, dict) or not _fits(payload):
        raise APIError(status, resp.text)
    raise APIError(
        payload["status"] if payload.get("status") is not None else status,
        payload.get("message") or "",
        payload.get("serviceErrorCode") or "",
        payload.get("traceId") or "",
    )


@contextmanager
def _error_context(prefix: str) -> Iterator[None]:
    """Prefix ValueErrors raised inside the block with a description of the call."""
    try:
        yield
    except ValueError as exc:
        raise ValueError(f"{prefix}: {exc}") from exc


def _path_escape(text: str) -> str:
    return quote(text, safe="$&+:=@")


def _query_escape(text: str) -> str:
    return quote_plus(text, safe="")


def _object(value: Any) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError("decode json: expected a JSON object")
    return value


def _list(value: Any) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError("decode json: expected a JSON array")
    return value


def _str_of(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"decode json: {key} must be a string")
    return value


def _int_of(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ValueError(f"decode json: {key} must be a number")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValueError(f"decode json: {key} must be an integer")


def _from_millis(millis: int) -> datetime | None:
    if millis <= 0:
        return None
    seconds, rest = divmod(millis, 1000)
    return datetime.fromtimestamp(seconds, tz=timezone.utc) + timedelta(milliseconds=rest)