# utils.py
from __future__ import annotations

from typing import Any
from urllib.parse import quote

from .urlcodec import QueryDecodeError


def get_raw_path(scope: dict[str, Any]) -> str:
    """
    Percent-encoded request path from an ASGI scope.

    Servers that send "raw_path" give it as received; otherwise the decoded
    "path" is quoted again, so unquoting it always gives "path" back.
    """
    raw_path = scope.get("raw_path")
    if raw_path:
        return raw_path.decode("latin-1")
    return quote(scope.get("path") or "/", safe="/")


def get_raw_query(scope: dict[str, Any]) -> str:
    """
    Extract the raw (still percent-encoded) query string from an ASGI scope.

    ASGI hands it over as bytes that should be pure ASCII; anything else is
    treated like a malformed escape.
    """
    raw = scope.get("query_string") or b""
    try:
        return raw.decode("ascii")
    except UnicodeDecodeError as e:
        raise QueryDecodeError(
            f"Query string is not ASCII (byte {raw[e.start]:#04x} at "
            f"position {e.start})",
            token=raw.decode("latin-1"),
            position=e.start,
        ) from e
