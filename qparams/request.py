from __future__ import annotations

import re
from typing import Any
from urllib.parse import unquote, urlsplit

from . import constants
from .parser import ParameterStore, parse_query_string
from .urlcodec import encode_query
from .utils import get_raw_path, get_raw_query

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_int(value: str) -> int | None:
    # Plain base-10 only: int() alone would also take " 7", "1_000" or
    # non-ASCII digits.
    if _INT_RE.fullmatch(value) is None:
        return None
    return int(value)


def _parse_bool(value: str) -> bool | None:
    lowered = value.lower()
    if lowered in constants.TRUE_VALUES:
        return True
    if lowered in constants.FALSE_VALUES:
        return False
    return None


class HTTPRequest:
    """
    Request path plus the parameters parsed from its query string.

    The query string is parsed once, in the constructor; afterwards the
    object is read-only. A malformed percent-escape anywhere in the query
    string makes construction fail with QueryDecodeError.

    Constructors:
        HTTPRequest("/test/test.html", "a=some+text&b=abc%40def.de")
        HTTPRequest.from_uri("http://host/test/test.html?a=1")
        HTTPRequest.from_scope(scope)    # ASGI http scope

    A parameter is "set" if its name appeared in the query string at all,
    with or without a value:

        req = HTTPRequest("/", "a=1&b=&c&a=2")
        req.get_multiple_param("a")   # ("1", "2")
        req.is_parameter_set("c")     # True
        req.get_param("c")            # ""
        req.get_param("d", "x")       # "x"

    """

    __slots__ = (
        "_path",
        "_query_string",
        "_params",
        "_decode",
        "_plus_as_space",
        "_charset",
    )

    def __init__(
        self,
        path: str = "",
        query_string: str | None = None,
        *,
        decode: bool = True,
        plus_as_space: bool | None = None,
        charset: str | None = None,
    ):
        if plus_as_space is None:
            plus_as_space = constants.PLUS_AS_SPACE
        if charset is None:
            charset = constants.CHARSET

        # Kept so to_query_string() encodes the way the query was decoded
        self._decode = decode
        self._plus_as_space = plus_as_space
        self._charset = charset

        self._path = unquote(path)
        self._query_string = query_string or ""
        self._params: ParameterStore = parse_query_string(
            self._query_string,
            decode=decode,
            plus_as_space=plus_as_space,
            charset=charset,
        )

    @classmethod
    def from_uri(cls, uri: str, **kwargs: Any) -> HTTPRequest:
        """
        Build a request from a full or relative URI.
        """
        parts = urlsplit(uri)
        return cls(parts.path, parts.query, **kwargs)

    @classmethod
    def from_scope(cls, scope: dict[str, Any], **kwargs: Any) -> HTTPRequest:
        """
        Build a request from an ASGI http scope.
        """
        return cls(get_raw_path(scope), get_raw_query(scope), **kwargs)

    # ------------------------------------------------------------------ #
    # Request data
    # ------------------------------------------------------------------ #

    @property
    def path(self) -> str:
        """Request path, percent-decoded."""
        return self._path

    def get_path(self) -> str:
        return self._path

    @property
    def query_string(self) -> str:
        """The query string exactly as received (not decoded)."""
        return self._query_string

    @property
    def parameters(self) -> ParameterStore:
        """Read-only name -> values mapping."""
        return self._params

    def has_parameters(self) -> bool:
        return bool(self._params)

    def is_parameter_set(self, name: str) -> bool:
        """True if `name` was in the query string, with or without value."""
        return name in self._params

    def names(self) -> list[str]:
        return list(self._params)

    def items(self) -> list[tuple[str, str]]:
        """All (name, value) pairs, flattened."""
        return [(k, v) for k, vals in self._params.items() for v in vals]

    def to_query_string(self, **kwargs: Any) -> str:
        """
        Serialize the parameters back into a query string that parses to
        the same parameters with the options this request was built with.

        Undecoded requests give back their raw pairs; otherwise names and
        values are encoded with this request's plus_as_space and charset,
        unless overridden through kwargs.
        """
        if not self._decode:
            return constants.PAIR_SEPARATOR.join(
                name + constants.NAME_VALUE_SEPARATOR + value
                for name, value in self.items()
            )

        kwargs.setdefault("plus_as_space", self._plus_as_space)
        kwargs.setdefault("charset", self._charset)
        return encode_query(self.items(), **kwargs)

    # ------------------------------------------------------------------ #
    # Single value accessors (first value wins)
    # ------------------------------------------------------------------ #

    def get_param(self, name: str, default: str = "") -> str:
        """
        First value of `name`, or `default` if it was not set.

        Never returns None unless None is passed as the default.
        """
        values = self._params.get(name)
        if not values:
            return default
        return values[0]

    def get_int_param(self, name: str, default: int = 0) -> int:
        """
        First value of `name` as an int. Returns `default` if the parameter
        is missing, empty or not a base-10 integer.
        """
        if not self.is_parameter_set(name):
            return default
        parsed = _parse_int(self.get_param(name))
        return default if parsed is None else parsed

    def get_bool_param(self, name: str, default: bool = False) -> bool:
        if not self.is_parameter_set(name):
            return default
        parsed = _parse_bool(self.get_param(name))
        return default if parsed is None else parsed

    # ------------------------------------------------------------------ #
    # Multi value accessors
    # ------------------------------------------------------------------ #

    def get_multiple_param(self, name: str) -> tuple[str, ...]:
        """All values of `name` in order of appearance; () if not set."""
        return self._params.get(name, ())

    def get_multiple_int_param(self, name: str) -> list[int]:
        """
        All values of `name` that parse as ints, in order. Values that do
        not parse are left out.
        """
        parsed = (_parse_int(v) for v in self.get_multiple_param(name))
        return [v for v in parsed if v is not None]

    def get_multiple_bool_param(self, name: str) -> list[bool]:
        parsed = (_parse_bool(v) for v in self.get_multiple_param(name))
        return [v for v in parsed if v is not None]

    # ------------------------------------------------------------------ #
    # Dunder helpers
    # ------------------------------------------------------------------ #

    def __contains__(self, name: object) -> bool:
        return name in self._params

    def __bool__(self) -> bool:
        return bool(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HTTPRequest):
            return self._path == other._path and dict(self._params) == dict(
                other._params
            )
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        params = dict(self._params)
        return f"HTTPRequest(path={self._path!r}, params={params!r})"
