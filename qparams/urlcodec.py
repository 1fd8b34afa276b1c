from __future__ import annotations

import re
from urllib.parse import quote, quote_plus, unquote

from . import constants

# "%" that is not followed by two hex digits, including a trailing "%" or "%X"
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class QueryDecodeError(ValueError):
    """
    Raised when a query string token cannot be percent-decoded.

    `token` is the raw text that failed, `position` the index of the bad
    escape inside it (None when the escapes were well formed but the decoded
    bytes are not valid in the configured charset). When raised while parsing
    a whole query string, `name` and `value` hold the raw pair the token came
    from.
    """

    def __init__(
        self,
        message: str,
        *,
        token: str | None = None,
        position: int | None = None,
        name: str | None = None,
        value: str | None = None,
    ):
        super().__init__(message)
        self.token = token
        self.position = position
        self.name = name
        self.value = value


def decode(
    raw: str,
    *,
    plus_as_space: bool | None = None,
    charset: str | None = None,
) -> str:
    """
    Percent-decode a single query string token.

    * "%XX" is a byte, decoded together with its neighbours in `charset`.
    * "+" is a space unless `plus_as_space` is False.
    * Everything else is taken literally.

    Raises QueryDecodeError for a "%" without two hex digits after it, or for
    byte sequences that are not valid in `charset`.

    """
    if plus_as_space is None:
        plus_as_space = constants.PLUS_AS_SPACE
    if charset is None:
        charset = constants.CHARSET

    bad = _BAD_ESCAPE_RE.search(raw)
    if bad is not None:
        pos = bad.start()
        raise QueryDecodeError(
            f"Invalid percent-escape {raw[pos:pos + 3]!r} at position {pos}",
            token=raw,
            position=pos,
        )

    if plus_as_space:
        raw = raw.replace("+", " ")

    try:
        return unquote(raw, encoding=charset, errors="strict")
    except UnicodeDecodeError as e:
        raise QueryDecodeError(
            f"Percent-encoded bytes are not valid {charset}: {e.reason}",
            token=raw,
        ) from e


def encode(
    text: str,
    *,
    plus_as_space: bool | None = None,
    charset: str | None = None,
) -> str:
    """
    Inverse of decode(): percent-encode everything outside the unreserved set.
    """
    if plus_as_space is None:
        plus_as_space = constants.PLUS_AS_SPACE
    if charset is None:
        charset = constants.CHARSET

    if plus_as_space:
        return quote_plus(text, safe="", encoding=charset)
    return quote(text, safe="", encoding=charset)


def encode_query(pairs, **kwargs) -> str:
    """
    Serialize an iterable of (name, value) pairs into a query string.

    Empty values are written as "name=", which parses back to the same
    (name, "") pair as a bare "name".
    """
    return constants.PAIR_SEPARATOR.join(
        encode(name, **kwargs)
        + constants.NAME_VALUE_SEPARATOR
        + encode(value, **kwargs)
        for name, value in pairs
    )
