from __future__ import annotations

from collections.abc import Mapping
import logging
from types import MappingProxyType

from . import constants
from .urlcodec import QueryDecodeError
from .urlcodec import decode as _decode

logger = logging.getLogger(__name__)

ParameterStore = Mapping[str, tuple[str, ...]]

EMPTY_STORE: ParameterStore = MappingProxyType({})


def split_pair(token: str) -> tuple[str, str]:
    """
    Split one "&"-separated token into its raw (name, value).

    Only the first "=" separates; the value may contain more of them.
    A bare name and "name=" both give an empty value.
    """
    name, _, value = token.partition(constants.NAME_VALUE_SEPARATOR)
    return name, value


def parse_query_string(
    query: str | None,
    *,
    decode: bool = True,
    plus_as_space: bool | None = None,
    charset: str | None = None,
) -> ParameterStore:
    """
    Parse a raw (still percent-encoded) query string into a read-only
    mapping of name -> tuple of values, in order of appearance.

    Empty segments ("a=1&&b=2", a leading or trailing "&") are skipped and
    never produce an entry.

    With decode=False names and values are stored exactly as they appear.

    Raises QueryDecodeError if any name or value is malformed; nothing is
    returned in that case, not even the pairs parsed before the bad one.

    """
    if not query:
        return EMPTY_STORE

    collected: dict[str, list[str]] = {}

    for token in query.split(constants.PAIR_SEPARATOR):
        if not token:
            continue

        raw_name, raw_value = split_pair(token)
        name, value = raw_name, raw_value

        if decode:
            try:
                name = _decode(
                    raw_name, plus_as_space=plus_as_space, charset=charset
                )
                value = _decode(
                    raw_value, plus_as_space=plus_as_space, charset=charset
                )
            except QueryDecodeError as e:
                raise QueryDecodeError(
                    f"Failed to decode request parameter {raw_name!r} "
                    f"with value {raw_value!r}: {e}",
                    token=e.token,
                    position=e.position,
                    name=raw_name,
                    value=raw_value,
                ) from e

        if name in collected:
            collected[name].append(value)
        else:
            collected[name] = [value]

    logger.debug(
        "query string parsed",
        extra={
            "parameter_names": len(collected),
            "decoded": decode,
        },
    )

    return MappingProxyType(
        {name: tuple(values) for name, values in collected.items()}
    )
