# __init__.py (root package)
import logging

from .constants import CHARSET, PLUS_AS_SPACE
from .consumer import QueryParamsHttpConsumer
from .parser import ParameterStore, parse_query_string
from .request import HTTPRequest
from .urlcodec import QueryDecodeError, decode, encode, encode_query

__version__ = "v0.1.0"

logger = logging.getLogger(__name__)
logger.info(
    "qparams root package imported",
    extra={
        "version": __version__,
        "charset": CHARSET,
        "plus_as_space": PLUS_AS_SPACE,
    },
)

__all__ = [
    "HTTPRequest",
    "ParameterStore",
    "QueryDecodeError",
    "QueryParamsHttpConsumer",
    "decode",
    "encode",
    "encode_query",
    "parse_query_string",
]
