from __future__ import annotations

import logging

from channels.generic.http import AsyncHttpConsumer

from . import constants
from .request import HTTPRequest
from .urlcodec import QueryDecodeError

logger = logging.getLogger(__name__)

TEXT_PLAIN = [(b"Content-Type", b"text/plain; charset=utf-8")]


class QueryParamsHttpConsumer(AsyncHttpConsumer):
    """
    HTTP consumer that parses the query string before handing over.

    * Builds an HTTPRequest from the scope for every request.
    * A malformed query string never reaches the handler: the client gets
      QPARAMS_BAD_REQUEST_STATUS (400 by default) with a plain-text reason.

    Subclass it and define:
        async def handle_request(self, request, body): ...

    Mount it in routing like:
        path("search/", MySearchConsumer.as_asgi())

    """

    # Set to False to keep names and values percent-encoded
    decode_parameters: bool = True

    async def handle(self, body: bytes):
        try:
            request = HTTPRequest.from_scope(
                self.scope, decode=self.decode_parameters
            )
        except QueryDecodeError as e:
            logger.warning(
                "rejecting request with malformed query string",
                extra={
                    "path": self.scope.get("path"),
                    "parameter_name": e.name,
                    "parameter_value": e.value,
                    "position": e.position,
                },
            )
            await self.send_text(
                constants.BAD_REQUEST_STATUS, f"Bad query string: {e}"
            )
            return

        await self.handle_request(request, body)

    async def handle_request(self, request: HTTPRequest, body: bytes):
        raise NotImplementedError(
            f"{type(self).__name__} must implement handle_request()"
        )

    async def send_text(self, status: int, text: str):
        await self.send_response(
            status, text.encode("utf-8"), headers=TEXT_PLAIN
        )
