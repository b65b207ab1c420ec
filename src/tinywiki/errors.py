"""Error kinds and the response layer that reports them.

Every failure is terminal for its request. Handlers either deal with an
error themselves (a missing page on view or edit) or let it escape, in which
case `error_middleware` turns it into a plain-text response.
"""

import logging
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import ClassVar

from aiohttp import web

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """Closed set of failure kinds."""

    NOT_FOUND = "not_found"
    IO_ERROR = "io_error"
    RENDER_ERROR = "render_error"

    @property
    def status(self) -> int:
        """HTTP status reported for this kind."""
        return _STATUS_BY_KIND[self]


_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.IO_ERROR: 500,
    ErrorKind.RENDER_ERROR: 500,
}


class WikiError(Exception):
    """Base class for wiki failures."""

    kind: ClassVar[ErrorKind]


class PageNotFoundError(WikiError):
    """Page could not be read from storage."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, title: str) -> None:
        super().__init__(f"Page not found: {title}")
        self.title = title


class PageWriteError(WikiError):
    """Page could not be written to storage."""

    kind = ErrorKind.IO_ERROR


class RenderError(WikiError):
    """Template could not be rendered."""

    kind = ErrorKind.RENDER_ERROR


def error_response(error: WikiError) -> web.Response:
    """Build the response reported to the client for an error.

    Server-side failures expose the underlying message. Not-found responses
    use a fixed body.
    """
    status = error.kind.status
    if error.kind is ErrorKind.NOT_FOUND:
        text = "404 page not found\n"
    else:
        text = f"{error}\n"
    return web.Response(status=status, text=text, content_type="text/plain")


Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


@web.middleware
async def error_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    try:
        return await handler(request)
    except WikiError as e:
        if e.kind.status >= 500:
            logger.error(f"{request.method} {request.path}: {e}")
        return error_response(e)
