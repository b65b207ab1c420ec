"""Wiki page routes.

Maps `/(view|edit|save)/<title>` to handlers. The title pattern is the only
validation a title ever gets before it is used as a file name, so it must
stay restricted to ASCII word characters.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from aiohttp import web

from tinywiki.app_keys import store_key, templates_key
from tinywiki.core.page import Page
from tinywiki.errors import PageNotFoundError

logger = logging.getLogger(__name__)

TITLE_PATTERN = r"[A-Za-z0-9_]+"

PageHandler = Callable[[web.Request, str], Awaitable[web.StreamResponse]]
RequestHandler = Callable[[web.Request], Awaitable[web.StreamResponse]]


async def view_page(request: web.Request, title: str) -> web.StreamResponse:
    try:
        page = await asyncio.to_thread(request.app[store_key].load, title)
    except PageNotFoundError:
        logger.debug(f"No page {title!r}, redirecting to editor")
        raise web.HTTPFound(f"/edit/{title}") from None
    return render(request, "view", page)


async def edit_page(request: web.Request, title: str) -> web.StreamResponse:
    try:
        page = await asyncio.to_thread(request.app[store_key].load, title)
    except PageNotFoundError:
        page = Page(title=title)
    return render(request, "edit", page)


async def save_page(request: web.Request, title: str) -> web.StreamResponse:
    form = await request.post()
    field = form.get("body", "")
    if isinstance(field, web.FileField):
        body = field.file.read()
    else:
        body = field.encode("utf-8")

    page = Page(title=title, body=body)
    await asyncio.to_thread(request.app[store_key].save, page)
    logger.info(f"Saved page {title!r}")
    raise web.HTTPFound(f"/view/{title}")


def render(request: web.Request, name: str, page: Page) -> web.Response:
    """Render a page through the named template into an HTML response."""
    html = request.app[templates_key].render(name, page)
    return web.Response(text=html, content_type="text/html")


# Route name -> (HTTP method, handler)
ROUTES: dict[str, tuple[str, PageHandler]] = {
    "view": ("GET", view_page),
    "edit": ("GET", edit_page),
    "save": ("POST", save_page),
}


def _with_title(handler: PageHandler) -> RequestHandler:
    async def wrapper(request: web.Request) -> web.StreamResponse:
        return await handler(request, request.match_info["title"])

    return wrapper


def create_pages_routes() -> list[web.RouteDef]:
    return [
        web.route(method, f"/{name}/{{title:{TITLE_PATTERN}}}", _with_title(handler))
        for name, (method, handler) in ROUTES.items()
    ]
