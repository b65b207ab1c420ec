"""aiohttp server for Tinywiki.

Application factory and route registration.
"""

import logging

from aiohttp import web

from tinywiki.api.pages import create_pages_routes
from tinywiki.app_keys import store_key, templates_key
from tinywiki.config import Config
from tinywiki.core.store import PageStore
from tinywiki.core.templates import TemplateRegistry
from tinywiki.errors import error_middleware

logger = logging.getLogger(__name__)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Templates are parsed here, once, so a broken template fails startup
    rather than the first request.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application(
        middlewares=[error_middleware],
        client_max_size=config.server.max_body_size,
    )

    app[store_key] = PageStore(config.wiki.pages_dir)
    app[templates_key] = TemplateRegistry.load(config.wiki.templates_dir)

    app.router.add_routes(create_pages_routes())

    return app


def run_server(config: Config) -> None:
    """Run the server until interrupted.

    Args:
        config: Application configuration

    Raises:
        OSError: If the listener cannot be started
    """
    app = create_app(config)
    logger.info(f"Serving pages from {config.wiki.pages_dir}")
    web.run_app(
        app,
        host=config.server.host,
        port=config.server.port,
        print=None,
    )
