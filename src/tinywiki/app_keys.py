"""Application keys for type-safe app configuration access."""

from aiohttp import web

from tinywiki.core.store import PageStore
from tinywiki.core.templates import TemplateRegistry

store_key = web.AppKey("store", PageStore)
templates_key = web.AppKey("templates", TemplateRegistry)
