"""Core wiki functionality: pages, storage and templates."""

from tinywiki.core.page import Page
from tinywiki.core.store import PageStore
from tinywiki.core.templates import TemplateRegistry

__all__ = ["Page", "PageStore", "TemplateRegistry"]
