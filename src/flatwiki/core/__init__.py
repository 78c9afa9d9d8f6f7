"""Core page model, title validation, storage and presentation."""

from flatwiki.core.store import PageStore
from flatwiki.core.templates import TemplateRenderer
from flatwiki.core.titles import TitleValidator
from flatwiki.core.types import Page, PageEntry

__all__ = [
    "Page",
    "PageEntry",
    "PageStore",
    "TemplateRenderer",
    "TitleValidator",
]
