"""Application keys for type-safe app configuration access."""

from aiohttp import web

from flatwiki.core.store import PageStore
from flatwiki.core.templates import TemplateRenderer
from flatwiki.core.titles import TitleValidator

validator_key = web.AppKey("validator", TitleValidator)
store_key = web.AppKey("store", PageStore)
renderer_key = web.AppKey("renderer", TemplateRenderer)
