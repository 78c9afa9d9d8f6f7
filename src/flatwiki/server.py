"""aiohttp server for Flatwiki.

Application factory, error middleware and route registration.
"""

import logging

from aiohttp import web

from flatwiki.api.pages import Handler, create_pages_routes
from flatwiki.app_keys import renderer_key, store_key, validator_key
from flatwiki.config import Config
from flatwiki.core.store import PageStore
from flatwiki.core.templates import TemplateRenderer
from flatwiki.core.titles import TitleValidator
from flatwiki.errors import WikiError, error_status

logger = logging.getLogger(__name__)


@web.middleware
async def error_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    """Translate flatwiki errors into plain-text HTTP responses."""
    try:
        return await handler(request)
    except WikiError as e:
        status = error_status(e)
        if status >= 500:
            logger.error(f"{request.method} {request.path}: {e}")
        else:
            logger.debug(f"{request.method} {request.path}: {e}")
        return web.Response(status=status, text=str(e))


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Validator, store and renderer are built once here and shared by all
    requests.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application

    Raises:
        PageStoreError: If the page directory cannot be created
    """
    app = web.Application(middlewares=[error_middleware])

    validator = TitleValidator(config.routes.actions)
    store = PageStore(config.pages.pages_dir, validator=validator)
    store.ensure_dir()
    renderer = TemplateRenderer(config.templates.templates_dir, actions=validator.actions)

    app[validator_key] = validator
    app[store_key] = store
    app[renderer_key] = renderer

    app.router.add_routes(create_pages_routes(validator.actions))

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    try:
        web.run_app(app, host=config.server.host, port=config.server.port, print=None)
    except OSError:
        logger.critical(f"Cannot serve on {config.server.host}:{config.server.port}", exc_info=True)
        raise
