"""Page routes.

Handlers for listing, creating, viewing, editing, updating and deleting
pages. Routes that carry a title in the path go through ``title_handler``,
which extracts it with the application's TitleValidator; an invalid path
never reaches the wrapped handler.
"""

import functools
from collections.abc import Awaitable, Callable, Sequence

from aiohttp import web

from flatwiki.app_keys import renderer_key, store_key, validator_key
from flatwiki.core.templates import RenderData
from flatwiki.core.types import Page
from flatwiki.errors import InvalidTitle, PageNotFound

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]
TitleHandler = Callable[[web.Request, str], Awaitable[web.StreamResponse]]


def create_pages_routes(actions: Sequence[str]) -> list[web.RouteDef]:
    """Build the route table for the enabled actions.

    Args:
        actions: Action prefixes accepted by the title validator

    Returns:
        Route definitions for aiohttp
    """
    routes = [
        web.get("/", list_pages),
    ]
    if "create" in actions:
        routes.append(web.get("/create", create_form))
        routes.append(web.post("/save", save_form))
    title_routes: dict[str, list[web.RouteDef]] = {
        "view": [
            web.get("/view/{title:.*}", view_page),
            web.post("/view/{title:.*}", view_page),
        ],
        "edit": [web.get("/edit/{title:.*}", edit_page)],
        "save": [web.post("/save/{title:.*}", update_page)],
        "update": [web.post("/update/{title:.*}", update_page)],
        "delete": [web.post("/delete/{title:.*}", delete_page)],
    }
    for action, defs in title_routes.items():
        if action in actions:
            routes.extend(defs)
    return routes


def title_handler(handler: TitleHandler) -> Handler:
    """Wrap a handler that takes the page title captured from the path."""

    @functools.wraps(handler)
    async def wrapper(request: web.Request) -> web.StreamResponse:
        validator = request.app[validator_key]
        title = validator.extract_title(request.path)
        return await handler(request, title)

    return wrapper


def render_html(request: web.Request, template_name: str, data: RenderData, **context: object) -> web.Response:
    renderer = request.app[renderer_key]
    html = renderer.render(template_name, data, **context)
    return web.Response(text=html, content_type="text/html")


async def list_pages(request: web.Request) -> web.Response:
    store = request.app[store_key]
    return render_html(request, "list", store.list())


async def create_form(request: web.Request) -> web.Response:
    return render_html(request, "create", None)


async def save_form(request: web.Request) -> web.Response:
    """Create or overwrite a page from the creation form.

    An invalid title re-renders the form with a message and writes nothing.
    """
    form = await request.post()
    title = str(form.get("title", ""))
    body = str(form.get("body", ""))

    validator = request.app[validator_key]
    try:
        validator.validate(title)
    except InvalidTitle:
        return render_html(
            request,
            "create",
            None,
            error=f"Invalid characters in title: {title}",
            title=title,
            body=body,
        )

    store = request.app[store_key]
    store.save(Page(title=title, body=body.encode("utf-8")))
    raise web.HTTPFound(f"/view/{title}")


@title_handler
async def view_page(request: web.Request, title: str) -> web.Response:
    store = request.app[store_key]
    try:
        page = store.load(title)
    except PageNotFound:
        raise web.HTTPFound(f"/edit/{title}") from None
    return render_html(request, "view", page)


@title_handler
async def edit_page(request: web.Request, title: str) -> web.Response:
    store = request.app[store_key]
    return render_html(request, "edit", store.load_or_empty(title))


@title_handler
async def update_page(request: web.Request, title: str) -> web.Response:
    form = await request.post()
    body = str(form.get("body", ""))

    store = request.app[store_key]
    store.save(Page(title=title, body=body.encode("utf-8")))
    raise web.HTTPFound(f"/view/{title}")


@title_handler
async def delete_page(request: web.Request, title: str) -> web.Response:
    store = request.app[store_key]
    store.delete(title)
    raise web.HTTPFound("/")
