"""Shared test fixtures."""

from pathlib import Path

import pytest
from aiohttp import web
from flatwiki.config import Config, PagesConfig
from flatwiki.core.store import PageStore
from flatwiki.server import create_app


@pytest.fixture
def pages_dir(tmp_path: Path) -> Path:
    """Create the page directory under tmp_path."""
    pages = tmp_path / "pages"
    pages.mkdir(exist_ok=True)
    return pages


@pytest.fixture
def test_config(pages_dir: Path) -> Config:
    """Create a test configuration storing pages in tmp_path."""
    return Config(pages=PagesConfig(pages_dir=pages_dir))


@pytest.fixture
def store(pages_dir: Path) -> PageStore:
    return PageStore(pages_dir)


@pytest.fixture
def app(test_config: Config) -> web.Application:
    return create_app(test_config)
