"""Tests for server module."""

from pathlib import Path

import pytest
from flatwiki.app_keys import renderer_key, store_key, validator_key
from flatwiki.config import Config, PagesConfig, TemplatesConfig
from flatwiki.errors import InvalidTitle, PageNotFound, PageStoreError, RenderError, WikiError, error_status
from flatwiki.server import create_app


class TestCreateApp:
    """Tests for create_app()."""

    def test__valid_config__returns_configured_app(self, test_config: Config) -> None:
        """Create app with shared validator, store and renderer."""
        app = create_app(test_config)

        assert app[store_key].pages_dir == test_config.pages.pages_dir
        assert app[renderer_key].templates_dir is None
        assert app[validator_key].actions == test_config.routes.actions

    def test__missing_pages_dir__created(self, tmp_path: Path) -> None:
        """The page directory is created at startup."""
        pages_dir = tmp_path / "data" / "pages"

        create_app(Config(pages=PagesConfig(pages_dir=pages_dir)))

        assert pages_dir.is_dir()

    def test__templates_dir__passed_to_renderer(self, pages_dir: Path, tmp_path: Path) -> None:
        """Configured templates directory reaches the renderer."""
        config = Config(
            pages=PagesConfig(pages_dir=pages_dir),
            templates=TemplatesConfig(templates_dir=tmp_path),
        )

        app = create_app(config)

        assert app[renderer_key].templates_dir == tmp_path

    def test__pages_dir_is_file__raises_store_error(self, tmp_path: Path) -> None:
        """Startup fails when the page directory cannot be created."""
        blocker = tmp_path / "pages"
        blocker.write_text("not a directory")

        with pytest.raises(PageStoreError):
            create_app(Config(pages=PagesConfig(pages_dir=blocker)))


class TestErrorStatus:
    """Tests for error_status()."""

    @pytest.mark.parametrize(
        ("error", "status"),
        [
            (InvalidTitle("a b"), 404),
            (PageNotFound("Home"), 404),
            (PageStoreError("disk full"), 500),
            (RenderError("boom"), 500),
            (WikiError("unknown"), 500),
        ],
    )
    def test__error__maps_to_status(self, error: WikiError, status: int) -> None:
        """Each error kind has one HTTP status."""
        assert error_status(error) == status
