"""Configuration management for Flatwiki.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from flatwiki.core.titles import ACTIONS

CONFIG_FILENAME = "flatwiki.toml"


@dataclass(frozen=True)
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass(frozen=True)
class PagesConfig:
    """Page storage configuration."""

    pages_dir: Path = field(default_factory=lambda: Path("pages"))


@dataclass(frozen=True)
class TemplatesConfig:
    """Template configuration."""

    templates_dir: Path | None = None


@dataclass(frozen=True)
class RoutesConfig:
    """Route configuration."""

    actions: tuple[str, ...] = ACTIONS


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    server: ServerConfig = field(default_factory=ServerConfig)
    pages: PagesConfig = field(default_factory=PagesConfig)
    templates: TemplatesConfig = field(default_factory=TemplatesConfig)
    routes: RoutesConfig = field(default_factory=RoutesConfig)
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for flatwiki.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Relative directories are resolved against the config file's directory.

        Raises:
            ValueError: If configuration is invalid
        """
        try:
            with path.open("rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            pages=cls._parse_pages(data.get("pages"), config_dir),
            templates=cls._parse_templates(data.get("templates"), config_dir),
            routes=cls._parse_routes(data.get("routes")),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        # bool is an int subclass
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_pages(cls, data: object, config_dir: Path) -> PagesConfig:
        if data is None:
            return PagesConfig(pages_dir=config_dir / "pages")

        if not isinstance(data, dict):
            raise ValueError("pages section must be a dictionary")

        pages_dir = data.get("dir", "pages")
        if not isinstance(pages_dir, str):
            raise ValueError("pages.dir must be a string")

        return PagesConfig(pages_dir=config_dir / pages_dir)

    @classmethod
    def _parse_templates(cls, data: object, config_dir: Path) -> TemplatesConfig:
        if data is None:
            return TemplatesConfig()

        if not isinstance(data, dict):
            raise ValueError("templates section must be a dictionary")

        templates_dir = data.get("dir")
        if templates_dir is None:
            return TemplatesConfig()
        if not isinstance(templates_dir, str):
            raise ValueError("templates.dir must be a string")

        return TemplatesConfig(templates_dir=config_dir / templates_dir)

    @classmethod
    def _parse_routes(cls, data: object) -> RoutesConfig:
        if data is None:
            return RoutesConfig()

        if not isinstance(data, dict):
            raise ValueError("routes section must be a dictionary")

        actions_raw = data.get("actions")
        if actions_raw is None:
            return RoutesConfig()
        if not isinstance(actions_raw, list) or not actions_raw:
            raise ValueError("routes.actions must be a non-empty list")
        actions: list[str] = []
        for item in actions_raw:
            if not isinstance(item, str) or not item.isalpha():
                raise ValueError("routes.actions items must be alphabetic strings")
            actions.append(item)

        return RoutesConfig(actions=tuple(actions))

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        pages_dir: Path | None = None,
        templates_dir: Path | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config.

        Args:
            host: Override server.host
            port: Override server.port
            pages_dir: Override pages.dir
            templates_dir: Override templates.dir

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        pages = self.pages
        if pages_dir is not None:
            pages = replace(self.pages, pages_dir=pages_dir)

        templates = self.templates
        if templates_dir is not None:
            templates = replace(self.templates, templates_dir=templates_dir)

        return replace(self, server=server, pages=pages, templates=templates)
