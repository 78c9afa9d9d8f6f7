"""Core type definitions."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Page:
    """A named unit of stored content.

    The title doubles as the file name in the page directory.
    """

    title: str
    body: bytes = b""

    @property
    def text(self) -> str:
        """Body decoded for display."""
        return self.body.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class PageEntry:
    """A stored page as seen by a directory listing."""

    title: str
    size: int
    modified: datetime
