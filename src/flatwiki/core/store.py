"""Flat-file page storage.

Page directory structure:
    pages/
    ├── Home            # raw body bytes of page "Home"
    └── Alpha1          # raw body bytes of page "Alpha1"

One file per page, file name = title, mode 0600.
"""

import logging
import os
import tempfile
from datetime import UTC, datetime
from pathlib import Path

from flatwiki.core.titles import TitleValidator
from flatwiki.core.types import Page, PageEntry
from flatwiki.errors import PageNotFound, PageStoreError

logger = logging.getLogger(__name__)

DEFAULT_FILE_MODE = 0o600
DEFAULT_DIR_MODE = 0o700


class PageStore:
    """Reads and writes pages as individual files in one directory.

    The store owns the on-disk representation exclusively. It keeps no page
    contents in memory between calls.
    """

    def __init__(
        self,
        pages_dir: Path,
        *,
        validator: TitleValidator | None = None,
        file_mode: int = DEFAULT_FILE_MODE,
    ) -> None:
        """Initialize store.

        Args:
            pages_dir: Directory holding one file per page
            validator: Title validator guarding every file name
            file_mode: Permission bits for page files (default: owner read/write)
        """
        self._pages_dir = pages_dir
        self._validator = validator or TitleValidator()
        self._file_mode = file_mode

    @property
    def pages_dir(self) -> Path:
        """Directory holding the page files."""
        return self._pages_dir

    def ensure_dir(self) -> None:
        """Create the page directory if it does not exist."""
        try:
            self._pages_dir.mkdir(mode=DEFAULT_DIR_MODE, parents=True, exist_ok=True)
        except OSError as e:
            raise PageStoreError(f"Cannot create page directory {self._pages_dir}: {e}") from e

    def _path(self, title: str) -> Path:
        return self._pages_dir / self._validator.validate(title)

    def load(self, title: str) -> Page:
        """Load a page.

        Args:
            title: Page title

        Returns:
            Page with the raw file contents as body

        Raises:
            InvalidTitle: If title is not a valid page title
            PageNotFound: If no file exists for the title
            PageStoreError: If the file cannot be read
        """
        path = self._path(title)
        try:
            body = path.read_bytes()
        except FileNotFoundError as e:
            raise PageNotFound(title) from e
        except OSError as e:
            raise PageStoreError(f"Cannot read page {title}: {e}") from e

        logger.debug(f"Loaded page {title} ({len(body)} bytes)")
        return Page(title=title, body=body)

    def load_or_empty(self, title: str) -> Page:
        """Load a page, falling back to an empty page when it does not exist."""
        try:
            return self.load(title)
        except PageNotFound:
            return Page(title=title)

    def exists(self, title: str) -> bool:
        return self._path(title).is_file()

    def save(self, page: Page) -> None:
        """Write a page, creating it or fully replacing its contents.

        The body is written to a temporary file in the page directory and
        renamed over the target, so a failed save leaves the previous
        contents in place.

        Raises:
            InvalidTitle: If the page title is not valid
            PageStoreError: If the file cannot be written
        """
        path = self._path(page.title)
        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self._pages_dir, prefix=".", suffix=".tmp")
            with os.fdopen(fd, "wb") as f:
                f.write(page.body)
            os.chmod(tmp_name, self._file_mode)
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as e:
            raise PageStoreError(f"Cannot write page {page.title}: {e}") from e
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

        logger.info(f"Saved page {page.title} ({len(page.body)} bytes)")

    def delete(self, title: str) -> None:
        """Remove a page.

        Raises:
            InvalidTitle: If title is not a valid page title
            PageNotFound: If no file exists for the title
            PageStoreError: If the file cannot be removed
        """
        path = self._path(title)
        try:
            path.unlink()
        except FileNotFoundError as e:
            raise PageNotFound(title) from e
        except OSError as e:
            raise PageStoreError(f"Cannot delete page {title}: {e}") from e

        logger.info(f"Deleted page {title}")

    def list(self) -> list[PageEntry]:
        """List stored pages sorted by title.

        Files whose names are not valid titles (temporary files, dotfiles)
        are skipped.

        Raises:
            PageStoreError: If the page directory cannot be read
        """
        entries: list[PageEntry] = []
        try:
            with os.scandir(self._pages_dir) as it:
                for dir_entry in it:
                    if not self._validator.is_valid(dir_entry.name):
                        continue
                    if not dir_entry.is_file():
                        continue
                    try:
                        stat = dir_entry.stat()
                    except FileNotFoundError:
                        # deleted since the scan
                        continue
                    entries.append(
                        PageEntry(
                            title=dir_entry.name,
                            size=stat.st_size,
                            modified=datetime.fromtimestamp(stat.st_mtime, tz=UTC),
                        )
                    )
        except OSError as e:
            raise PageStoreError(f"Cannot list pages in {self._pages_dir}: {e}") from e

        entries.sort(key=lambda entry: entry.title)
        return entries
