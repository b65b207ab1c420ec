"""File-backed page storage.

Storage layout:
    <pages_dir>/
    ├── FrontPage.txt       # Raw page body, no header or metadata
    └── Notes.txt

Titles are used as file names as-is. The store performs no validation of its
own; callers must only pass titles that matched the router's title pattern.
"""

import contextlib
import logging
import os
import tempfile
from pathlib import Path

from tinywiki.core.page import Page
from tinywiki.errors import PageNotFoundError, PageWriteError

logger = logging.getLogger(__name__)


class PageStore:
    """Loads and saves pages as `<title>.txt` files in a single directory.

    Saves overwrite unconditionally. There is no locking: concurrent saves of
    the same title race and the last completed write wins.
    """

    SUFFIX = ".txt"
    FILE_MODE = 0o600

    def __init__(self, pages_dir: Path) -> None:
        """Initialize store with directory path.

        Args:
            pages_dir: Directory holding the page files
        """
        self._pages_dir = pages_dir

    @property
    def pages_dir(self) -> Path:
        """Directory holding the page files."""
        return self._pages_dir

    def path_for(self, title: str) -> Path:
        """Return the file path backing the given title."""
        return self._pages_dir / f"{title}{self.SUFFIX}"

    def load(self, title: str) -> Page:
        """Load a page by title.

        Args:
            title: Page title

        Returns:
            Page with the file's raw bytes as body

        Raises:
            PageNotFoundError: If the file cannot be read for any reason
        """
        path = self.path_for(title)
        try:
            body = path.read_bytes()
        except OSError as e:
            logger.debug(f"Could not read {path}: {e}")
            raise PageNotFoundError(title) from e

        logger.debug(f"Loaded {path} ({len(body)} bytes)")
        return Page(title=title, body=body)

    def save(self, page: Page) -> None:
        """Persist a page, replacing any previous content.

        The body is written to a temporary file next to the target and then
        renamed over it, so a failed save leaves the previous content intact.

        Args:
            page: Page to write

        Raises:
            PageWriteError: If the page could not be written
        """
        path = self.path_for(page.title)
        tmp_path: str | None = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                dir=self._pages_dir,
                prefix=f".{page.title}.",
                suffix=".tmp",
            )
            with os.fdopen(fd, "wb") as f:
                f.write(page.body)
            os.chmod(tmp_path, self.FILE_MODE)
            os.replace(tmp_path, path)
        except OSError as e:
            if tmp_path is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_path)
            message = f"write {path}: {e.strerror or e}"
            logger.warning(message)
            raise PageWriteError(message) from e

        logger.debug(f"Saved {path} ({len(page.body)} bytes)")
