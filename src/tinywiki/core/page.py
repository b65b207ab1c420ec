"""Page record."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Page:
    """A single wiki page.

    The title doubles as the storage key, so it is expected to have been
    validated by the router before a Page is built from it.
    """

    title: str
    body: bytes = b""

    @property
    def text(self) -> str:
        """Body decoded as UTF-8, with undecodable bytes replaced."""
        return self.body.decode("utf-8", errors="replace")
