"""Shared test fixtures."""

from pathlib import Path

import pytest
from tinywiki.config import Config, ServerConfig, WikiConfig


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    """Create a test configuration with tmp_path directories.

    Creates pages_dir and returns a Config using the bundled templates.
    """
    pages_dir = tmp_path / "pages"
    pages_dir.mkdir(exist_ok=True)

    return Config(
        server=ServerConfig(),
        wiki=WikiConfig(pages_dir=pages_dir),
    )
