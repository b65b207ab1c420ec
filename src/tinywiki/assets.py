"""Asset discovery for bundled templates.

Locates the default HTML templates shipped inside the tinywiki package.
"""

from importlib.resources import files
from pathlib import Path


def get_templates_dir() -> Path:
    """Return path to bundled templates.

    Returns:
        Path to the directory containing view.html and edit.html.

    Raises:
        FileNotFoundError: If templates are not bundled.
    """
    templates = files("tinywiki").joinpath("templates")
    if not templates.is_dir():
        msg = "Bundled templates not found. Reinstall the tinywiki package."
        raise FileNotFoundError(msg)
    return Path(str(templates))
