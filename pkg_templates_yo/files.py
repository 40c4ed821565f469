"""Filesystem helpers shared by the generator and plugins."""

from __future__ import annotations

import os
from pathlib import Path

# Directory holding the default template files shipped with the package.
DEFAULTS_DIR = Path(__file__).resolve().parent / "defaults"


def gen_file(path: str | Path, text: str) -> Path:
    """Write ``text`` to ``path``, creating parent directories.

    The file always ends with a newline, so rewriting identical content is
    byte-identical.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if not text.endswith("\n"):
        text += "\n"
    path.write_text(text, encoding="utf-8")
    return path


def tilde(path: str | Path) -> str:
    """Replace the home directory prefix of ``path`` with ``~``."""
    home = str(Path.home())
    text = str(path)
    if home != os.sep and text.startswith(home):
        return "~" + text[len(home):]
    return text
