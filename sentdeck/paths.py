"""Path helpers for assets referenced by a presentation."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


__all__ = ["resolve_image_path"]


def resolve_image_path(image_path: str, base_dir: Optional[str | Path] = None) -> Path:
    """Return the on-disk location of an image slide's path.

    Rules
    -----
    1. ``file://`` URLs are stripped to a plain path first.
    2. Absolute paths are returned as-is.
    3. Relative paths are resolved against *base_dir*, normally the
       directory holding the presentation file. Without one they stay
       relative to the working directory.
    """
    if image_path.startswith("file://"):
        image_path = image_path[len("file://"):]

    path = Path(image_path).expanduser()
    if path.is_absolute() or base_dir is None:
        return path

    return Path(base_dir) / path
