"""Loads the CSS files that carry display configuration."""
from pathlib import Path
from typing import List

DEFAULT_THEME = "classic"

THEMES_DIR = Path(__file__).parent / "themes"


def theme_path(theme: str) -> Path:
    """
    Location of *theme*'s stylesheet.

    Raises:
        ValueError: If the name could escape the themes directory
    """
    # Names are plain words so they can't be used for path traversal
    if not theme.replace("_", "").replace("-", "").isalnum():
        raise ValueError(f"Invalid theme name: {theme}")
    return THEMES_DIR / f"{theme}.css"


def get_css(theme: str = DEFAULT_THEME) -> str:
    """
    Read a packaged theme.

    Args:
        theme: Theme name, e.g. ``classic`` or ``golden``

    Returns:
        The stylesheet text

    Raises:
        FileNotFoundError: If no such theme ships with sentdeck
        ValueError: If the theme name is invalid
    """
    path = theme_path(theme)
    if not path.is_file():
        raise FileNotFoundError(
            f"Theme '{theme}' not found. Available themes: {list_available_themes()}"
        )
    return path.read_text(encoding="utf-8")


def list_available_themes() -> List[str]:
    """Names of the packaged themes, sorted."""
    if not THEMES_DIR.exists():
        return []
    return sorted(f.stem for f in THEMES_DIR.glob("*.css") if f.is_file())


def validate_theme(theme: str) -> bool:
    """True if *theme* names a packaged theme."""
    try:
        theme_path(theme)
    except ValueError:
        return False
    return theme in list_available_themes()
