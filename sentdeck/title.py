"""Window title derivation."""
from typing import Optional, Tuple

from .lines import split_lines, trim
from .models import EmptySlide, ImageSlide, Presentation, TextSlide, unreachable_slide

DEFAULT_TITLE = "sentdeck presentation"
MAXIMUM_TITLE_LENGTH = 64
ELLIPSIS = "…"


def truncate_chars(text: str, maximum_chars: int) -> Tuple[str, bool]:
    """Truncate on code points. Returns the text and whether anything was cut."""
    if len(text) > maximum_chars:
        return text[:maximum_chars], True
    return text, False


def derive_title(
    presentation: Presentation, max_length: int = MAXIMUM_TITLE_LENGTH
) -> Optional[str]:
    """
    Derive a one-line title from the first text slide.

    The slide's lines are stripped and joined with single spaces. If the
    result is longer than ``max_length - 1`` characters it is cut there and
    an ellipsis appended, so the title never exceeds ``max_length``.

    Returns:
        The title, or None if the presentation has no text slide
    """
    for slide in presentation.slides:
        if isinstance(slide, TextSlide):
            title = " ".join(trim(line) for line in split_lines(slide.content))
            title, truncated = truncate_chars(title, max_length - 1)
            if truncated:
                title += ELLIPSIS
            return title
        elif isinstance(slide, (ImageSlide, EmptySlide)):
            continue
        else:
            unreachable_slide(slide)

    return None


def window_title(presentation: Presentation, max_length: int = MAXIMUM_TITLE_LENGTH) -> str:
    """The derived title, or :data:`DEFAULT_TITLE`."""
    title = derive_title(presentation, max_length)
    return title if title is not None else DEFAULT_TITLE
