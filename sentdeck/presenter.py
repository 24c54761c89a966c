#!/usr/bin/env python3
"""
Presenter state and the ``sentdeck`` command-line entry point.
"""

import argparse
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

from .config import LayoutConfig
from .errors import SentDeckError
from .frame_renderer import FrameRenderer
from .models import EmptySlide, ImageSlide, Presentation, Slide, TextSlide, unreachable_slide
from .pptx_renderer import PPTXRenderer
from .sent_parser import describe_error, load_presentation_or_error
from .theme_loader import DEFAULT_THEME, list_available_themes
from .title import window_title

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_SIZE = (1280, 720)


class Action(Enum):
    NEXT = "next"
    PREVIOUS = "previous"
    QUIT = "quit"


KEY_BINDINGS = {
    "Escape": Action.QUIT,
    "q": Action.QUIT,
    "Left": Action.PREVIOUS,
    "Up": Action.PREVIOUS,
    "BackSpace": Action.PREVIOUS,
    "Prior": Action.PREVIOUS,
    "h": Action.PREVIOUS,
    "k": Action.PREVIOUS,
    "p": Action.PREVIOUS,
    "Right": Action.NEXT,
    "Down": Action.NEXT,
    "Return": Action.NEXT,
    "space": Action.NEXT,
    "Next": Action.NEXT,
    "l": Action.NEXT,
    "j": Action.NEXT,
    "n": Action.NEXT,
}

MOUSE_BINDINGS = {
    "left": Action.NEXT,
    "forward": Action.NEXT,
    "right": Action.PREVIOUS,
    "back": Action.PREVIOUS,
}


class Presenter:
    """
    Tracks which slide is showing and turns input into navigation.

    A windowing front end owns the event loop and forwards key names
    (Tk-style keysyms) to :meth:`handle_key` and button names to
    :meth:`handle_mouse`, redrawing when the index changes. The export
    commands in :func:`main` only use it for the title.

    The index never leaves ``[0, len(slides) - 1]``.
    """

    def __init__(self, presentation: Presentation, config: Optional[LayoutConfig] = None):
        self.presentation = presentation
        self.config = config or LayoutConfig.classic()
        self.current_index = 0

    @property
    def title(self) -> str:
        return window_title(self.presentation, self.config.title_max_length)

    @property
    def current_slide(self) -> Slide:
        return self.presentation.slides[self.current_index]

    def advance(self) -> bool:
        """Move to the next slide. Returns whether the slide changed."""
        if self.current_index < len(self.presentation.slides) - 1:
            self.current_index += 1
            return True
        return False

    def retreat(self) -> bool:
        """Move to the previous slide. Returns whether the slide changed."""
        if self.current_index > 0:
            self.current_index -= 1
            return True
        return False

    def handle_key(self, key: str) -> Optional[Action]:
        """Apply the action bound to *key*, if any, and return it."""
        return self._apply(KEY_BINDINGS.get(key))

    def handle_mouse(self, button: str) -> Optional[Action]:
        return self._apply(MOUSE_BINDINGS.get(button))

    def _apply(self, action: Optional[Action]) -> Optional[Action]:
        if action is Action.NEXT:
            self.advance()
        elif action is Action.PREVIOUS:
            self.retreat()
        return action


def describe_slide(slide: Slide) -> str:
    """One-line summary of a slide for logs."""
    if isinstance(slide, TextSlide):
        first_line = slide.content.split("\n", 1)[0]
        return f"text: {first_line}"
    elif isinstance(slide, ImageSlide):
        return f"image: {slide.path}"
    elif isinstance(slide, EmptySlide):
        return "empty"
    unreachable_slide(slide)


def parse_window_size(value: str) -> Tuple[int, int]:
    """Parse ``WIDTHxHEIGHT`` for argparse."""
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got '{value}'") from None
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"window size must be positive, got '{value}'")
    return width, height


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="sentdeck", description="Present a sent-format slide deck.")
    p.add_argument("presentation", type=Path, help="Presentation source file")
    p.add_argument("--theme", "-t", default=DEFAULT_THEME, help=f"Display theme ({', '.join(list_available_themes())})")
    p.add_argument("--size", "-s", type=parse_window_size, default=DEFAULT_WINDOW_SIZE, help="Window size for frame export, as WIDTHxHEIGHT (default: 1280x720)")
    p.add_argument("--frames", type=Path, help="Render every slide to PNG files in this directory")
    p.add_argument("--pptx", type=Path, help="Export the presentation to this PPTX file")
    p.add_argument("--debug", action="store_true", help="Enable verbose logging")
    return p


def main(argv=None) -> int:
    """Command-line entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger("sentdeck").setLevel(logging.DEBUG)

    try:
        config = LayoutConfig.from_theme(args.theme)
    except (FileNotFoundError, ValueError) as e:
        parser.error(str(e))

    presentation = load_presentation_or_error(args.presentation)
    base_dir = args.presentation.parent
    presenter = Presenter(presentation, config)

    logger.info("📽️ %s (%d slide(s))", presenter.title, len(presentation.slides))

    try:
        if args.frames:
            FrameRenderer(presentation, config, base_dir=base_dir, debug=args.debug).render_all(
                args.frames, args.size
            )
        if args.pptx:
            PPTXRenderer(config, base_dir=base_dir, debug=args.debug).render(presentation, args.pptx)
    except SentDeckError as e:
        logger.error("❌ %s", describe_error(e))
        return 1

    if not (args.frames or args.pptx):
        for index, slide in enumerate(presentation.slides, 1):
            logger.info("%3d  %s", index, describe_slide(slide))

    return 0


if __name__ == "__main__":
    sys.exit(main())
