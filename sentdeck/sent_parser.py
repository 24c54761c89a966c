"""
Parser for the line-oriented ``sent`` presentation format.

Every paragraph (run of non-blank lines) becomes one slide:

    This is a text slide.

    @image.png
    text after an image marker is ignored

    \\
    # a comment, and below, an option
    #.fg:#ffffff
"""
import logging
from pathlib import Path
from typing import List, Optional

from .colour import parse_bool, parse_colour_hex
from .errors import PresentationLoadError, SentDeckError
from .lines import split_lines, trim_end
from .models import Colour, EmptySlide, ImageSlide, Presentation, Slide, TextSlide

logger = logging.getLogger(__name__)

COMMENT_MARKER = "#"
OPTION_MARKER = "#."
OPTION_SEPARATOR = ":"
IMAGE_SLIDE_MARKER = "@"
ESCAPE_MARKER = "\\"

FONT_OPTION = "font"
FOREGROUND_COLOUR_OPTION = "fg"
BACKGROUND_COLOUR_OPTION = "bg"
CURSOR_OPTION = "cursor"


class SentParser:
    """
    Single forward pass over a document's lines.

    A parser instance is single-use per call to :meth:`parse`; the state is
    reset at the start of every parse.
    """

    def __init__(self):
        self._reset()

    def _reset(self):
        self.slides: List[Slide] = []
        self.font_list: List[str] = []
        self.foreground_colour: Optional[Colour] = None
        self.background_colour: Optional[Colour] = None
        self.show_cursor: Optional[bool] = None
        self.option_count = 0

        self._paragraph: List[str] = []
        self._skip_remainder_of_paragraph = False

    def parse(self, source_text: str) -> Presentation:
        """
        Parse presentation source into a :class:`Presentation`.

        Args:
            source_text: The whole document

        Returns:
            The parsed presentation, always holding at least one slide

        Raises:
            InvalidColourValue: If an ``fg``/``bg`` option isn't a hex colour
            InvalidBooleanValue: If a ``cursor`` option isn't true/false
        """
        self._reset()

        for line in split_lines(source_text):
            self._process_line(trim_end(line))

        self._close_paragraph()

        if not self.slides:
            self.slides.append(EmptySlide())

        presentation = Presentation(
            slides=tuple(self.slides),
            font_list=tuple(self.font_list),
            foreground_colour=self.foreground_colour,
            background_colour=self.background_colour,
            show_cursor=self.show_cursor,
        )
        logger.debug(
            "Parsed %d slide(s) and %d option(s)", len(presentation.slides), self.option_count
        )
        return presentation

    def _process_line(self, line: str):
        # A blank line completes the paragraph
        if not line:
            self._close_paragraph()
            self._skip_remainder_of_paragraph = False
            return

        if line.startswith(OPTION_MARKER):
            self._apply_option(line[len(OPTION_MARKER):])
            return

        # Comments, and anything following an image or empty slide marker
        if line.startswith(COMMENT_MARKER) or self._skip_remainder_of_paragraph:
            return

        if not self._paragraph and line.startswith(IMAGE_SLIDE_MARKER):
            self.slides.append(ImageSlide(line[len(IMAGE_SLIDE_MARKER):]))
            self._skip_remainder_of_paragraph = True
            return

        if line.startswith(ESCAPE_MARKER):
            line = line[len(ESCAPE_MARKER):]

        # An escaped blank line at the start of a paragraph is an empty slide
        if not line:
            if not self._paragraph:
                self.slides.append(EmptySlide())
                self._skip_remainder_of_paragraph = True
            return

        self._paragraph.append(line)

    def _close_paragraph(self):
        if self._paragraph:
            self.slides.append(TextSlide("\n".join(self._paragraph)))
            self._paragraph = []

    def _apply_option(self, option: str):
        if OPTION_SEPARATOR not in option:
            return
        name, value = option.split(OPTION_SEPARATOR, 1)
        self.option_count += 1

        # Single-valued options: the first occurrence wins
        if name == FONT_OPTION:
            self.font_list.append(value)
        elif name == FOREGROUND_COLOUR_OPTION:
            if self.foreground_colour is None:
                self.foreground_colour = parse_colour_hex(value)
        elif name == BACKGROUND_COLOUR_OPTION:
            if self.background_colour is None:
                self.background_colour = parse_colour_hex(value)
        elif name == CURSOR_OPTION:
            if self.show_cursor is None:
                self.show_cursor = parse_bool(value)
        else:
            logger.debug("Ignoring unrecognised option '%s'", name)


def parse_presentation(source_text: str) -> Presentation:
    """Parse presentation source text. See :meth:`SentParser.parse`."""
    return SentParser().parse(source_text)


def load_presentation(path) -> Presentation:
    """
    Read and parse a presentation file.

    Raises:
        PresentationLoadError: If the file can't be read
        InvalidColourValue, InvalidBooleanValue: On malformed option values
    """
    path = Path(path)
    try:
        source_text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PresentationLoadError(path) from e

    return parse_presentation(source_text)


def describe_error(error: BaseException) -> str:
    """Join an exception and its causes into one ``a: b: c`` line."""
    parts = []
    current: Optional[BaseException] = error
    while current is not None:
        parts.append(str(current) or type(current).__name__)
        current = current.__cause__
    return ": ".join(parts)


def error_presentation(error: BaseException) -> Presentation:
    """A one-slide presentation displaying *error*."""
    return Presentation(
        slides=(TextSlide(f"unable to load the presentation: {describe_error(error)}"),)
    )


def load_presentation_or_error(path) -> Presentation:
    """
    Like :func:`load_presentation`, but a failure becomes a presentation
    showing the error text instead of propagating.
    """
    try:
        return load_presentation(path)
    except SentDeckError as e:
        logger.error("❌ Unable to load the presentation: %s", describe_error(e))
        return error_presentation(e)
