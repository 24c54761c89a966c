"""
Data models for sentdeck presentations and layout results.
"""
from dataclasses import dataclass
from enum import Enum
from typing import NoReturn, Optional, Tuple, Union

# Linear RGBA, each channel in [0, 1]
Colour = Tuple[float, float, float, float]


@dataclass(frozen=True)
class TextSlide:
    """A paragraph of text, lines joined with ``\\n``."""
    content: str


@dataclass(frozen=True)
class ImageSlide:
    """An image, referenced by the path exactly as written in the source."""
    path: str


@dataclass(frozen=True)
class EmptySlide:
    """A blank slide."""


Slide = Union[TextSlide, ImageSlide, EmptySlide]


def unreachable_slide(slide) -> NoReturn:
    """Fail loudly when a consumer meets a slide variant it doesn't handle."""
    raise TypeError(f"unhandled slide variant: {type(slide).__name__}")


@dataclass(frozen=True)
class Presentation:
    """
    A parsed presentation. Built once by the parser and never mutated.

    ``None`` for a colour or for ``show_cursor`` means the caller's default
    applies.
    """
    slides: Tuple[Slide, ...]
    font_list: Tuple[str, ...] = ()
    foreground_colour: Optional[Colour] = None
    background_colour: Optional[Colour] = None
    show_cursor: Optional[bool] = None

    def __post_init__(self):
        if not self.slides:
            raise ValueError("a presentation needs at least one slide")

    def __len__(self):
        return len(self.slides)

    def image_paths(self) -> Tuple[str, ...]:
        """Distinct image paths in the order they first appear."""
        seen = []
        for slide in self.slides:
            if isinstance(slide, ImageSlide) and slide.path not in seen:
                seen.append(slide.path)
        return tuple(seen)


class SamplingMode(Enum):
    """Texture filtering used when drawing an image slide."""
    NEAREST_NEIGHBOUR = "nearest_neighbour"
    HIGH_QUALITY = "high_quality"


@dataclass(frozen=True)
class FitResult:
    """
    Placement of one slide's content inside a window, recomputed per redraw.

    For text, ``scale`` is the font scale to draw with, ``position`` is the
    left edge and vertical centre of the block, and ``effective_bounds`` are
    the wrap bounds to hand to the text shaper. For images, ``position`` is
    the top-left corner and ``effective_bounds`` the scaled size.
    """
    scale: float
    factor: float
    position: Tuple[float, float]
    effective_bounds: Tuple[float, float]
    content_size: Tuple[float, float]
    sampling_mode: Optional[SamplingMode] = None


@dataclass(frozen=True)
class Vertex:
    """A corner of a textured quad in normalised device coordinates."""
    pos: Tuple[float, float]
    uv: Tuple[float, float] = (0.0, 0.0)
