#!/usr/bin/env python3
"""Layout engine: fitting slide content into a window.

Everything here except :class:`ImageDimensionCache` is a pure function of
its arguments, so it can be called on every redraw.
"""

import logging
from typing import Dict, Protocol, Tuple

from PIL import Image

from .config import LayoutConfig
from .errors import ImageLoadError
from .models import FitResult, SamplingMode, Vertex

logger = logging.getLogger(__name__)

Size = Tuple[float, float]

# Two triangles over the quad from screen_rect_to_vertices, sharing one diagonal
RECT_VERTEX_INDICES: Tuple[int, ...] = (0, 1, 2, 2, 3, 0)


class TextMeasurer(Protocol):
    """Anything that can report the natural size of a block of text."""

    def measure(self, text: str, scale: float) -> Size:
        """Width and height of *text* at *scale*, without wrapping."""
        ...


def usable_area(window_size: Size, config: LayoutConfig) -> Size:
    """The part of the window content may occupy."""
    width, height = window_size
    if width < 0 or height < 0:
        raise ValueError(f"window size must not be negative, got {width}x{height}")
    return width * config.usable_width_fraction, height * config.usable_height_fraction


def scaling_factor(
    usable_width: float, usable_height: float, natural_width: float, natural_height: float
) -> float:
    """
    Largest uniform scale at which content still fits the usable area.

    Raises:
        ValueError: If either natural dimension isn't strictly positive
    """
    if natural_width <= 0 or natural_height <= 0:
        raise ValueError(
            f"natural size must be positive to fit, got {natural_width}x{natural_height}"
        )
    return min(usable_width / natural_width, usable_height / natural_height)


def select_sampling_mode(factor: float, threshold: float) -> SamplingMode:
    """Nearest-neighbour for heavy magnification, keeping pixel edges crisp."""
    if factor >= threshold:
        return SamplingMode.NEAREST_NEIGHBOUR
    return SamplingMode.HIGH_QUALITY


def fit_text(
    natural_size: Size,
    window_size: Size,
    config: LayoutConfig,
    dpi_scale: float = 1.0,
) -> FitResult:
    """
    Fit a text block measured at ``config.base_font_size * dpi_scale``.

    The block is centred horizontally on its scaled width, and anchored at
    half the window height; the caller draws it with middle vertical
    alignment. The returned bounds carry ``config.wrap_epsilon`` so the
    text shaper doesn't wrap a line that fits only up to rounding error.
    """
    screen_width, screen_height = window_size
    usable_width, usable_height = usable_area(window_size, config)
    natural_width, natural_height = natural_size

    base_scale = config.base_font_size * dpi_scale
    factor = scaling_factor(usable_width, usable_height, natural_width, natural_height)
    scaled_width, scaled_height = natural_width * factor, natural_height * factor

    # X and Y differ because the horizontal and vertical alignment differ
    position = ((screen_width - scaled_width) / 2, screen_height / 2)

    return FitResult(
        scale=base_scale * factor,
        factor=factor,
        position=position,
        effective_bounds=(usable_width + config.wrap_epsilon, usable_height),
        content_size=(scaled_width, scaled_height),
    )


def fit_text_with_measurer(
    text: str,
    measurer: TextMeasurer,
    window_size: Size,
    config: LayoutConfig,
    dpi_scale: float = 1.0,
) -> FitResult:
    """Measure *text* at the base scale, then :func:`fit_text` it."""
    natural_size = measurer.measure(text, config.base_font_size * dpi_scale)
    return fit_text(natural_size, window_size, config, dpi_scale)


def fit_image(natural_size: Size, window_size: Size, config: LayoutConfig) -> FitResult:
    """Fit an image of *natural_size* pixels, centred on both axes."""
    screen_width, screen_height = window_size
    usable_width, usable_height = usable_area(window_size, config)
    image_width, image_height = natural_size

    factor = scaling_factor(usable_width, usable_height, image_width, image_height)
    scaled_width, scaled_height = image_width * factor, image_height * factor

    return FitResult(
        scale=factor,
        factor=factor,
        position=((screen_width - scaled_width) / 2, (screen_height - scaled_height) / 2),
        effective_bounds=(scaled_width, scaled_height),
        content_size=(scaled_width, scaled_height),
        sampling_mode=select_sampling_mode(factor, config.sampling_threshold),
    )


def screen_rect_to_vertices(
    screen_width: float,
    screen_height: float,
    x: float,
    y: float,
    width: float,
    height: float,
) -> Tuple[Vertex, Vertex, Vertex, Vertex]:
    """
    Convert a pixel rect to quad corners in [-1, 1] normalised coordinates.

    Corners come top-right, top-left, bottom-left, bottom-right, to be drawn
    with :data:`RECT_VERTEX_INDICES`.
    """
    def transform_x(px: float) -> float:
        return (px / screen_width) * 2 - 1

    def transform_y(py: float) -> float:
        return (py / screen_height) * 2 - 1

    return (
        Vertex(pos=(transform_x(x + width), transform_y(y)), uv=(1.0, 1.0)),
        Vertex(pos=(transform_x(x), transform_y(y)), uv=(0.0, 1.0)),
        Vertex(pos=(transform_x(x), transform_y(y + height)), uv=(0.0, 0.0)),
        Vertex(pos=(transform_x(x + width), transform_y(y + height)), uv=(1.0, 0.0)),
    )


class ImageDimensionCache:
    """Cache for image dimensions to avoid repeated PIL Image.open calls."""
    
    def __init__(self, debug: bool = False):
        self.cache: Dict[str, Tuple[int, int]] = {}
        self.debug = debug
    
    def __contains__(self, image_path) -> bool:
        return str(image_path) in self.cache

    def get_dimensions(self, image_path) -> Tuple[int, int]:
        """
        Get image dimensions, using cache if available.
        
        Args:
            image_path: Path to the image file
            
        Returns:
            Tuple of (width, height)

        Raises:
            ImageLoadError: If the image can't be opened or has no area
        """
        key = str(image_path)
        if key in self.cache:
            if self.debug:
                logger.debug(f"📦 Using cached dimensions for {key}: {self.cache[key]}")
            return self.cache[key]
        
        try:
            with Image.open(key) as img:
                dimensions = img.size
        except OSError as e:
            raise ImageLoadError(key) from e

        if dimensions[0] <= 0 or dimensions[1] <= 0:
            raise ImageLoadError(key)

        self.cache[key] = dimensions
        if self.debug:
            logger.debug(f"📷 Cached new image dimensions for {key}: {dimensions}")
        return dimensions

    def preload(self, image_paths) -> None:
        """Load every path up front so a bad image fails before presenting."""
        for image_path in image_paths:
            self.get_dimensions(image_path)
