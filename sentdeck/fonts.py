"""
Font resolution and text measurement with Pillow.
"""
import logging
from typing import Dict, Iterable, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

logger = logging.getLogger(__name__)

# Metrics are taken at this size and scaled linearly; hinting at tiny sizes
# would make them inaccurate
REFERENCE_SIZE = 128.0
# Gap between lines as a share of the font size
LINE_SPACING_RATIO = 0.2
FONT_FILE_EXTENSIONS = ("", ".ttf", ".otf", ".ttc")


def load_font(font_list: Iterable[str], size: float):
    """
    Load the first available font from *font_list*, in priority order.

    Each name is tried as given and with the common font file extensions,
    which Pillow also looks up in the system font directories. Falls back
    to Pillow's bundled default font.
    """
    for font_name in font_list:
        for extension in FONT_FILE_EXTENSIONS:
            try:
                return ImageFont.truetype(f"{font_name}{extension}", size)
            except OSError:
                continue
        logger.warning("⚠️ Font '%s' not found, trying the next one", font_name)

    return ImageFont.load_default(size)


def line_spacing(size: float) -> float:
    return size * LINE_SPACING_RATIO


class PillowTextMeasurer:
    """
    Measures and supplies fonts for text slides.

    Fonts are cached per size since a redraw at the same window size asks
    for the same one again.
    """

    def __init__(self, font_list: Sequence[str] = (), reference_size: float = REFERENCE_SIZE):
        self.font_list = tuple(font_list)
        self.reference_size = reference_size
        self._fonts: Dict[float, object] = {}
        self._draw = ImageDraw.Draw(Image.new("L", (1, 1)))

    def font_at(self, size: float):
        # FreeType rejects sizes below one
        size = max(round(size, 2), 1.0)
        if size not in self._fonts:
            self._fonts[size] = load_font(self.font_list, size)
        return self._fonts[size]

    def text_bbox(self, text: str, size: float) -> Tuple[float, float, float, float]:
        """Ink bounding box of *text* drawn at the origin with the font at *size*."""
        return self._draw.multiline_textbbox(
            (0, 0), text, font=self.font_at(size), spacing=line_spacing(size)
        )

    def measure(self, text: str, scale: float) -> Tuple[float, float]:
        left, top, right, bottom = self.text_bbox(text, self.reference_size)
        ratio = scale / self.reference_size
        return (right - left) * ratio, (bottom - top) * ratio
