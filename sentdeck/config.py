"""
Display configuration shared by the layout engine and the renderers.
"""
import math
from dataclasses import dataclass

from .css_utils import CSSParser
from .models import Colour

GOLDEN_RATIO = (1 + math.sqrt(5)) / 2

OPAQUE_WHITE: Colour = (1.0, 1.0, 1.0, 1.0)
OPAQUE_BLACK: Colour = (0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class LayoutConfig:
    """
    Rendering constants, passed explicitly to every layout calculation.

    Attributes:
        usable_width_fraction: Share of the window width content may use
        usable_height_fraction: Share of the window height content may use
        base_font_size: Scale text is measured at before fitting
        sampling_threshold: Magnification at or above which images are
            sampled nearest-neighbour
        wrap_epsilon: Added to the text wrap width to absorb rounding
        title_max_length: Longest window title, ellipsis included
        default_foreground: Text colour when the presentation sets none
        default_background: Clear colour when the presentation sets none
    """
    usable_width_fraction: float = 0.75
    usable_height_fraction: float = 0.75
    base_font_size: float = 1.0
    sampling_threshold: float = 4.0
    wrap_epsilon: float = 0.1
    title_max_length: int = 64
    default_foreground: Colour = OPAQUE_WHITE
    default_background: Colour = OPAQUE_BLACK

    def __post_init__(self):
        for name in ("usable_width_fraction", "usable_height_fraction"):
            value = getattr(self, name)
            if not 0 < value <= 1:
                raise ValueError(f"{name} must be in (0, 1], got {value}")
        for name in ("base_font_size", "sampling_threshold"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.wrap_epsilon < 0:
            raise ValueError(f"wrap_epsilon must not be negative, got {self.wrap_epsilon}")
        if self.title_max_length < 1:
            raise ValueError(f"title_max_length must be at least 1, got {self.title_max_length}")

    @classmethod
    def classic(cls) -> "LayoutConfig":
        """Content fills 75% of each axis."""
        return cls(usable_width_fraction=0.75, usable_height_fraction=0.75)

    @classmethod
    def golden(cls) -> "LayoutConfig":
        """Content fills 1/φ of each axis."""
        fraction = 1 / GOLDEN_RATIO
        return cls(usable_width_fraction=fraction, usable_height_fraction=fraction)

    @classmethod
    def from_theme(cls, theme: str = "classic") -> "LayoutConfig":
        """
        Build a config from a theme's ``:root`` variables.

        Variables a theme leaves out keep their defaults.

        Raises:
            FileNotFoundError: If the theme doesn't exist
            ValueError: If the theme name or a variable value is invalid
        """
        return cls.from_css_parser(CSSParser(theme))

    @classmethod
    def from_css_parser(cls, css_parser: CSSParser) -> "LayoutConfig":
        float_fields = {
            "usable-width": "usable_width_fraction",
            "usable-height": "usable_height_fraction",
            "base-font-size": "base_font_size",
            "sampling-threshold": "sampling_threshold",
            "wrap-epsilon": "wrap_epsilon",
        }
        colour_fields = {
            "foreground": "default_foreground",
            "background": "default_background",
        }

        values = {}
        for variable, field_name in float_fields.items():
            if css_parser.has_variable(variable):
                values[field_name] = css_parser.get_float_value(variable)
        for variable, field_name in colour_fields.items():
            if css_parser.has_variable(variable):
                values[field_name] = css_parser.get_colour(variable)
        if css_parser.has_variable("title-max-length"):
            values["title_max_length"] = css_parser.get_int_value("title-max-length")

        return cls(**values)
