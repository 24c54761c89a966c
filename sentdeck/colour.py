"""
Colour and boolean option value decoding.

Colours are written as sRGB hex codes (``#rrggbb`` or ``rrggbb``) and are
stored in linear light so they can be blended correctly.
"""
from typing import Tuple

from .errors import InvalidBooleanValue, InvalidColourValue
from .lines import trim_end
from .models import Colour

HEX_CODE_MARKER = "#"
EXPECTED_HEX_LENGTH = 3 * 2
OPAQUE_ALPHA = 1.0

TRUE_LITERAL = "true"
FALSE_LITERAL = "false"


def srgb_to_linear(value: float) -> float:
    """Decode one sRGB-encoded channel in [0, 1] to linear intensity."""
    if value > 0.04045:
        return ((value + 0.055) / 1.055) ** 2.4
    return value / 12.92


def linear_to_srgb(value: float) -> float:
    """Encode one linear channel in [0, 1] back to sRGB."""
    if value > 0.0031308:
        return 1.055 * value ** (1 / 2.4) - 0.055
    return value * 12.92


def parse_colour_hex(text: str) -> Colour:
    """
    Parse a hex colour option value into a linear, opaque RGBA colour.

    Args:
        text: Raw option value, e.g. ``#ff8800`` or ``ff8800``

    Returns:
        (r, g, b, a) in linear light with a fixed at 1.0

    Raises:
        InvalidColourValue: If the value isn't exactly 6 hex digits
    """
    hex_value = text
    if hex_value.startswith(HEX_CODE_MARKER):
        hex_value = hex_value[len(HEX_CODE_MARKER):]
    hex_value = trim_end(hex_value)

    if len(hex_value) != EXPECTED_HEX_LENGTH:
        raise InvalidColourValue(text)

    channels = []
    for start in range(0, EXPECTED_HEX_LENGTH, 2):
        pair = hex_value[start:start + 2]
        # int() would also take signs, underscores and surrounding spaces
        if not all(c in "0123456789abcdefABCDEF" for c in pair):
            raise InvalidColourValue(text)
        channels.append(srgb_to_linear(int(pair, 16) / 255))

    return (channels[0], channels[1], channels[2], OPAQUE_ALPHA)


def parse_bool(text: str) -> bool:
    """Accept exactly ``true`` or ``false``."""
    if text == TRUE_LITERAL:
        return True
    if text == FALSE_LITERAL:
        return False
    raise InvalidBooleanValue(text)


def colour_to_rgb_bytes(colour: Colour) -> Tuple[int, int, int]:
    """Re-encode a linear colour as 8-bit sRGB, dropping alpha."""
    r, g, b = (
        int(round(linear_to_srgb(min(max(channel, 0.0), 1.0)) * 255))
        for channel in colour[:3]
    )
    return r, g, b
