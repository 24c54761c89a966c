"""sentdeck – minimalist slide presentations from plain text.

Exposes the public API **and** sets up a minimal logging configuration so
that every sub-module can call

```python
import logging
logger = logging.getLogger(__name__)
```

and honour a single environment variable `SENTDECK_LOG_LEVEL`.
"""

from __future__ import annotations

import logging
import os

# ------------------------------------------------------------------
# Default logging – honour env var, otherwise INFO.
# ------------------------------------------------------------------
LOG_LEVEL = os.getenv("SENTDECK_LOG_LEVEL", "INFO").upper()
if not logging.getLogger().handlers:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

# Public API re-exports ------------------------------------------------
from .colour import parse_bool, parse_colour_hex  # noqa: E402  (import after logger)
from .config import LayoutConfig  # noqa: E402
from .errors import (  # noqa: E402
    ImageLoadError,
    InvalidBooleanValue,
    InvalidColourValue,
    PresentationLoadError,
    SentDeckError,
)
from .layout_engine import fit_image, fit_text, scaling_factor  # noqa: E402
from .models import (  # noqa: E402
    EmptySlide,
    FitResult,
    ImageSlide,
    Presentation,
    SamplingMode,
    Slide,
    TextSlide,
)
from .sent_parser import load_presentation, parse_presentation  # noqa: E402
from .title import derive_title  # noqa: E402

__all__ = [
    "parse_bool",
    "parse_colour_hex",
    "LayoutConfig",
    "ImageLoadError",
    "InvalidBooleanValue",
    "InvalidColourValue",
    "PresentationLoadError",
    "SentDeckError",
    "fit_image",
    "fit_text",
    "scaling_factor",
    "EmptySlide",
    "FitResult",
    "ImageSlide",
    "Presentation",
    "SamplingMode",
    "Slide",
    "TextSlide",
    "load_presentation",
    "parse_presentation",
    "derive_title",
]
