"""
Headless slide rendering to Pillow images.

Draws a slide the way the windowed presenter does, using the layout engine
for placement, so output frames match what a window of the same size shows.
"""
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw

from .colour import colour_to_rgb_bytes
from .config import LayoutConfig
from .fonts import PillowTextMeasurer, line_spacing
from .layout_engine import ImageDimensionCache, fit_image, fit_text_with_measurer
from .models import EmptySlide, ImageSlide, Presentation, SamplingMode, Slide, TextSlide, unreachable_slide
from .paths import resolve_image_path

logger = logging.getLogger(__name__)

RESAMPLING_FILTERS = {
    SamplingMode.NEAREST_NEIGHBOUR: Image.Resampling.NEAREST,
    SamplingMode.HIGH_QUALITY: Image.Resampling.LANCZOS,
}


class FrameRenderer:
    """
    Renders slides of one presentation to RGB images.

    Args:
        presentation: The presentation to draw
        config: Layout constants and default colours
        base_dir: Directory relative image paths are resolved against
        dpi_scale: Display scale factor applied to the base font size
    """

    def __init__(
        self,
        presentation: Presentation,
        config: Optional[LayoutConfig] = None,
        base_dir=None,
        dpi_scale: float = 1.0,
        debug: bool = False,
    ):
        self.presentation = presentation
        self.config = config or LayoutConfig.classic()
        self.base_dir = Path(base_dir) if base_dir else None
        self.dpi_scale = dpi_scale
        self.debug = debug

        self.measurer = PillowTextMeasurer(presentation.font_list)
        self.image_cache = ImageDimensionCache(debug=debug)

        self.foreground = colour_to_rgb_bytes(
            presentation.foreground_colour
            if presentation.foreground_colour is not None
            else self.config.default_foreground
        )
        self.background = colour_to_rgb_bytes(
            presentation.background_colour
            if presentation.background_colour is not None
            else self.config.default_background
        )

    def render(self, index: int, window_size: Tuple[int, int]) -> Image.Image:
        return self.render_slide(self.presentation.slides[index], window_size)

    def render_slide(self, slide: Slide, window_size: Tuple[int, int]) -> Image.Image:
        """Draw *slide* on a fresh frame of *window_size* pixels."""
        frame = Image.new("RGB", window_size, self.background)

        if isinstance(slide, TextSlide):
            self._draw_text(frame, slide.content)
        elif isinstance(slide, ImageSlide):
            self._draw_image(frame, slide.path)
        elif isinstance(slide, EmptySlide):
            pass
        else:
            unreachable_slide(slide)

        return frame

    def render_all(self, output_dir, window_size: Tuple[int, int]) -> List[Path]:
        """Write every slide to ``slide-NNN.png`` in *output_dir*."""
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        written = []
        for index in range(len(self.presentation.slides)):
            frame_path = output_dir / f"slide-{index + 1:03d}.png"
            self.render(index, window_size).save(frame_path)
            written.append(frame_path)

        logger.info("🖼️ Wrote %d frame(s) to %s", len(written), output_dir)
        return written

    def _draw_text(self, frame: Image.Image, text: str):
        fit = fit_text_with_measurer(text, self.measurer, frame.size, self.config, self.dpi_scale)
        font = self.measurer.font_at(fit.scale)
        left, top, _, _ = self.measurer.text_bbox(text, fit.scale)

        # The fit anchors the block's vertical middle; Pillow draws from the top
        x, y_middle = fit.position
        y = y_middle - fit.content_size[1] / 2

        draw = ImageDraw.Draw(frame)
        draw.multiline_text(
            (x - left, y - top),
            text,
            fill=self.foreground,
            font=font,
            spacing=line_spacing(fit.scale),
        )

    def _draw_image(self, frame: Image.Image, image_path: str):
        path = resolve_image_path(image_path, self.base_dir)
        natural_size = self.image_cache.get_dimensions(path)
        fit = fit_image(natural_size, frame.size, self.config)

        width, height = (max(1, round(v)) for v in fit.effective_bounds)
        if self.debug:
            logger.debug(
                "Image %s scaled %.3fx to %dx%d (%s)",
                image_path, fit.factor, width, height, fit.sampling_mode.value,
            )

        with Image.open(path) as image:
            scaled = image.convert("RGBA").resize(
                (width, height), RESAMPLING_FILTERS[fit.sampling_mode]
            )
        x, y = fit.position
        frame.paste(scaled, (round(x), round(y)), scaled)
