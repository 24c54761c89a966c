#!/usr/bin/env python3
"""
PowerPoint export: one PPTX slide per presentation slide.
"""

import logging
from pathlib import Path
from typing import Optional

from pptx import Presentation as PPTXPresentation
from pptx.dml.color import RGBColor
from pptx.enum.text import MSO_ANCHOR, MSO_AUTO_SIZE, PP_ALIGN
from pptx.util import Inches, Pt

from .colour import colour_to_rgb_bytes
from .config import LayoutConfig
from .fonts import PillowTextMeasurer
from .layout_engine import ImageDimensionCache, fit_image, fit_text_with_measurer
from .models import EmptySlide, ImageSlide, Presentation, TextSlide, unreachable_slide
from .paths import resolve_image_path

logger = logging.getLogger(__name__)

SLIDE_WIDTH_PX = 960
SLIDE_HEIGHT_PX = 540
BLANK_LAYOUT_INDEX = 6


# Helper function to convert pixels to inches
def px(pixels):
    return Inches(pixels / 96)


def px_to_pt(pixels: float) -> float:
    """CSS pixels at 96 DPI to points, rounded to PowerPoint's half-point precision."""
    return round(pixels * 0.75 * 2) / 2


class PPTXRenderer:
    """
    Exports a presentation to a PowerPoint file.

    The slide canvas plays the role of the window, so content is fitted with
    the same layout engine the presenter uses.
    """
    
    def __init__(
        self,
        config: Optional[LayoutConfig] = None,
        base_dir=None,
        debug: bool = False,
    ):
        self.config = config or LayoutConfig.classic()
        self.base_dir = Path(base_dir) if base_dir else None
        self.debug = debug
        self.image_cache = ImageDimensionCache(debug=debug)
        self.window_size = (SLIDE_WIDTH_PX, SLIDE_HEIGHT_PX)

    def render(self, presentation: Presentation, output_path) -> str:
        """
        Write *presentation* to *output_path*.

        Returns:
            The path written, as a string
        """
        measurer = PillowTextMeasurer(presentation.font_list)
        foreground = RGBColor(*colour_to_rgb_bytes(
            presentation.foreground_colour
            if presentation.foreground_colour is not None
            else self.config.default_foreground
        ))
        background = RGBColor(*colour_to_rgb_bytes(
            presentation.background_colour
            if presentation.background_colour is not None
            else self.config.default_background
        ))
        font_name = presentation.font_list[0] if presentation.font_list else None

        prs = PPTXPresentation()
        prs.slide_width = px(SLIDE_WIDTH_PX)
        prs.slide_height = px(SLIDE_HEIGHT_PX)
        layout = prs.slide_layouts[BLANK_LAYOUT_INDEX]

        for slide in presentation.slides:
            pptx_slide = prs.slides.add_slide(layout)
            fill = pptx_slide.background.fill
            fill.solid()
            fill.fore_color.rgb = background

            if isinstance(slide, TextSlide):
                self._add_text(pptx_slide, slide.content, measurer, foreground, font_name)
            elif isinstance(slide, ImageSlide):
                self._add_image(pptx_slide, slide.path)
            elif isinstance(slide, EmptySlide):
                pass
            else:
                unreachable_slide(slide)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        prs.save(str(output_path))

        logger.info("💾 Exported %d slide(s) to %s", len(presentation.slides), output_path)
        return str(output_path)

    def _add_text(self, pptx_slide, text, measurer, colour, font_name):
        fit = fit_text_with_measurer(text, measurer, self.window_size, self.config)
        x, y_middle = fit.position
        width = fit.content_size[0]
        _, usable_height = fit.effective_bounds

        # The box spans the usable height; the middle anchor centres the text on y_middle
        textbox = pptx_slide.shapes.add_textbox(
            px(x),
            px(y_middle - usable_height / 2),
            px(width + self.config.wrap_epsilon),
            px(usable_height),
        )
        text_frame = textbox.text_frame
        text_frame.word_wrap = False
        text_frame.auto_size = MSO_AUTO_SIZE.NONE
        text_frame.vertical_anchor = MSO_ANCHOR.MIDDLE
        text_frame.margin_left = text_frame.margin_right = 0
        text_frame.margin_top = text_frame.margin_bottom = 0

        font_size = Pt(max(px_to_pt(fit.scale), 1))
        for index, line in enumerate(text.split("\n")):
            paragraph = text_frame.paragraphs[0] if index == 0 else text_frame.add_paragraph()
            paragraph.alignment = PP_ALIGN.LEFT
            run = paragraph.add_run()
            run.text = line
            run.font.size = font_size
            run.font.color.rgb = colour
            if font_name:
                run.font.name = font_name

    def _add_image(self, pptx_slide, image_path):
        path = resolve_image_path(image_path, self.base_dir)
        fit = fit_image(self.image_cache.get_dimensions(path), self.window_size, self.config)
        x, y = fit.position
        width, height = fit.effective_bounds

        if self.debug:
            # PowerPoint picks its own filtering
            logger.debug("Image %s fitted at %.3fx (%s)", image_path, fit.factor, fit.sampling_mode.value)

        pptx_slide.shapes.add_picture(str(path), px(x), px(y), px(width), px(height))
