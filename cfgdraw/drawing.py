"""Raster drawing of boxes, lines and text."""

from __future__ import annotations

import itertools
import logging
import os
from collections.abc import Iterator

from PIL import Image, ImageDraw, ImageFont

from cfgdraw.colors import Color, Coord, Dims
from cfgdraw.specs import BACKGROUND_COLOR, COLOR_GEN_MODE, CYCLIC_COLORS, ColorGeneration
from cfgdraw.utils import random_u8

logger = logging.getLogger(__name__)

_cyclic_colors: Iterator[Color] = itertools.cycle(CYCLIC_COLORS)
_FONT_FILE = "DejaVuSerif.ttf"


def new_random_color(alpha: int) -> Color:
    """Return a new colour according to the configured generation mode.

    In cyclic mode the next colour of the palette is returned as it is.
    """
    if COLOR_GEN_MODE is ColorGeneration.RANDOM:
        return Color(alpha, random_u8(50, 200), random_u8(50, 200), random_u8(50, 200))
    return next(_cyclic_colors)


def _rgba(color: Color) -> tuple[int, int, int, int]:
    return (color.red, color.green, color.blue, color.alpha)


class Drawing:
    """An image on which boxes, lines and text are drawn."""

    def __init__(self, image_width: int, image_height: int) -> None:
        background = BACKGROUND_COLOR
        self.image = Image.new(
            "RGB", (image_width, image_height), (background.red, background.green, background.blue)
        )
        self._draw = ImageDraw.Draw(self.image, "RGBA")
        self._fonts: dict[int, ImageFont.FreeTypeFont | ImageFont.ImageFont] = {}
        self.line_width = 2.0
        self.box_padding = 10.0

    def _font(self, text_size: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
        size = max(1, int(text_size))
        if size not in self._fonts:
            try:
                self._fonts[size] = ImageFont.truetype(_FONT_FILE, size)
            except OSError:
                self._fonts[size] = ImageFont.load_default()
        return self._fonts[size]

    def get_text_height(self, text: str, text_size: float) -> float:
        """Return the height taken by ``text``, one ``text_size`` per line."""
        return text_size * len(text.split("\n"))

    def draw_text(
        self,
        text: str,
        start: Coord,
        max_chars_per_line: int,
        text_color: Color,
        text_size: float,
    ) -> None:
        """Write ``text`` line by line, cutting lines longer than the limit."""
        font = self._font(text_size)
        for line_index, line in enumerate(text.split("\n")):
            if len(line) > max_chars_per_line:
                line = line[: max(max_chars_per_line - 3, 0)] + "..."
            top = start.y + line_index * text_size
            self._draw.text((start.x, top), line, fill=_rgba(text_color), font=font)

    def draw_boxed_text(
        self,
        text: str,
        start: Coord,
        inner_width: float,
        color: Color,
        text_size: float,
    ) -> Dims:
        """Draw ``text`` inside a box; return the outer size of the box."""
        inner_height = self.get_text_height(text, text_size)
        inner_start, out_dims = self.draw_box(start, Dims(inner_width, inner_height), color)
        max_chars_per_line = int(2.0 * inner_width / text_size)
        self.draw_text(text, inner_start, max_chars_per_line, color, text_size)
        return out_dims

    def draw_box(self, out_start: Coord, inner_dims: Dims, color: Color) -> tuple[Coord, Dims]:
        """Draw a box around an inner area; return the inner start and outer size."""
        margin = self.line_width + self.box_padding
        width = inner_dims.width + 2.0 * margin
        height = inner_dims.height + 2.0 * margin
        up_right = out_start + Dims(width, 0.0)
        down_left = out_start + Dims(0.0, height)
        down_right = out_start + Dims(width, height)
        self.draw_line(out_start, up_right, color)
        self.draw_line(up_right, down_right, color)
        self.draw_line(down_right, down_left, color)
        self.draw_line(down_left, out_start, color)
        return Coord(out_start.x + margin, out_start.y + margin), Dims(width, height)

    def draw_line(self, start: Coord, end: Coord, color: Color) -> None:
        """Draw a straight segment from ``start`` to ``end``."""
        self._draw.line(
            [(start.x, start.y), (end.x, end.y)],
            fill=_rgba(color),
            width=max(1, round(self.line_width)),
        )

    def save_image(self, path: str | os.PathLike[str]) -> None:
        """Write the image to ``path`` as PNG."""
        logger.info("building png...")
        self.image.save(path, format="PNG")