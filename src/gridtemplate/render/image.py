"""Render placed regions to an image for previews and debugging."""

from __future__ import annotations

import zlib
from dataclasses import dataclass
from typing import Mapping

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageDraw

from ..layout.placement import Rect

Color = tuple[int, int, int]


def region_color(name: str) -> Color:
    """Pick a stable pastel colour for a region name."""
    rng = np.random.default_rng(zlib.crc32(name.encode("utf-8")))
    rgb = rng.integers(120, 230, size=3)
    return int(rgb[0]), int(rgb[1]), int(rgb[2])


@dataclass
class LayoutRenderer:
    """Draws one filled, outlined and labelled box per region.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        background: Colour of space not covered by any region
        outline: Colour of region borders
        label_color: Colour of region names
        gap: Inset applied to each box so adjacent regions stay distinct
    """

    width: int = 1280
    height: int = 800
    background: Color = (245, 245, 245)
    outline: Color = (40, 40, 40)
    label_color: Color = (20, 20, 20)
    gap: int = 2

    def render(self, rects: Mapping[str, Rect]) -> Image.Image:
        """Render regions to an RGB image.

        Args:
            rects: Region name to rectangle, in the image's pixel space

        Returns:
            PIL Image in RGB mode
        """
        img = Image.new("RGB", (self.width, self.height), self.background)
        draw = ImageDraw.Draw(img)

        for name, rect in rects.items():
            if rect.width <= 0 or rect.height <= 0:
                continue

            x0 = rect.left + self.gap
            y0 = rect.top + self.gap
            x1 = max(rect.right - self.gap - 1, x0)
            y1 = max(rect.bottom - self.gap - 1, y0)
            draw.rectangle([x0, y0, x1, y1], fill=region_color(name), outline=self.outline)

            # Label in the top-left corner, if it fits
            bbox = draw.textbbox((0, 0), name)
            if bbox[2] + 8 <= x1 - x0 and bbox[3] + 8 <= y1 - y0:
                draw.text((x0 + 4, y0 + 4), name, fill=self.label_color)

        return img

    def render_array(self, rects: Mapping[str, Rect]) -> NDArray[np.uint8]:
        """Render regions as a HxWx3 uint8 array."""
        return np.array(self.render(rects))


def render_layout(
    rects: Mapping[str, Rect],
    width: int,
    height: int,
) -> Image.Image:
    """Render regions with the default style."""
    return LayoutRenderer(width=width, height=height).render(rects)
