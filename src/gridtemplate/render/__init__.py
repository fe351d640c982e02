"""Image rendering of placed layouts."""

from .image import LayoutRenderer, region_color, render_layout

__all__ = ["LayoutRenderer", "region_color", "render_layout"]
