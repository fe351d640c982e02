"""Template compilation, track sizing and region placement."""

from .adaptive import AdaptiveLayout, GridTemplate
from .breakpoints import Breakpoints, LayoutSize
from .compiler import TemplateCompiler, compile_template
from .loader import LayoutLoader
from .placement import Rect, layout_template, place_cells
from .solver import resolve

__all__ = [
    "AdaptiveLayout",
    "GridTemplate",
    "Breakpoints",
    "LayoutSize",
    "TemplateCompiler",
    "compile_template",
    "LayoutLoader",
    "Rect",
    "layout_template",
    "place_cells",
    "resolve",
]
