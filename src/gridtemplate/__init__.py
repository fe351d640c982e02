"""Gridtemplate - named-region grid layouts from ASCII-art templates."""

from .core import (
    CompiledTemplate,
    Content,
    EmptyTemplateError,
    Fixed,
    Flex,
    GridCell,
    InconsistentColumnCountError,
    NonRectangularRegionError,
    TemplateError,
    TrackSize,
)
from .layout import (
    AdaptiveLayout,
    Breakpoints,
    GridTemplate,
    LayoutLoader,
    LayoutSize,
    Rect,
    TemplateCompiler,
    compile_template,
    place_cells,
    resolve,
)

__version__ = "0.1.0"

__all__ = [
    "CompiledTemplate",
    "Content",
    "EmptyTemplateError",
    "Fixed",
    "Flex",
    "GridCell",
    "InconsistentColumnCountError",
    "NonRectangularRegionError",
    "TemplateError",
    "TrackSize",
    "AdaptiveLayout",
    "Breakpoints",
    "GridTemplate",
    "LayoutLoader",
    "LayoutSize",
    "Rect",
    "TemplateCompiler",
    "compile_template",
    "place_cells",
    "resolve",
]
