"""Core value types for grid templates."""

from .cell import CompiledTemplate, GridCell
from .errors import (
    EmptyTemplateError,
    InconsistentColumnCountError,
    NonRectangularRegionError,
    TemplateError,
)
from .track import Content, Fixed, Flex, TrackSize, parse_track_size, parse_track_sizes

__all__ = [
    "CompiledTemplate",
    "GridCell",
    "TemplateError",
    "EmptyTemplateError",
    "InconsistentColumnCountError",
    "NonRectangularRegionError",
    "Content",
    "Fixed",
    "Flex",
    "TrackSize",
    "parse_track_size",
    "parse_track_sizes",
]
