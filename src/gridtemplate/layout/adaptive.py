"""Grid templates selected per size class."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Collection, Mapping, Sequence

from ..core.cell import CompiledTemplate
from ..core.track import TrackSize, parse_track_sizes
from .breakpoints import Breakpoints, LayoutSize
from .compiler import compile_template
from .placement import Rect, layout_template

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridTemplate:
    """A grid template for one size class.

    The template is compiled when the instance is created, so malformed rows
    raise immediately and `compiled` is always available.

    Attributes:
        size: Size class this template applies to
        template: Template rows, top to bottom
        column_sizes: Size per column (missing entries size to content)
        row_sizes: Size per row (missing entries size to content)
        compiled: The validated cell structure
    """

    size: LayoutSize
    template: tuple[str, ...]
    column_sizes: tuple[TrackSize, ...] = ()
    row_sizes: tuple[TrackSize, ...] = ()
    compiled: CompiledTemplate = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Normalise lists (e.g. from YAML) so instances stay hashable
        object.__setattr__(self, "template", tuple(self.template))
        object.__setattr__(self, "column_sizes", parse_track_sizes(self.column_sizes))
        object.__setattr__(self, "row_sizes", parse_track_sizes(self.row_sizes))
        object.__setattr__(self, "compiled", compile_template(self.template))

    @property
    def num_rows(self) -> int:
        return self.compiled.num_rows

    @property
    def num_columns(self) -> int:
        return self.compiled.num_columns

    def place(
        self,
        width: float,
        height: float,
        names: Collection[str] | None = None,
    ) -> dict[str, Rect]:
        """Compute region rectangles for the given container size.

        When `names` is given, only those regions are placed.
        """
        return layout_template(
            self.compiled, self.column_sizes, self.row_sizes, width, height, names
        )


class AdaptiveLayout:
    """Chooses a grid template by width and places its regions.

    Example:
        layout = AdaptiveLayout({
            LayoutSize.COMPACT: GridTemplate(LayoutSize.COMPACT, ["header", "main"]),
            LayoutSize.LARGE: GridTemplate(
                LayoutSize.LARGE,
                ["header header", "nav main"],
                column_sizes=[Fixed(240), Flex()],
            ),
        })
        rects = layout.place(1440, 900)
    """

    def __init__(
        self,
        templates: Mapping[LayoutSize, GridTemplate] | Sequence[GridTemplate],
        breakpoints: Breakpoints | None = None,
        name: str = "layout",
    ) -> None:
        if isinstance(templates, Mapping):
            self.templates = dict(templates)
        else:
            self.templates = {t.size: t for t in templates}
        self.breakpoints = breakpoints or Breakpoints.material_design()
        self.name = name

    def size_for(self, width: float) -> LayoutSize:
        return self.breakpoints.from_width(width)

    def template_for(self, width: float) -> GridTemplate | None:
        """Return the template for a width's size class, if one is defined."""
        return self.templates.get(self.size_for(width))

    def place(
        self,
        width: float,
        height: float,
        names: Collection[str] | None = None,
    ) -> dict[str, Rect]:
        """Compute region rectangles for a container of the given size.

        Returns an empty mapping when the container has no area or no
        template is defined for its size class. When `names` is given (e.g.
        the keys of a region -> content mapping), regions without content
        are left out.
        """
        if width <= 0 or height <= 0:
            return {}

        template = self.template_for(width)
        if template is None:
            logger.warning(
                "No template in '%s' for size class %s (width %g)",
                self.name, self.size_for(width).value, width,
            )
            return {}

        return template.place(width, height, names)
