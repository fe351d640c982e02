"""Size classes selected from the available width."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..config import DEFAULT_BREAKPOINTS


class LayoutSize(Enum):
    """Layout size classes, smallest first."""

    COMPACT = "compact"    # e.g. phone portrait
    MEDIUM = "medium"      # e.g. phone landscape, small tablet
    EXPANDED = "expanded"  # e.g. large tablet, small desktop
    LARGE = "large"        # e.g. desktop


@dataclass(frozen=True)
class Breakpoints:
    """Width thresholds separating the size classes.

    Each threshold is the exclusive upper bound of its class: with
    compact=600, widths up to 599.99 are COMPACT. Anything at or above
    `expanded` is LARGE.
    """

    compact: float = DEFAULT_BREAKPOINTS["compact"]
    medium: float = DEFAULT_BREAKPOINTS["medium"]
    expanded: float = DEFAULT_BREAKPOINTS["expanded"]

    def __post_init__(self) -> None:
        if not self.compact <= self.medium <= self.expanded:
            raise ValueError(
                f"Breakpoints must be ascending, got {self.compact}, "
                f"{self.medium}, {self.expanded}"
            )

    def from_width(self, width: float) -> LayoutSize:
        """Classify a width."""
        if width < self.compact:
            return LayoutSize.COMPACT
        if width < self.medium:
            return LayoutSize.MEDIUM
        if width < self.expanded:
            return LayoutSize.EXPANDED
        return LayoutSize.LARGE

    @classmethod
    def material_design(cls) -> Breakpoints:
        """Breakpoints following the Material Design guidelines."""
        return cls(compact=600.0, medium=840.0, expanded=1200.0)
