"""YAML loader for adaptive grid layout definitions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ..core.track import TrackSize, parse_track_sizes
from .adaptive import AdaptiveLayout, GridTemplate
from .breakpoints import Breakpoints, LayoutSize

logger = logging.getLogger(__name__)


class LayoutLoader:
    """Loads adaptive layout definitions from YAML files.

    YAML format:
        name: dashboard
        breakpoints:            # optional, material design defaults
          compact: 600
          medium: 840
          expanded: 1200
        layouts:
          compact:
            template:
              - "header"
              - "main"
            columns: [1fr]      # optional, one entry per column
            rows: [64, 1fr]     # optional, one entry per row
          large:
            template:
              - "header header"
              - "nav    main"
            columns: [240px, 1fr]
            rows: [64, 1fr]

    Track sizes are written as a number or "<n>px" (fixed), "fr" or "<n>fr"
    (flexible), or "content"/"auto".
    """

    def __init__(self) -> None:
        self._cache: dict[Path, AdaptiveLayout] = {}

    def load(self, path: str | Path) -> AdaptiveLayout:
        """Load a layout definition from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            AdaptiveLayout with one compiled template per size class

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the definition is malformed
        """
        path = Path(path).resolve()
        if path in self._cache:
            return self._cache[path]

        logger.debug("Loading layout from %s", path)
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        layout = self._build_layout(data, default_name=path.stem)
        self._cache[path] = layout
        return layout

    def load_string(self, yaml_string: str) -> AdaptiveLayout:
        """Load a layout definition from a YAML string.

        Args:
            yaml_string: YAML content as a string

        Returns:
            AdaptiveLayout with one compiled template per size class
        """
        data = yaml.safe_load(yaml_string)
        return self._build_layout(data)

    def clear_cache(self) -> None:
        """Clear the loaded layout cache."""
        self._cache.clear()

    def _build_layout(self, data: Any, default_name: str = "layout") -> AdaptiveLayout:
        """Build an adaptive layout from parsed YAML data."""
        if not isinstance(data, dict):
            raise ValueError("Layout definition must be a mapping")

        name = data.get("name", default_name)
        breakpoints = self._parse_breakpoints(data.get("breakpoints"))

        layouts_data = data.get("layouts")
        if not layouts_data:
            raise ValueError(f"Layout '{name}' defines no layouts")
        if not isinstance(layouts_data, dict):
            raise ValueError(f"'layouts' in layout '{name}' must be a mapping of size classes")

        templates: dict[LayoutSize, GridTemplate] = {}
        for size_name, layout_def in layouts_data.items():
            try:
                size = LayoutSize(size_name)
            except ValueError:
                raise ValueError(
                    f"Unknown size class '{size_name}' in layout '{name}'"
                ) from None
            templates[size] = self._parse_template(size, layout_def)

        logger.debug(
            "Loaded layout '%s' with size classes: %s",
            name, ", ".join(s.value for s in templates),
        )
        return AdaptiveLayout(templates, breakpoints=breakpoints, name=name)

    def _parse_breakpoints(self, data: Any) -> Breakpoints:
        """Parse breakpoint thresholds, falling back to the defaults."""
        if data is None:
            return Breakpoints.material_design()
        if not isinstance(data, dict):
            raise ValueError("'breakpoints' must be a mapping of size class to width")

        unknown = set(data) - {"compact", "medium", "expanded"}
        if unknown:
            raise ValueError(
                f"Unknown breakpoints: {', '.join(sorted(str(key) for key in unknown))}"
            )

        thresholds = {}
        for key, value in data.items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Breakpoint '{key}' must be a number, got {value!r}")
            thresholds[key] = float(value)
        return Breakpoints(**thresholds)

    def _parse_template(self, size: LayoutSize, data: Any) -> GridTemplate:
        """Parse a single size class definition."""
        if not isinstance(data, dict) or "template" not in data:
            raise ValueError(f"Layout for '{size.value}' must specify 'template'")

        rows = data["template"]
        if isinstance(rows, str):
            # Block scalar: one template row per line
            rows = [line for line in rows.splitlines() if line.strip()]
        if not isinstance(rows, list) or not all(isinstance(row, str) for row in rows):
            raise ValueError(
                f"'template' for '{size.value}' must be a list of row strings"
            )

        return GridTemplate(
            size=size,
            template=tuple(rows),
            column_sizes=self._parse_tracks(size, "columns", data.get("columns")),
            row_sizes=self._parse_tracks(size, "rows", data.get("rows")),
        )

    def _parse_tracks(self, size: LayoutSize, key: str, values: Any) -> tuple[TrackSize, ...]:
        """Parse the 'columns' or 'rows' list of a size class."""
        if values is not None and not isinstance(values, list):
            raise ValueError(
                f"'{key}' for '{size.value}' must be a list of track sizes, got {values!r}"
            )
        return parse_track_sizes(values)
