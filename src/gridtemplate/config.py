"""
Configuration & Path Management
===============================
Central registry for file paths and global defaults.

Exports:
    ASSETS_PATH (Path): Directory holding the bundled layout definitions.
    LAYOUTS_PATH (Path): Directory of pre-built layout YAML files.
    PLACEHOLDER (str): Template token marking an unoccupied grid position.
    DEFAULT_BREAKPOINTS (dict): Width thresholds of the size classes.
    DEFAULT_RESOLUTION (tuple): Width and height used by the CLI.
"""
from pathlib import Path


def get_resource_path(relative_path: str) -> Path:
    """Resolve a path relative to the project root."""
    # config.py is in src/gridtemplate/
    project_root = Path(__file__).parent.parent.parent
    return project_root / relative_path


# Global Constants
ASSETS_PATH: Path = get_resource_path("assets")
LAYOUTS_PATH: Path = ASSETS_PATH / "layouts"

PLACEHOLDER: str = "."

# Upper (exclusive) width bounds, material design values
DEFAULT_BREAKPOINTS: dict[str, float] = {
    "compact": 600.0,
    "medium": 840.0,
    "expanded": 1200.0,
}

DEFAULT_RESOLUTION: tuple[int, int] = (1280, 800)
