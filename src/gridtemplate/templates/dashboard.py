"""Dashboard layout."""

from ..config import LAYOUTS_PATH
from ..layout import AdaptiveLayout, LayoutLoader


def create_dashboard_layout() -> AdaptiveLayout:
    """Create a dashboard with a sidebar, charts, a table and alerts.

    Uses its own breakpoints and defines a template for every size class.
    """
    loader = LayoutLoader()
    return loader.load(LAYOUTS_PATH / "dashboard.yaml")
