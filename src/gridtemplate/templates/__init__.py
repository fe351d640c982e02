"""Pre-built layouts for gridtemplate."""

from .dashboard import create_dashboard_layout
from .holy_grail import create_holy_grail_layout

__all__ = ["create_dashboard_layout", "create_holy_grail_layout"]
