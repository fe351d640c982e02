"""Holy grail layout."""

from ..config import LAYOUTS_PATH
from ..layout import AdaptiveLayout, LayoutLoader


def create_holy_grail_layout() -> AdaptiveLayout:
    """Create the classic header / nav / main / aside / footer layout.

    Returns:
        An AdaptiveLayout with compact, medium and large templates.
    """
    loader = LayoutLoader()
    return loader.load(LAYOUTS_PATH / "holy_grail.yaml")
