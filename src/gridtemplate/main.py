"""Main entry point for gridtemplate."""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from .config import DEFAULT_RESOLUTION
from .core.errors import TemplateError
from .layout import AdaptiveLayout, LayoutLoader
from .logging_config import setup_logging
from .render import render_layout
from .templates import create_dashboard_layout, create_holy_grail_layout

logger = logging.getLogger("gridtemplate")


# Layout registry - maps layout names to factory functions
LAYOUTS = {
    "holy_grail": create_holy_grail_layout,
    "dashboard": create_dashboard_layout,
}


def _parse_size(text: str) -> tuple[int, int]:
    """Parse a WxH size string."""
    try:
        width, height = (int(part) for part in text.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid size '{text}', expected WxH") from None
    if width < 0 or height < 0:
        raise argparse.ArgumentTypeError(f"Invalid size '{text}', must not be negative")
    return width, height


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Gridtemplate - ASCII-art grid layouts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-l", "--layout",
        choices=list(LAYOUTS.keys()),
        default="holy_grail",
        help="Pre-built layout to use (default: holy_grail)",
    )
    source.add_argument(
        "-f", "--file",
        metavar="PATH",
        help="Load the layout from a YAML definition instead",
    )
    parser.add_argument(
        "--size",
        metavar="WxH",
        type=_parse_size,
        default=DEFAULT_RESOLUTION,
        help="Container size (default: %dx%d)" % DEFAULT_RESOLUTION,
    )
    parser.add_argument(
        "-r", "--render",
        metavar="PATH",
        help="Render the placed regions to an image file",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Also write log records to this file",
    )
    parser.add_argument(
        "--only",
        metavar="NAMES",
        help="Comma-separated region names to place (default: all regions)",
    )
    return parser.parse_args(argv)


def _load_layout(args: argparse.Namespace) -> AdaptiveLayout:
    if args.file:
        return LayoutLoader().load(args.file)
    return LAYOUTS[args.layout]()


def main(argv: list[str] | None = None) -> int:
    """Run the gridtemplate command line tool."""
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    try:
        layout = _load_layout(args)
    except (OSError, yaml.YAMLError, TemplateError, ValueError) as e:
        logger.error("Could not load layout: %s", e)
        return 1

    width, height = args.size
    size = layout.size_for(width)
    names = [n.strip() for n in args.only.split(",") if n.strip()] if args.only else None
    rects = layout.place(width, height, names=names)

    print(f"Layout '{layout.name}' at {width}x{height} ({size.value})")
    print("=" * 40)
    for name, rect in rects.items():
        print(
            f"- {name}: x={rect.left:g} y={rect.top:g} "
            f"w={rect.width:g} h={rect.height:g}"
        )

    if args.render:
        output_path = Path(args.render)
        logger.info("Rendering to %s (%dx%d)", output_path, width, height)
        img = render_layout(rects, width, height)
        img.save(str(output_path))
        logger.info("Saved render to %s", output_path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
