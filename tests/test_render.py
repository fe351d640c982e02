"""Tests for layout rendering and the command line tool."""

import logging

import numpy as np
import pytest
from PIL import Image

from gridtemplate.layout import Rect
from gridtemplate.main import LAYOUTS, main, parse_args
from gridtemplate.render import LayoutRenderer, region_color, render_layout


def test_region_colors_are_stable():
    assert region_color("header") == region_color("header")
    assert all(120 <= channel < 230 for channel in region_color("main"))


def test_render_layout_fills_regions():
    rects = {
        "left": Rect(0, 0, 50, 100),
        "right": Rect(50, 0, 50, 100),
    }
    img = render_layout(rects, 100, 100)

    assert img.size == (100, 100)
    assert img.mode == "RGB"
    assert img.getpixel((25, 80)) == region_color("left")
    assert img.getpixel((75, 80)) == region_color("right")


def test_render_array_shape_and_background():
    renderer = LayoutRenderer(width=64, height=32, background=(0, 0, 0))
    arr = renderer.render_array({"box": Rect(0, 0, 32, 32), "empty": Rect(32, 0, 0, 32)})

    assert arr.shape == (32, 64, 3)
    assert arr.dtype == np.uint8
    assert tuple(arr[16, 48]) == (0, 0, 0)
    assert tuple(arr[25, 16]) == region_color("box")


def test_parse_args_defaults():
    args = parse_args([])
    assert args.layout == "holy_grail"
    assert args.size == (1280, 800)
    assert args.render is None


def test_parse_args_rejects_bad_size():
    with pytest.raises(SystemExit):
        parse_args(["--size", "wide"])


@pytest.mark.parametrize("layout_name", list(LAYOUTS))
def test_main_prints_regions(layout_name, capsys):
    assert main(["-l", layout_name, "--size", "1600x900"]) == 0

    out = capsys.readouterr().out
    assert f"Layout '{layout_name}' at 1600x900 (large)" in out
    assert "- header" in out or "- toolbar" in out


def test_main_renders_to_file(tmp_path):
    output_path = tmp_path / "layout.png"
    assert main(["--size", "400x300", "-r", str(output_path)]) == 0

    assert output_path.exists()
    loaded = Image.open(output_path)
    assert loaded.size == (400, 300)


def test_main_reports_invalid_definition(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("layouts:\n  compact:\n    template: ['a b a']\n")

    assert main(["-f", str(path)]) == 1


@pytest.mark.parametrize(
    "text",
    [
        "layouts: [compact]\n",
        "breakpoints: [1, 2]\nlayouts:\n  compact:\n    template: ['a']\n",
        "layouts:\n  compact:\n    template: ['a']\n    columns: 240\n",
        "layouts:\n  compact:\n    template: [1]\n",
        "layouts: {compact: [\n",
    ],
)
def test_main_reports_malformed_yaml(tmp_path, capsys, text):
    path = tmp_path / "malformed.yaml"
    path.write_text(text)

    assert main(["-f", str(path)]) == 1
    captured = capsys.readouterr()
    assert "Could not load layout" in captured.err
    assert captured.out == ""


def test_main_keeps_logs_off_stdout(tmp_path, capsys):
    output_path = tmp_path / "layout.png"
    assert main(["--size", "400x300", "-r", str(output_path)]) == 0

    captured = capsys.readouterr()
    assert "Saved render to" in captured.err
    assert "Saved render to" not in captured.out
    assert captured.out.startswith("Layout 'holy_grail' at 400x300 (compact)")


def test_main_writes_log_file(tmp_path):
    log_path = tmp_path / "gridtemplate.log"
    assert main(["-v", "--log-file", str(log_path), "--size", "400x300", "-r", str(tmp_path / "out.png")]) == 0

    logging.getLogger("gridtemplate").handlers[-1].flush()
    text = log_path.read_text(encoding="utf-8")
    assert "Rendering to" in text
    assert "DEBUG" in text


def test_main_only_places_selected_regions(capsys):
    assert main(["-l", "holy_grail", "--size", "1600x900", "--only", "main, footer"]) == 0

    out = capsys.readouterr().out
    assert "- main:" in out
    assert "- footer:" in out
    assert "- header:" not in out
