"""Tests for the template compiler."""

import pytest

from gridtemplate.core import (
    CompiledTemplate,
    EmptyTemplateError,
    GridCell,
    InconsistentColumnCountError,
    NonRectangularRegionError,
    TemplateError,
)
from gridtemplate.layout import TemplateCompiler, compile_template


VALID_TEMPLATES = {
    "stacked": ["header header", "main main", "footer footer"],
    "diagonal": ["a .", ". b"],
    "sidebar": [
        "header header header",
        "sidebar main main",
        "sidebar footer footer",
    ],
    "single": ["only"],
    "irregular_spacing": ["  a    a  b ", "a a\tb"],
    "block": ["x x y", "x x y", "z z z"],
    "placeholder_rows": ["a b", ". .", "c c"],
}


def test_compiles_stacked_template():
    compiled = compile_template(["header header", "main main", "footer footer"])

    assert compiled.num_rows == 3
    assert compiled.num_columns == 2
    assert compiled.cells == frozenset({
        GridCell("header", row=0, column=0, row_span=1, column_span=2),
        GridCell("main", row=1, column=0, row_span=1, column_span=2),
        GridCell("footer", row=2, column=0, row_span=1, column_span=2),
    })


def test_placeholders_are_not_regions():
    compiled = compile_template(["a .", ". b"])

    assert compiled.num_rows == 2
    assert compiled.num_columns == 2
    assert compiled.names == {"a", "b"}
    assert compiled.cell("a") == GridCell("a", 0, 0, 1, 1)
    assert compiled.cell("b") == GridCell("b", 1, 1, 1, 1)
    assert "." not in compiled


def test_regions_spanning_rows_and_columns():
    compiled = compile_template(VALID_TEMPLATES["sidebar"])

    assert len(compiled) == 4
    assert compiled.cell("header") == GridCell("header", 0, 0, 1, 3)
    assert compiled.cell("sidebar") == GridCell("sidebar", 1, 0, 2, 1)
    assert compiled.cell("main") == GridCell("main", 1, 1, 1, 2)
    assert compiled.cell("footer") == GridCell("footer", 2, 1, 1, 2)


def test_empty_template():
    compiled = compile_template([])

    assert compiled == CompiledTemplate(0, 0, frozenset())
    assert compiled.is_empty


def test_whitespace_runs_separate_tokens():
    compiled = compile_template(VALID_TEMPLATES["irregular_spacing"])

    assert compiled.num_columns == 3
    assert compiled.cell("a") == GridCell("a", 0, 0, 2, 2)
    assert compiled.cell("b") == GridCell("b", 0, 2, 2, 1)


def test_missing_region_lookup_raises_key_error():
    compiled = compile_template(["a"])
    with pytest.raises(KeyError):
        compiled.cell("b")


@pytest.mark.parametrize("rows", [[""], ["   "], [". ."], [". .", "a b"]])
def test_first_row_without_regions_is_rejected(rows):
    with pytest.raises(EmptyTemplateError):
        compile_template(rows)


def test_inconsistent_column_count():
    with pytest.raises(InconsistentColumnCountError) as excinfo:
        compile_template(["a a", "b"])

    err = excinfo.value
    assert (err.row, err.actual, err.expected) == (1, 1, 2)
    assert "same number of columns" in str(err)
    assert "Row 1 has 1 columns, expected 2" in str(err)


def test_blank_later_row_is_inconsistent():
    with pytest.raises(InconsistentColumnCountError) as excinfo:
        compile_template(["a b", "a b", ""])
    assert excinfo.value.row == 2
    assert excinfo.value.actual == 0


@pytest.mark.parametrize(
    "rows,name,position,found",
    [
        (["a a b", "a . b"], "a", (1, 1), "."),
        (["a b", "a a"], "a", (0, 1), "b"),
        (["a b a"], "a", (0, 1), "b"),
        (["a", "b", "a"], "a", (1, 0), "b"),
        (["b a", "a a"], "a", (0, 0), "b"),
    ],
)
def test_non_rectangular_regions(rows, name, position, found):
    with pytest.raises(NonRectangularRegionError) as excinfo:
        compile_template(rows)

    err = excinfo.value
    assert err.name == name
    assert (err.row, err.column) == position
    assert err.found == found
    assert f'cells for "{name}" must form a contiguous rectangular block' in str(err)


def test_errors_share_a_value_error_base():
    for rows in (["."], ["a a", "b"], ["a b a"]):
        with pytest.raises(ValueError):
            compile_template(rows)
        with pytest.raises(TemplateError):
            compile_template(rows)


@pytest.mark.parametrize("name,rows", list(VALID_TEMPLATES.items()))
def test_cells_cover_every_named_position(name, rows):
    """Each named position belongs to exactly one cell inside the grid."""
    compiled = compile_template(rows)
    tokens = [row.split() for row in rows]

    named = {tok for row in tokens for tok in row if tok != "."}
    assert compiled.names == named, f"Template '{name}' lost or invented regions"

    occupied: dict[tuple[int, int], str] = {}
    for cell in compiled.cells:
        assert cell.row_span >= 1 and cell.column_span >= 1
        assert 0 <= cell.row and cell.last_row < compiled.num_rows
        assert 0 <= cell.column and cell.last_column < compiled.num_columns
        for pos in cell.iter_positions():
            assert pos not in occupied, f"{cell.name} overlaps {occupied.get(pos)}"
            occupied[pos] = cell.name

    for r, row in enumerate(tokens):
        assert len(row) == compiled.num_columns
        for c, tok in enumerate(row):
            if tok == ".":
                assert (r, c) not in occupied
            else:
                assert occupied[(r, c)] == tok


@pytest.mark.parametrize("rows", list(VALID_TEMPLATES.values()))
def test_compilation_is_idempotent(rows):
    assert compile_template(rows) == compile_template(list(rows))


def test_compiler_cache_returns_same_result():
    compiler = TemplateCompiler()
    rows = ["a b", "c c"]

    first = compiler.compile(rows)
    second = compiler.compile(tuple(rows))

    assert first is second
    assert len(compiler) == 1

    compiler.clear_cache()
    assert len(compiler) == 0
    assert compiler.compile(rows) == first


def test_compiler_cache_does_not_store_failures():
    compiler = TemplateCompiler()
    with pytest.raises(NonRectangularRegionError):
        compiler.compile(["a b a"])
    assert len(compiler) == 0
