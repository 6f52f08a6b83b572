"""Tests for core data structures."""

import pytest

from term_paint.core.canvas import Canvas
from term_paint.core.cell import Cell
from term_paint.core.constants import DEFAULT_BRUSHES
from term_paint.core.state import AppState, Cursor
from term_paint.core.tool import ToolState


class TestCell:
    """Tests for Cell."""

    def test_default_cell(self) -> None:
        cell = Cell()
        assert cell.char == ' '
        assert cell.color == 7
        assert cell.is_empty()

    def test_code(self) -> None:
        assert Cell('#', 2).code == 35
        assert Cell.from_code(64, 3) == Cell('@', 3)

    def test_accepts_full_byte_range(self) -> None:
        assert Cell.from_code(0, 0).code == 0
        assert Cell.from_code(255, 7).code == 255

    @pytest.mark.parametrize("color", [-1, 8, 100])
    def test_rejects_invalid_color(self, color: int) -> None:
        with pytest.raises(ValueError):
            Cell('#', color)

    @pytest.mark.parametrize("char", ["", "ab", "Ā", "█"])
    def test_rejects_invalid_char(self, char: str) -> None:
        with pytest.raises(ValueError):
            Cell(char, 1)

    def test_cells_are_immutable(self) -> None:
        cell = Cell('#', 1)
        with pytest.raises(AttributeError):
            cell.color = 2  # type: ignore[misc]


class TestCanvas:
    """Tests for Canvas."""

    def test_new_canvas_is_blank_white(self) -> None:
        canvas = Canvas(4, 3)
        assert canvas.size == (4, 3)
        assert all(cell == Cell(' ', 7) for _, _, cell in canvas.cells())

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (1001, 5), (5, 1001), (-3, 2)])
    def test_rejects_bad_size(self, width: int, height: int) -> None:
        with pytest.raises(ValueError):
            Canvas(width, height)

    def test_limits_are_inclusive(self) -> None:
        assert Canvas(1, 1).size == (1, 1)
        assert Canvas(1000, 1).size == (1000, 1)

    def test_get_set_cell(self) -> None:
        canvas = Canvas(5, 5)
        canvas.set(4, 3, Cell('A', 1))
        assert canvas.get(4, 3) == Cell('A', 1)
        assert canvas.get(3, 4) == Cell()

    def test_canvas_indexing(self) -> None:
        canvas = Canvas(5, 5)
        canvas[1, 2] = Cell('B', 4)
        assert canvas[1, 2] == Cell('B', 4)

    def test_row_major_layout(self) -> None:
        canvas = Canvas(3, 2)
        canvas.set(2, 0, Cell('a', 1))
        canvas.set(0, 1, Cell('b', 2))
        rows = list(canvas.rows())
        assert [c.char for c in rows[0]] == [' ', ' ', 'a']
        assert [c.char for c in rows[1]] == ['b', ' ', ' ']

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (5, 0), (0, 3), (100, 100)])
    def test_out_of_bounds_is_noop(self, x: int, y: int) -> None:
        canvas = Canvas(5, 3)
        before = Canvas.from_cells(5, 3, [cell for _, _, cell in canvas.cells()])
        canvas.set(x, y, Cell('#', 1))
        assert canvas.get(x, y) is None
        assert canvas == before

    def test_fill(self) -> None:
        canvas = Canvas(3, 3)
        canvas.set(1, 1, Cell('#', 1))
        canvas.fill(4)
        assert all(cell == Cell(' ', 4) for _, _, cell in canvas.cells())

    def test_overlay_smaller_source(self) -> None:
        canvas = Canvas(5, 5, fill=Cell('.', 1))
        source = Canvas(3, 2, fill=Cell('#', 2))
        assert canvas.overlay(source) == (3, 2)
        for x, y, cell in canvas.cells():
            if x < 3 and y < 2:
                assert cell == Cell('#', 2)
            else:
                assert cell == Cell('.', 1)

    def test_overlay_larger_source_is_clipped(self) -> None:
        canvas = Canvas(2, 2)
        source = Canvas(4, 3, fill=Cell('x', 3))
        source.set(1, 1, Cell('y', 5))
        assert canvas.overlay(source) == (2, 2)
        assert canvas.size == (2, 2)
        assert canvas.get(1, 1) == Cell('y', 5)
        assert canvas.get(0, 0) == Cell('x', 3)

    def test_from_cells_checks_length(self) -> None:
        with pytest.raises(ValueError):
            Canvas.from_cells(2, 2, [Cell()] * 3)


class TestToolState:
    """Tests for ToolState transformations."""

    def test_defaults(self) -> None:
        tool = ToolState()
        assert tool.pen_down is False
        assert tool.brush_index == 0
        assert tool.color == 7
        assert tool.brushes == DEFAULT_BRUSHES
        assert tool.brush_char == '#'
        assert tool.color_name == "WHITE"

    def test_operations_return_new_state(self) -> None:
        tool = ToolState()
        toggled = tool.toggle_pen()
        assert toggled.pen_down is True
        assert tool.pen_down is False

    def test_cycle_brush_wraps(self) -> None:
        tool = ToolState()
        for _ in range(10):
            tool = tool.cycle_brush()
        assert tool.brush_index == 0

    def test_eraser_blanks_slot_zero(self) -> None:
        tool = ToolState(brush_index=4).eraser()
        assert tool.brush_index == 0
        assert tool.brush_char == ' '
        assert tool.erasing
        assert tool.brushes[1:] == DEFAULT_BRUSHES[1:]

    def test_cycle_brush_after_eraser_restores_defaults(self) -> None:
        tool = ToolState().eraser().cycle_brush()
        assert tool.brushes == DEFAULT_BRUSHES
        assert tool.brush_index == 1
        assert tool.brush_char == '*'

    def test_repeated_eraser_does_not_compound(self) -> None:
        tool = ToolState().eraser().eraser()
        assert tool.brushes == (' ',) + DEFAULT_BRUSHES[1:]

    def test_cycle_color_wraps(self) -> None:
        assert ToolState(color=7).cycle_color().color == 0
        assert ToolState(color=3).cycle_color().color == 4

    @pytest.mark.parametrize("color", range(8))
    def test_with_color(self, color: int) -> None:
        assert ToolState().with_color(color).color == color

    def test_with_color_rejects_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            ToolState().with_color(8)


class TestCursor:
    """Tests for Cursor and AppState."""

    def test_centered(self) -> None:
        assert Cursor.centered(Canvas(5, 3)) == Cursor(2, 1)
        assert Cursor.centered(Canvas(20, 7)) == Cursor(10, 3)
        assert Cursor.centered(Canvas(1, 1)) == Cursor(0, 0)

    def test_moved_clamps_each_axis(self) -> None:
        assert Cursor(0, 0).moved(-1, -1, 5, 3) == Cursor(0, 0)
        assert Cursor(4, 2).moved(1, 1, 5, 3) == Cursor(4, 2)
        assert Cursor(4, 1).moved(1, 1, 5, 3) == Cursor(4, 2)

    def test_app_state_for_canvas(self) -> None:
        state = AppState.for_canvas(Canvas(9, 9))
        assert state.cursor == Cursor(4, 4)
        assert state.tool == ToolState()
        assert state.running is True
