"""Tests for the dispatcher and the assembled editor."""

import io

import pytest

from term_paint.cli.core.input import Key, KeyEvent
from term_paint.cli.dispatcher import Dispatcher
from term_paint.cli.studio import PaintApp, canvas_size_for
from term_paint.config import PaintConfig
from term_paint.core.canvas import Canvas
from term_paint.core.cell import Cell
from term_paint.core.state import AppState, Cursor
from term_paint.edit.engine import PaintEngine
from term_paint.errors import TerminalTooSmallError
from term_paint.io import load, save
from term_paint.io.result import LoadStatus, SaveStatus

from conftest import RecordingSurface


def char(c: str) -> KeyEvent:
    return KeyEvent(char=c, raw=c)


def key(k: Key) -> KeyEvent:
    return KeyEvent(key=k)


@pytest.fixture
def dispatcher(state, engine, renderer, tmp_path) -> Dispatcher:
    engine.on_cell_changed(renderer.render_cell)
    engine.on_canvas_changed(renderer.render_all)
    return Dispatcher(state, engine, renderer, save_path=tmp_path / "art.txt")


@pytest.fixture
def app(tmp_path) -> PaintApp:
    config = PaintConfig(save_path=tmp_path / "art.txt")
    app = PaintApp(RecordingSurface(20, 10), config)
    app.start()
    return app


class TestDispatcher:
    """Event to operation routing."""

    def test_unbound_key_does_nothing(self, dispatcher: Dispatcher, state: AppState) -> None:
        before = list(state.canvas.cells())
        assert dispatcher.dispatch(char("C")) is None
        assert list(state.canvas.cells()) == before
        assert state.running

    def test_paint_key(self, dispatcher: Dispatcher, state: AppState) -> None:
        dispatcher.dispatch(char("2"))
        dispatcher.dispatch(char(" "))
        assert state.canvas.get(2, 1) == Cell('#', 2)

    def test_pen_mode_paints_while_moving(self, dispatcher: Dispatcher, state: AppState) -> None:
        dispatcher.dispatch(key(Key.ENTER))
        dispatcher.dispatch(key(Key.RIGHT))
        dispatcher.dispatch(key(Key.RIGHT))
        dispatcher.dispatch(key(Key.RIGHT))
        assert state.cursor == Cursor(4, 1)
        assert [state.canvas.get(x, 1).char for x in range(5)] == [' ', ' ', ' ', '#', '#']

    def test_tool_keys(self, dispatcher: Dispatcher, state: AppState) -> None:
        dispatcher.dispatch(char("b"))
        assert state.tool.brush_char == '*'
        dispatcher.dispatch(char("E"))
        assert state.tool.erasing
        dispatcher.dispatch(char("c"))
        assert state.tool.color == 0

    def test_clear_uses_current_color(self, dispatcher: Dispatcher, state: AppState) -> None:
        dispatcher.dispatch(char(" "))
        dispatcher.dispatch(char("4"))
        dispatcher.dispatch(char("x"))
        assert all(cell == Cell(' ', 4) for _, _, cell in state.canvas.cells())

    @pytest.mark.parametrize("event", [char("q"), char("Q"), key(Key.ESCAPE)])
    def test_quit_aliases(self, dispatcher: Dispatcher, state: AppState, event) -> None:
        dispatcher.dispatch(event)
        assert state.running is False

    def test_save_then_load(self, dispatcher: Dispatcher, state: AppState, tmp_path) -> None:
        dispatcher.dispatch(char(" "))
        dispatcher.dispatch(char("s"))
        assert dispatcher.last_result.status is SaveStatus.OK
        assert (tmp_path / "art.txt").exists()

        dispatcher.dispatch(char("x"))
        dispatcher.dispatch(char("L"))
        assert dispatcher.last_result.status is LoadStatus.OK
        assert state.canvas.get(2, 1) == Cell('#', 7)

    def test_load_missing_file_is_noop(
        self, dispatcher: Dispatcher, state: AppState, surface: RecordingSurface
    ) -> None:
        dispatcher.dispatch(char(" "))
        surface.draws.clear()
        dispatcher.dispatch(char("l"))
        assert dispatcher.last_result.status is LoadStatus.UNREADABLE
        assert state.canvas.get(2, 1) == Cell('#', 7)
        # Only the highlight removal was drawn
        assert len(surface.draws) == 1

    def test_load_repaints_everything(
        self, dispatcher: Dispatcher, surface: RecordingSurface, tmp_path
    ) -> None:
        (tmp_path / "art.txt").write_text("1 1\n3,64\n")
        surface.draws.clear()
        dispatcher.dispatch(char("l"))
        assert len(surface.draws) == 1 + 15


class TestPaintApp:
    """Editor assembly and frame updates."""

    def test_canvas_fills_terminal(self, app: PaintApp) -> None:
        assert app.state.canvas.size == (20, 7)
        assert app.state.cursor == Cursor(10, 3)

    def test_first_frame(self, app: PaintApp) -> None:
        surface = app.surface
        assert len(surface.screen) == 20 * 7
        assert surface.highlighted() == [(10, 5)]
        assert set(surface.status) == {0, 1, 9}
        assert "Canvas: 20x7" in surface.status[0][0]

    def test_highlight_follows_cursor(self, app: PaintApp) -> None:
        app.handle_event(key(Key.RIGHT))
        surface = app.surface
        assert surface.screen[(10, 5)][2] is False
        assert surface.screen[(11, 5)][2] is True
        assert surface.highlighted() == [(11, 5)]
        assert surface.status[1][0].startswith("Position: (11,3)")

    def test_highlight_after_clear(self, app: PaintApp) -> None:
        app.handle_event(char("x"))
        assert app.surface.highlighted() == [(10, 5)]

    def test_quit(self, app: PaintApp) -> None:
        app.handle_event(char("q"))
        assert not app.running

    def test_load_on_start(self, tmp_path) -> None:
        path = tmp_path / "art.txt"
        path.write_text("1 1\n1,64\n")
        config = PaintConfig(save_path=path, load_on_start=True)
        app = PaintApp(RecordingSurface(20, 10), config)
        app.start()
        assert app.state.canvas.get(0, 0) == Cell('@', 1)
        assert app.surface.screen[(0, 2)] == ('@', 1, False)
        # One full repaint plus the cursor highlight
        assert len(app.surface.draws) == 20 * 7 + 1

    def test_failed_load_on_start_still_draws(self, tmp_path) -> None:
        config = PaintConfig(save_path=tmp_path / "missing.txt", load_on_start=True)
        app = PaintApp(RecordingSurface(20, 10), config)
        app.start()
        assert app.dispatcher.last_result.status is LoadStatus.UNREADABLE
        assert len(app.surface.draws) == 20 * 7 + 1
        assert app.surface.highlighted() == [(10, 5)]

    def test_terminal_too_small(self) -> None:
        with pytest.raises(TerminalTooSmallError):
            PaintApp(RecordingSurface(19, 10))
        with pytest.raises(TerminalTooSmallError):
            PaintApp(RecordingSurface(20, 9))


class TestCanvasSize:
    """Canvas sizing from the terminal."""

    def test_minimum_terminal(self) -> None:
        assert canvas_size_for(20, 10) == (20, 7)

    def test_capped_at_maximum(self) -> None:
        assert canvas_size_for(2000, 2000) == (1000, 1000)

    @pytest.mark.parametrize("cols,rows", [(19, 10), (20, 9), (0, 0)])
    def test_too_small(self, cols: int, rows: int) -> None:
        with pytest.raises(TerminalTooSmallError) as exc:
            canvas_size_for(cols, rows)
        assert exc.value.cols == cols
        assert exc.value.rows == rows


class TestSession:
    """A short paint, save, clear and load session."""

    def test_paint_save_clear_load(self) -> None:
        state = AppState.for_canvas(Canvas(5, 3))
        engine = PaintEngine(state)

        engine.set_color(2)
        engine.paint_at_cursor()
        buffer = io.StringIO()
        assert save(state.canvas, buffer).ok
        assert buffer.getvalue().splitlines()[0] == "5 3"
        assert buffer.getvalue().splitlines()[2] == "7,32 7,32 2,35 7,32 7,32"

        engine.clear_canvas()
        assert state.canvas.get(2, 1) == Cell(' ', 2)

        buffer.seek(0)
        result = load(state.canvas, buffer)
        assert result.status is LoadStatus.OK
        for x, y, cell in state.canvas.cells():
            if (x, y) == (2, 1):
                assert cell == Cell('#', 2)
            else:
                assert cell == Cell(' ', 7)
