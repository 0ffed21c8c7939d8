"""
Terminal dashboard using curses.

Lays out the game panels, paces ticks, feeds key codes into the shared
Keys state and draws the runner through a Braille pixel canvas. Only the
T-Rex panel hosts a game; the other panels are placeholders.
"""

import curses
import logging
import time
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Optional

from termarcade.config.settings import Settings
from termarcade.core.events import Event, EventBus, EventType, tick_event
from termarcade.core.geometry import Size
from termarcade.core.input import Keys
from termarcade.games.base import GameContext
from termarcade.games.solution import Solution
from termarcade.games.trex import TRexGame
from termarcade.graphics.braille import BrailleFrame, pixel_size, to_braille
from termarcade.graphics.canvas import PixelCanvas
from termarcade.terminal.keymap import QUIT_CODES, KeyDecoder

logger = logging.getLogger(__name__)

TETRIS_WIDTH = 22


@dataclass(frozen=True)
class Panel:
    """A bordered area of the screen, in cells."""
    title: str
    x: int
    y: int
    width: int
    height: int

    @property
    def inner(self) -> Size:
        return Size(max(self.width - 2, 0), max(self.height - 2, 0))


def _split(total: int, weights: list[int]) -> list[int]:
    """Split `total` cells proportionally; leftovers go to the last part."""
    parts = [total * w // sum(weights) for w in weights]
    parts[-1] += total - sum(parts)
    return parts


def dashboard_layout(width: int, height: int, log_width: int = 0) -> Dict[str, Panel]:
    """Compute the dashboard panels for a screen of width x height cells.

    Columns: log (optional), Tetris (fixed), a middle column split into two
    rows, and a wide right column of three rows holding the runner.
    """
    log_width = min(log_width, width)
    tetris_width = min(TETRIS_WIDTH, width - log_width)
    rest = width - log_width - tetris_width
    middle_width, right_width = _split(rest, [1, 3])

    x = 0
    panels: Dict[str, Panel] = {}
    if log_width:
        panels["log"] = Panel("Log", x, 0, log_width, height)
        x += log_width

    panels["tetris"] = Panel("Tetris", x, 0, tetris_width, height)
    x += tetris_width

    top = min(middle_width // 2, height)
    panels["defend"] = Panel("Defend the Planet", x, 0, middle_width, top)
    panels["breakout"] = Panel("Breakout", x, top, middle_width, height - top)
    x += middle_width

    rows = _split(height, [1, 1, 1])
    y = 0
    for key, title, rows_height in zip(("trex", "space", "packman"), ("T-Rex", "Space", "Packman"), rows):
        panels[key] = Panel(title, x, y, right_width, rows_height)
        y += rows_height

    return panels


class PanelLogHandler(logging.Handler):
    """Feeds log records into the dashboard's log panel."""

    def __init__(self, lines: Deque[str]) -> None:
        super().__init__()
        self.lines = lines

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.lines.extend(self.format(record).splitlines())
        except Exception:
            self.handleError(record)


class TerminalApp:
    """Curses front-end hosting the runner."""

    def __init__(self, settings: Settings, event_bus: Optional[EventBus] = None) -> None:
        self.settings = settings
        self.event_bus = event_bus or EventBus()

        self.keys = Keys()
        self.decoder = KeyDecoder(
            self.keys,
            release_after=settings.display.key_release_ticks,
            first_release_after=settings.display.key_repeat_delay_ticks,
        )
        self.solution = Solution(settings.game.solution_seed)
        self.trex = TRexGame(settings.game.game_seed, settings.game.ghost_color)

        self.log_lines: Deque[str] = deque(maxlen=settings.display.log_lines)
        self._log_handler = PanelLogHandler(self.log_lines)
        self._log_handler.setLevel(logging.DEBUG if settings.debug else logging.WARNING)
        self._log_handler.setFormatter(logging.Formatter("%(levelname).1s %(name)s: %(message)s"))

        self._canvas: Optional[PixelCanvas] = None
        self._color_pairs: Dict[tuple[int, bool], int] = {}
        self._reset_pending = False
        self._frame_count = 0
        self.close = False

        self.event_bus.subscribe(EventType.GAME_OVER, self._on_game_over)
        self.event_bus.subscribe(EventType.SHUTDOWN, self._on_shutdown)

    # Event handlers
    def _on_game_over(self, event: Event) -> None:
        if self.settings.game.reset_on_game_over:
            self._reset_pending = True

    def _on_shutdown(self, event: Event) -> None:
        self.close = True

    # Input
    def handle_key(self, code: int) -> None:
        if code in QUIT_CODES:
            self.event_bus.emit(Event(EventType.SHUTDOWN, source="keyboard"))
            return
        self.decoder.feed(code)

    # Simulation
    def step(self, canvas_size: Size) -> GameContext:
        """Advance the runner one tick for a canvas of `canvas_size` pixels."""
        ctx = GameContext(
            size=canvas_size,
            keys=self.keys,
            solution=self.solution,
            event_bus=self.event_bus,
        )
        self.trex.update(ctx)
        self.log_lines.extend(ctx.log)

        if self._reset_pending:
            self._reset_pending = False
            self.trex.reset()

        # Advance shared input only after every read of this tick
        self.keys.update()
        self.decoder.tick()
        self.solution.update()
        self._frame_count += 1
        return ctx

    def render_runner(self, canvas_size: Size) -> BrailleFrame:
        if self._canvas is None or self._canvas.size != canvas_size:
            self._canvas = PixelCanvas(canvas_size, self.trex.canvas_origin(canvas_size))
        self._canvas.clear()
        self.trex.draw(self._canvas)
        return to_braille(self._canvas.buffer)

    # Main loop
    def run(self, stdscr) -> None:
        logging.getLogger().addHandler(self._log_handler)
        try:
            self._init_curses(stdscr)
            self._loop(stdscr)
        finally:
            logging.getLogger().removeHandler(self._log_handler)
            logger.info("Dashboard stopped")

    def _init_curses(self, stdscr) -> None:
        curses.curs_set(0)
        stdscr.keypad(True)
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
        logger.info("Dashboard started")

    def _loop(self, stdscr) -> None:
        tick_rate = self.settings.display.tick_ms / 1000.0
        tick_margin = self.settings.display.tick_margin_ms / 1000.0
        last_tick = time.monotonic()

        while not self.close:
            # Sleep in getch unless the tick is about to fire
            timeout = tick_rate - (time.monotonic() - last_tick + tick_margin)
            stdscr.timeout(max(int(timeout * 1000), 0))

            code = stdscr.getch()
            while code != -1 and not self.close:
                self.handle_key(code)
                stdscr.timeout(0)
                code = stdscr.getch()

            if time.monotonic() - last_tick >= tick_rate:
                last_tick += tick_rate
                self.event_bus.emit(tick_event(tick_rate, self._frame_count))
                self._frame(stdscr)

    def _frame(self, stdscr) -> None:
        height, width = stdscr.getmaxyx()
        log_width = self.settings.display.log_width if self.log_lines else 0
        panels = dashboard_layout(width, height, log_width)

        stdscr.erase()
        for panel in panels.values():
            self._draw_box(stdscr, panel)

        runner = panels["trex"]
        if runner.inner.width > 0 and runner.inner.height > 0:
            canvas_size = pixel_size(runner.inner)
            self.step(canvas_size)
            self._draw_braille(stdscr, runner, self.render_runner(canvas_size))
        else:
            self.step(Size(0, 0))

        if "log" in panels:
            self._draw_log(stdscr, panels["log"])

        stdscr.noutrefresh()
        curses.doupdate()

    # Drawing helpers
    def _put(self, stdscr, y: int, x: int, text: str, attr: int = 0) -> None:
        try:
            stdscr.addstr(y, x, text, attr)
        except curses.error:
            pass

    def _draw_box(self, stdscr, panel: Panel) -> None:
        if panel.width < 2 or panel.height < 2:
            return
        right = panel.x + panel.width - 1
        bottom = panel.y + panel.height - 1
        inner = panel.width - 2

        self._put(stdscr, panel.y, panel.x, "┌" + "─" * inner + "┐")
        for y in range(panel.y + 1, bottom):
            self._put(stdscr, y, panel.x, "│")
            self._put(stdscr, y, right, "│")
        self._put(stdscr, bottom, panel.x, "└" + "─" * inner + "┘")
        self._put(stdscr, panel.y, panel.x + 1, panel.title[:inner])

    def _draw_braille(self, stdscr, panel: Panel, frame: BrailleFrame) -> None:
        for row, line in enumerate(frame.lines[:panel.inner.height]):
            y = panel.y + 1 + row
            for col, char in enumerate(line[:panel.inner.width]):
                if char == "⠀":
                    continue
                self._put(stdscr, y, panel.x + 1 + col, char, self._attr(frame.colors[row, col]))

    def _draw_log(self, stdscr, panel: Panel) -> None:
        visible = list(self.log_lines)[-panel.inner.height:] if panel.inner.height else []
        for row, line in enumerate(visible):
            self._put(stdscr, panel.y + 1 + row, panel.x + 1, line[:panel.inner.width])

    def _attr(self, rgb) -> int:
        """Nearest of the eight basic terminal colours, dimmed when dark."""
        if not curses.has_colors():
            return 0

        r, g, b = (int(c) for c in rgb)
        index = (r > 80) | (g > 80) << 1 | (b > 80) << 2
        dim = max(r, g, b) < 160

        key = (index, dim)
        if key not in self._color_pairs:
            pair = len(self._color_pairs) + 1
            curses.init_pair(pair, index or curses.COLOR_WHITE, -1)
            self._color_pairs[key] = pair

        attr = curses.color_pair(self._color_pairs[key])
        return attr | curses.A_DIM if dim else attr
