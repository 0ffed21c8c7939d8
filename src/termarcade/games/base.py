"""Base class for all dashboard games in termarcade."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import logging

from termarcade.core.events import Event, EventBus, EventType
from termarcade.core.geometry import Size
from termarcade.core.input import Keys
from termarcade.games.solution import Solution
from termarcade.graphics.canvas import PixelCanvas
from termarcade.graphics.image import SpriteRect

logger = logging.getLogger(__name__)


@dataclass
class GameContext:
    """Per-tick input handed to a game.

    `log` collects the game's diagnostic lines for this tick; the front-end
    moves them into its log panel afterwards.
    """

    size: Size
    keys: Keys
    solution: Solution
    log: List[str] = field(default_factory=list)
    event_bus: Optional[EventBus] = None

    def write(self, line: str) -> None:
        """Append a diagnostic line to the tick log."""
        self.log.extend(line.splitlines() or [""])


class BaseGame(ABC):
    """Abstract base class for all dashboard games.

    Lifecycle:
        1. update(ctx) - advance one tick
        2. draw(canvas) - paint the current state
        3. reset() - start over
    """

    # Game metadata (override in subclasses)
    name: str = "base"
    display_name: str = "Base Game"

    def __init__(self) -> None:
        self._frame_count = 0
        logger.debug(f"Game created: {self.name}")

    @property
    def frame_count(self) -> int:
        return self._frame_count

    @abstractmethod
    def update(self, ctx: GameContext) -> bool:
        """Advance one tick. Returns True if the game ended this tick."""
        pass

    @abstractmethod
    def draw(self, canvas: PixelCanvas) -> List[SpriteRect]:
        """Paint the current state. Returns the clipped draw commands used."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Restore the initial state."""
        pass

    # Utility methods
    def emit_event(self, ctx: GameContext, event_type: EventType, data: Dict[str, Any] = None) -> None:
        """Emit an event through the context's event bus, if it has one."""
        if ctx.event_bus is None:
            return

        ctx.event_bus.emit(Event(
            type=event_type,
            data=data or {},
            source=f"game_{self.name}"
        ))

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        """Get game metadata as dictionary."""
        return {
            "name": cls.name,
            "display_name": cls.display_name,
        }
