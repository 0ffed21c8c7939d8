"""T-Rex runner - jump over cacti and duck under birds.

World coordinates used by the game logic: x grows to the right, y is the
altitude above the ground (up is positive). Sprites are built in sprite
space (y down) by negating the altitude, with the y origin on the bottom
edge so feet stay on the ground line whatever the frame height.

A second dinosaur, the ghost, runs alongside the player driven by the
autopilot Solution. Its state at any future tick is recomputed by replaying
the solution from the current ghost state, never cached.
"""

from collections import deque
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Deque, List, Optional, Tuple
import logging
import random

from termarcade.core.events import EventType
from termarcade.core.geometry import Pos, Size
from termarcade.core.input import Key, Keys
from termarcade.games.base import BaseGame, GameContext
from termarcade.games.motion import Parabola
from termarcade.games.solution import Solution
from termarcade.games.trex_sprites import BIRD, CACTI, TREX_CROUCHING, TREX_RUNNING
from termarcade.graphics.canvas import PixelCanvas
from termarcade.graphics.image import Color, Image, Origin, Sprite, SpriteRect

logger = logging.getLogger(__name__)

DEFAULT_SEED = "Seed chosen by a fair dice roll."
GHOST_COLOR = (110, 40, 40)

# (peak, duration)
JUMP = (25, 22)
CROUCH_JUMP = (6, 8)

# Animation frame divisors
RUN_FRAME_DIVISOR = 4
JUMP_FRAME_DIVISOR = 2

# Canvas x of sprite-space x = 0; the runner stands here
RUNNER_X = 15

# Enemies whose left edge reaches this x are dropped. -DESPAWN_X must be at
# least RUNNER_X plus the widest enemy so nothing is dropped while visible.
DESPAWN_X = -32

INITIAL_COOLDOWN = 10
SPAWN_COOLDOWN = (10, 50)  # randrange bounds
SAFE_FRAMES = 100          # only cacti before this frame

CACTUS_VELOCITY = 3
BIRD_ALTITUDE = (1, 20)    # inclusive
BIRD_VELOCITY = (4, 7)     # inclusive
BIRD_FLAP_DIVISOR = 16

SPRITE_ORIGIN = (Origin.MIN, Origin.MAX)

MAX_ENEMY_WIDTH = max(image.width for image in (*BIRD, *CACTI))


class EnemyKind(Enum):
    CACTUS = auto()
    BIRD = auto()


@dataclass(frozen=True)
class EnemyModel:
    kind: EnemyKind
    variant: int = 0

    @classmethod
    def cactus(cls, variant: int) -> 'EnemyModel':
        return cls(EnemyKind.CACTUS, variant)

    @classmethod
    def bird(cls) -> 'EnemyModel':
        return cls(EnemyKind.BIRD)


@dataclass
class Enemy:
    """An obstacle scrolling toward the player."""

    position: Pos  # world: x = left edge, y = altitude
    velocity: int
    model: EnemyModel

    def advance(self) -> None:
        self.position = Pos(self.position.x - self.velocity, self.position.y)

    def moved(self, ticks: int) -> 'Enemy':
        """Copy of this enemy `ticks` updates from now."""
        return replace(self, position=Pos(self.position.x - self.velocity * ticks, self.position.y))

    def skin(self, frame_count: int) -> Image:
        if self.model.kind is EnemyKind.CACTUS:
            return CACTI[self.model.variant]
        return BIRD.image(self.velocity * frame_count // BIRD_FLAP_DIVISOR)

    def sprite(self, frame_count: int) -> Sprite:
        return Sprite(
            image=self.skin(frame_count),
            position=Pos(self.position.x, -self.position.y),
            origin=SPRITE_ORIGIN,
        )


class TRex:
    """Player character state: an optional jump arc plus crouching."""

    __slots__ = ("jump", "crouching")

    def __init__(self, jump: Optional[Parabola] = None, crouching: bool = False) -> None:
        self.jump = jump
        self.crouching = crouching

    @property
    def height(self) -> int:
        return 0 if self.jump is None else self.jump.value

    @property
    def airborne(self) -> bool:
        return self.jump is not None

    def update(self, keys: Keys) -> None:
        self.crouching = keys.pressing(Key.DOWN)

        if self.jump is not None:
            self.jump.step()
            if self.jump.finished:
                self.jump = None

        if self.jump is None and keys.pressing(Key.SPACE):
            peak, duration = CROUCH_JUMP if self.crouching else JUMP
            self.jump = Parabola(peak, duration)

    def copy(self) -> 'TRex':
        return TRex(None if self.jump is None else self.jump.copy(), self.crouching)

    def sprite(self, frame_count: int, color: Optional[Color] = None) -> Sprite:
        divisor = JUMP_FRAME_DIVISOR if self.airborne else RUN_FRAME_DIVISOR
        skin = TREX_CROUCHING if self.crouching else TREX_RUNNING
        step = frame_count // divisor

        image = skin.image(step)
        if color is not None:
            image = replace(image, color=color)

        # Grounded runners bob one pixel back and forth
        x = 0 if self.airborne else step & 1

        return Sprite(image=image, position=Pos(x, -self.height), origin=SPRITE_ORIGIN)

    def __repr__(self) -> str:
        return f"TRex(jump={self.jump!r}, crouching={self.crouching})"


class TRexGame(BaseGame):
    """Endless runner with an autopilot ghost."""

    name = "trex"
    display_name = "T-Rex"

    def __init__(self, seed: str = DEFAULT_SEED, ghost_color: Color = GHOST_COLOR) -> None:
        super().__init__()
        self.seed = seed
        self.ghost_color = ghost_color
        self.reset()

    def reset(self) -> None:
        self.trex = TRex()
        self.ghost = TRex()
        self._enemies: Deque[Enemy] = deque()
        self.enemy_cooldown = INITIAL_COOLDOWN
        self._random = random.Random(self.seed)
        self._frame_count = 0
        self.game_over = False
        logger.debug("Runner reset")

    @property
    def enemies(self) -> Tuple[Enemy, ...]:
        return tuple(self._enemies)

    def update(self, ctx: GameContext) -> bool:
        self.trex.update(ctx.keys)
        self.ghost.update(ctx.solution.keys(0))

        self._despawn_enemies()
        self._spawn_enemies(ctx)
        self._update_enemies()

        self.game_over = self.collides(self.trex, 0)
        if self.game_over:
            ctx.write("Game Over")
            logger.info(f"Game over at frame {self._frame_count}")
            self.emit_event(ctx, EventType.GAME_OVER, {"frame": self._frame_count})

        self._frame_count += 1
        return self.game_over

    def collides(self, trex: TRex, time: int = 0) -> bool:
        """Would `trex` hit an enemy `time` ticks from now?

        Enemies are extrapolated along their fixed velocity; spawns that
        have not happened yet are not considered.
        """
        frame_count = self._frame_count + time
        trex_sprite = trex.sprite(frame_count)

        return any(
            enemy.moved(time).sprite(frame_count).collide(trex_sprite)
            for enemy in self._enemies
        )

    def ghost_at(self, solution: Solution, time: int) -> TRex:
        """Ghost state `time` ticks from now, replayed from the solution."""
        ghost = self.ghost.copy()
        for t in range(1, time + 1):
            ghost.update(solution.keys(t))
        return ghost

    def ghost_collides(self, solution: Solution, time: int) -> bool:
        return self.collides(self.ghost_at(solution, time), time)

    def _spawn_cactus(self, ctx: GameContext) -> None:
        variant = self._random.randrange(len(CACTI))

        self._enemies.append(Enemy(
            position=Pos(ctx.size.width, 0),
            velocity=CACTUS_VELOCITY,
            model=EnemyModel.cactus(variant),
        ))

    def _spawn_bird(self, ctx: GameContext) -> None:
        altitude = self._random.randint(*BIRD_ALTITUDE)
        velocity = self._random.randint(*BIRD_VELOCITY)

        self._enemies.append(Enemy(
            position=Pos(ctx.size.width, altitude),
            velocity=velocity,
            model=EnemyModel.bird(),
        ))

    def _spawn_enemy(self, ctx: GameContext) -> None:
        # 3 in 4 cacti; the roll is drawn even during the safe frames
        spawn_cactus = self._random.getrandbits(32) & 3 != 0 or self._frame_count < SAFE_FRAMES

        if spawn_cactus:
            self._spawn_cactus(ctx)
        else:
            self._spawn_bird(ctx)

    def _spawn_enemies(self, ctx: GameContext) -> None:
        if self.enemy_cooldown == 0:
            self.enemy_cooldown = self._random.randrange(*SPAWN_COOLDOWN)
            self._spawn_enemy(ctx)

        self.enemy_cooldown -= 1

    def _update_enemies(self) -> None:
        for enemy in self._enemies:
            enemy.advance()

    def _despawn_enemies(self) -> None:
        # Spawn order is position order, so only the front can be off-screen
        if self._enemies and self._enemies[0].position.x <= DESPAWN_X:
            self._enemies.popleft()

    @staticmethod
    def canvas_origin(size: Size) -> Pos:
        """Canvas position of sprite-space (0, 0): the runner's feet."""
        return Pos(RUNNER_X, size.height - 1)

    def sprites(self) -> List[Sprite]:
        """Everything visible this frame, back to front."""
        sprites = [
            self.ghost.sprite(self._frame_count, self.ghost_color),
            self.trex.sprite(self._frame_count),
        ]
        sprites.extend(enemy.sprite(self._frame_count) for enemy in self._enemies)
        return sprites

    def draw(self, canvas: PixelCanvas) -> List[SpriteRect]:
        """Paint the frame. Returns the clipped draw commands that were used."""
        drawn = []
        for sprite in self.sprites():
            rect = canvas.draw(sprite)
            if rect is not None:
                drawn.append(rect)
        return drawn
