"""Tests for the runner game: player physics, obstacles and the ghost."""

import math

import numpy as np
import pytest

from termarcade.core.events import EventBus, EventType
from termarcade.core.geometry import Pos, Size
from termarcade.core.input import Key, Keys
from termarcade.games.trex import (
    CACTUS_VELOCITY,
    DESPAWN_X,
    GHOST_COLOR,
    INITIAL_COOLDOWN,
    MAX_ENEMY_WIDTH,
    RUNNER_X,
    SAFE_FRAMES,
    Enemy,
    EnemyKind,
    EnemyModel,
    TRex,
    TRexGame,
)
from termarcade.graphics.canvas import PixelCanvas
from termarcade.graphics.image import SpriteRect


def pressed(*keys):
    state = Keys()
    for key in keys:
        state.press(key)
    return state


def heights(trex, ticks):
    values = []
    for _ in range(ticks):
        trex.update(Keys())
        values.append(trex.height)
    return values


@pytest.fixture
def game():
    return TRexGame()


class TestTRex:
    """Player jumping and crouching."""

    def test_idle_on_ground(self):
        trex = TRex()
        trex.update(Keys())
        assert trex.height == 0
        assert not trex.airborne
        assert not trex.crouching

    def test_jump_arc(self):
        trex = TRex()
        trex.update(pressed(Key.SPACE))
        assert trex.airborne
        assert trex.height == 0

        arc = heights(trex, 22)
        assert max(arc) == 25
        assert arc[10] == 25
        assert all(h >= 0 for h in arc)
        assert not trex.airborne

    def test_crouch_jump_is_short(self):
        trex = TRex()
        trex.update(pressed(Key.DOWN, Key.SPACE))
        assert trex.crouching

        arc = heights(trex, 8)
        assert max(arc) == 6
        assert not trex.airborne

    def test_crouching_follows_down_key(self):
        trex = TRex()
        trex.update(pressed(Key.DOWN))
        assert trex.crouching
        trex.update(Keys())
        assert not trex.crouching

    def test_no_double_jump(self):
        trex = TRex()
        trex.update(pressed(Key.SPACE))
        heights(trex, 5)
        before = trex.jump.time

        trex.update(pressed(Key.SPACE))
        assert trex.jump.time == before + 1

    def test_holding_space_jumps_again_on_landing(self):
        trex = TRex()
        hold = pressed(Key.SPACE)
        for _ in range(23):
            trex.update(hold)
        assert trex.airborne
        assert trex.jump.time == 0

    def test_copy_is_independent(self):
        trex = TRex()
        trex.update(pressed(Key.SPACE))
        clone = trex.copy()
        heights(trex, 5)
        assert clone.jump.time == 0

    def test_ghost_sprite_color(self):
        sprite = TRex().sprite(0, GHOST_COLOR)
        assert sprite.image.color == GHOST_COLOR

    def test_grounded_sprite_bobs(self):
        trex = TRex()
        assert trex.sprite(0).position == Pos(0, 0)
        assert trex.sprite(4).position == Pos(1, 0)


class TestObstacles:
    """Spawning, scrolling and despawning."""

    def test_first_spawn_after_cooldown(self, game, make_context):
        ctx = make_context()
        for _ in range(INITIAL_COOLDOWN):
            game.update(ctx)
            assert game.enemies == ()

        game.update(ctx)
        assert len(game.enemies) == 1
        enemy = game.enemies[0]
        assert enemy.position.x == ctx.size.width - enemy.velocity

    def test_only_cacti_in_safe_frames(self, game, make_context):
        ctx = make_context()
        seen = set()
        for _ in range(SAFE_FRAMES):
            game.update(ctx)
            seen.update(enemy.model.kind for enemy in game.enemies)
        assert seen == {EnemyKind.CACTUS}

    def test_birds_appear_later(self, game, make_context):
        ctx = make_context()
        kinds = set()
        for _ in range(3000):
            game.update(ctx)
            kinds.update(enemy.model.kind for enemy in game.enemies)
        assert EnemyKind.BIRD in kinds

    def test_despawn_after_exact_move_count(self, game, make_context):
        """An obstacle leaves after ceil((W - DESPAWN_X) / v) moves."""
        ctx = make_context(width=100)
        while not game.enemies:
            game.update(ctx)

        first = game.enemies[0]
        moves = 1
        while True:
            game.update(ctx)
            if not any(enemy is first for enemy in game.enemies):
                break
            moves += 1

        expected = math.ceil((100 - DESPAWN_X) / CACTUS_VELOCITY)
        assert moves == expected == 44
        assert first.position.x == 100 - 44 * CACTUS_VELOCITY

    def test_despawn_margin_covers_widest_enemy(self):
        assert MAX_ENEMY_WIDTH == 17
        assert RUNNER_X + DESPAWN_X + MAX_ENEMY_WIDTH <= 0

    @pytest.mark.parametrize("enemy", [
        Enemy(Pos(-29, 0), 3, EnemyModel.cactus(2)),
        Enemy(Pos(-28, 5), 4, EnemyModel.bird()),
    ])
    def test_enemy_invisible_before_removal(self, game, make_context, enemy):
        """The last frame drawn with an enemy shows none of its pixels."""
        ctx = make_context()
        origin = game.canvas_origin(ctx.size)
        game._enemies.append(enemy)

        game.update(ctx)
        assert enemy.position.x == DESPAWN_X
        assert enemy in game.enemies
        assert enemy.sprite(game.frame_count).rect(origin, ctx.size) is None

        game.update(ctx)
        assert enemy not in game.enemies

    def test_spawned_enemy_leaves_unseen(self, game, make_context):
        ctx = make_context(width=100)
        origin = game.canvas_origin(ctx.size)
        while not game.enemies:
            game.update(ctx)

        first = game.enemies[0]
        visible = []
        while any(enemy is first for enemy in game.enemies):
            visible.append(first.sprite(game.frame_count).rect(origin, ctx.size) is not None)
            game.update(ctx)

        assert any(visible)
        assert not visible[-1]

    def test_enemies_keep_spawn_order(self, game, make_context):
        ctx = make_context()
        for _ in range(400):
            game.update(ctx)
            xs = [enemy.position.x for enemy in game.enemies if enemy.model.kind is EnemyKind.CACTUS]
            assert xs == sorted(xs)

    def test_deterministic(self, make_context):
        ctx = make_context()
        a, b = TRexGame(), TRexGame()
        for _ in range(500):
            assert a.update(ctx) == b.update(ctx)
            assert a.enemies == b.enemies

    def test_reset(self, game, make_context):
        ctx = make_context()
        for _ in range(50):
            game.update(ctx)
        game.reset()

        assert game.frame_count == 0
        assert game.enemies == ()
        assert game.enemy_cooldown == INITIAL_COOLDOWN
        assert not game.game_over


class TestCollisions:
    """Game over detection, now and in the future."""

    def test_clear_field(self, game, make_context):
        ctx = make_context()
        assert game.update(ctx) is False
        assert ctx.log == []

    def test_game_over(self, game, make_context):
        bus = EventBus()
        events = []
        bus.subscribe(EventType.GAME_OVER, events.append)
        ctx = make_context(event_bus=bus)

        game._enemies.append(Enemy(Pos(0, 0), 0, EnemyModel.cactus(0)))

        assert game.update(ctx) is True
        assert game.game_over
        assert ctx.log == ["Game Over"]
        assert len(events) == 1
        assert events[0].data == {"frame": 0}
        assert game.frame_count == 1

    def test_jumping_clears_a_cactus(self, game, make_context):
        """High in the arc the player is above a ground obstacle."""
        ctx = make_context()
        ctx.keys.press(Key.SPACE)
        game.update(ctx)
        ctx.keys.release(Key.SPACE)
        ctx.keys.update()
        for _ in range(10):
            game.update(ctx)
        assert game.trex.height >= 20

        game._enemies.append(Enemy(Pos(0, 0), 0, EnemyModel.cactus(0)))
        assert not game.collides(game.trex, 0)

    def test_future_collision(self, game):
        game._enemies.append(Enemy(Pos(30, 0), CACTUS_VELOCITY, EnemyModel.cactus(0)))
        assert not game.collides(game.trex, 0)
        assert game.collides(game.trex, 10)

    def test_future_collision_does_not_move_enemies(self, game):
        enemy = Enemy(Pos(30, 0), CACTUS_VELOCITY, EnemyModel.cactus(0))
        game._enemies.append(enemy)
        game.collides(game.trex, 10)
        assert enemy.position == Pos(30, 0)


class TestGhost:
    """Autopilot ghost replay."""

    def test_ghost_at_does_not_mutate(self, game, shared_solution):
        before = repr(game.ghost)
        game.ghost_at(shared_solution, 200)
        assert repr(game.ghost) == before

    def test_ghost_at_zero_is_current_state(self, game, shared_solution):
        assert repr(game.ghost_at(shared_solution, 0)) == repr(game.ghost)

    def test_ghost_at_matches_play(self, game, make_context, solution):
        ctx = make_context(solution=solution)
        predicted = [repr(game.ghost_at(solution, t)) for t in range(1, 40)]

        actual = []
        for _ in range(39):
            solution.update()
            game.update(ctx)
            actual.append(repr(game.ghost))

        assert actual == predicted

    def test_ghost_collides(self, game, shared_solution):
        assert not game.ghost_collides(shared_solution, 5)
        game._enemies.append(Enemy(Pos(0, 0), 0, EnemyModel.cactus(0)))
        assert game.collides(game.ghost, 0)


class TestDraw:
    """Rendering order and clipping."""

    def test_canvas_origin(self):
        assert TRexGame.canvas_origin(Size(100, 40)) == Pos(RUNNER_X, 39)

    def test_draw_returns_visible_rects(self, game):
        canvas = PixelCanvas(Size(100, 40), Pos(20, 39))
        rects = game.draw(canvas)
        assert len(rects) == 2
        assert all(isinstance(rect, SpriteRect) for rect in rects)
        assert canvas.lit().any()

    def test_player_drawn_over_ghost(self, game):
        """With both at rest in the same spot only the player shows."""
        canvas = PixelCanvas(Size(100, 40), Pos(20, 39))
        game.draw(canvas)
        ghost_pixels = np.all(canvas.buffer == np.array(GHOST_COLOR, dtype=np.uint8), axis=2)
        assert not ghost_pixels.any()

    def test_offscreen_enemy_not_drawn(self, game):
        game._enemies.append(Enemy(Pos(500, 0), 3, EnemyModel.cactus(1)))
        canvas = PixelCanvas(Size(100, 40), Pos(20, 39))
        assert len(game.draw(canvas)) == 2

    def test_sprites_order(self, game):
        game._enemies.append(Enemy(Pos(50, 5), 5, EnemyModel.bird()))
        sprites = game.sprites()
        assert len(sprites) == 3
        assert sprites[0].image.color == GHOST_COLOR
        assert sprites[1].image.color != GHOST_COLOR
