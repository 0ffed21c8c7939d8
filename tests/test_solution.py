"""Tests for the autopilot key stream and its ring buffer."""

import pytest

from termarcade.core.input import Key, Keys
from termarcade.games.solution import (
    DEFAULT_SEED,
    HIGH_FREQ_PRESS_CHANCE,
    HIGH_FREQ_RELEASE_CHANCE,
    HIGH_FREQ_ROLLS,
    LOW_FREQ_ACTION_CHANCE,
    PHASE_TICKS,
    PHASE_WEIGHTS,
    SOLUTION_SIZE,
    GeneratorPhase,
    Solution,
    SolutionGenerator,
)


class FixedRoll:
    """Stand-in RNG whose randrange always returns the same value."""

    def __init__(self, value):
        self.value = value

    def randrange(self, *args):
        return self.value


class TestGeneratorPhase:
    """Phase selection weights."""

    def test_weights_are_cumulative_percentages(self):
        bounds = [upper for _, upper in PHASE_WEIGHTS]
        assert bounds == [10, 40, 100]

    @pytest.mark.parametrize("roll,phase", [
        (0, GeneratorPhase.PAUSE),
        (9, GeneratorPhase.PAUSE),
        (10, GeneratorPhase.LOW_FREQ),
        (39, GeneratorPhase.LOW_FREQ),
        (40, GeneratorPhase.HIGH_FREQ),
        (99, GeneratorPhase.HIGH_FREQ),
    ])
    def test_sample(self, roll, phase):
        assert GeneratorPhase.sample(FixedRoll(roll)) is phase


class TestSolutionGenerator:
    """Deterministic key synthesis."""

    def test_same_seed_same_stream(self):
        a = SolutionGenerator("seed")
        b = SolutionGenerator("seed")
        assert [a.next() for _ in range(500)] == [b.next() for _ in range(500)]

    def test_different_seed_different_stream(self):
        a = SolutionGenerator("one")
        b = SolutionGenerator("two")
        assert [a.next() for _ in range(500)] != [b.next() for _ in range(500)]

    def test_stream_presses_keys(self):
        generator = SolutionGenerator()
        assert any(generator.next().any_pressed() for _ in range(SOLUTION_SIZE))

    def test_pause_releases_everything(self):
        generator = SolutionGenerator()
        generator.keys.press(Key.UP)
        generator.phase = GeneratorPhase.PAUSE
        generator.phase_time_left = 5

        keys = generator.next()
        assert not keys.any_pressed()
        assert generator.phase_time_left == 4

    def test_pinned_probabilities(self):
        assert LOW_FREQ_ACTION_CHANCE == 20
        assert HIGH_FREQ_ROLLS == 4
        assert HIGH_FREQ_RELEASE_CHANCE == 2
        assert HIGH_FREQ_PRESS_CHANCE == 5
        assert PHASE_TICKS == (50, 100)

    def test_high_freq_rolls_can_press(self):
        """Every roll hitting zero releases, then presses, the first key."""
        generator = SolutionGenerator()
        generator._random = FixedRoll(0)
        generator.phase = GeneratorPhase.HIGH_FREQ
        generator.phase_time_left = 5

        keys = generator.next()
        assert keys.just_pressed(Key.UP)

    def test_low_freq_toggles(self):
        generator = SolutionGenerator()
        generator._random = FixedRoll(0)
        generator.phase = GeneratorPhase.LOW_FREQ
        generator.phase_time_left = 5

        assert generator.next().pressing(Key.UP)
        assert not generator.next().any_pressed()

    def test_result_is_a_copy(self):
        generator = SolutionGenerator()
        keys = generator.next()
        snapshot = generator.keys.copy()
        keys.press(Key.SPACE)
        keys.press(Key.LEFT)
        assert generator.keys == snapshot


class TestSolution:
    """Ring buffer window over the generated stream."""

    def test_length(self, shared_solution):
        assert len(shared_solution) == SOLUTION_SIZE == 1024

    def test_deterministic(self, shared_solution):
        other = Solution(DEFAULT_SEED)
        for t in range(SOLUTION_SIZE):
            assert other.keys(t) == shared_solution.keys(t)

    @pytest.mark.parametrize("offset", [-1, SOLUTION_SIZE, SOLUTION_SIZE + 5])
    def test_out_of_window(self, shared_solution, offset):
        with pytest.raises(IndexError):
            shared_solution.keys(offset)

    def test_last_offset_is_valid(self, shared_solution):
        assert isinstance(shared_solution.keys(SOLUTION_SIZE - 1), Keys)

    def test_update_shifts_window(self, solution):
        """After update, offset i holds what offset i + 1 held before."""
        before = [solution.keys(t) for t in range(1, SOLUTION_SIZE)]
        solution.update()
        after = [solution.keys(t) for t in range(SOLUTION_SIZE - 1)]
        assert after == before

    def test_update_appends_next_generated(self, solution):
        generator = SolutionGenerator(DEFAULT_SEED)
        for _ in range(SOLUTION_SIZE):
            generator.next()

        solution.update()
        assert solution.keys(SOLUTION_SIZE - 1) == generator.next()

    def test_first_index_wraps(self, solution):
        for _ in range(SOLUTION_SIZE + 3):
            solution.update()
        assert solution.first_index == 3

    def test_keys_returns_copy(self, solution):
        keys = solution.keys(0)
        expected = keys.copy()
        keys.press(Key.SPACE)
        keys.press(Key.DOWN)
        assert solution.keys(0) == expected
