"""
Autopilot input stream ("solution").

SolutionGenerator synthesises a plausible sequence of key states from a
fixed seed. Solution keeps a window of SOLUTION_SIZE generated states in a
ring buffer so the ghost player can look at any tick inside the window in
O(1). The front-end advances it once per tick, after every read.
"""

from enum import Enum, auto
import logging
import random

from termarcade.core.input import KEY_COUNT, Key, Keys

logger = logging.getLogger(__name__)

# Ring capacity, power of two
SOLUTION_SIZE = 1 << 10

DEFAULT_SEED = "This is a funny random seed !!!!"

PHASE_TICKS = (50, 100)  # randrange bounds

LOW_FREQ_ACTION_CHANCE = 20   # 1 in N per tick
HIGH_FREQ_ROLLS = 4
HIGH_FREQ_RELEASE_CHANCE = 2  # 1 in N per roll
HIGH_FREQ_PRESS_CHANCE = 5    # 1 in N per roll


class GeneratorPhase(Enum):
    """Stochastic regimes of the generator."""
    PAUSE = auto()      # no keys
    LOW_FREQ = auto()   # occasional single presses
    HIGH_FREQ = auto()  # bursts of overlapping presses

    @classmethod
    def sample(cls, rng: random.Random) -> 'GeneratorPhase':
        roll = rng.randrange(100)
        for phase, upper in PHASE_WEIGHTS:
            if roll < upper:
                return phase
        raise AssertionError(f"Phase roll out of range: {roll}")


# Cumulative upper bounds over randrange(100): 10% / 30% / 60%
PHASE_WEIGHTS = (
    (GeneratorPhase.PAUSE, 10),
    (GeneratorPhase.LOW_FREQ, 40),
    (GeneratorPhase.HIGH_FREQ, 100),
)


class SolutionGenerator:
    """Deterministic pseudo-random key stream."""

    def __init__(self, seed: str = DEFAULT_SEED) -> None:
        self.keys = Keys()
        self.phase = GeneratorPhase.LOW_FREQ
        self.phase_time_left = 0
        self._random = random.Random(seed)

    def next(self) -> Keys:
        """Generate the key state for the next tick."""
        if self.phase_time_left == 0:
            self.phase = GeneratorPhase.sample(self._random)
            self.phase_time_left = self._random.randrange(*PHASE_TICKS)
            logger.debug(f"Solution phase: {self.phase.name} for {self.phase_time_left} ticks")
        else:
            self.phase_time_left -= 1

        self.keys.update()

        if self.phase is GeneratorPhase.PAUSE:
            self.keys = Keys()
        elif self.phase is GeneratorPhase.LOW_FREQ:
            self._low_freq()
        else:
            self._high_freq()

        return self.keys.copy()

    def _low_freq(self) -> None:
        if self._random.randrange(LOW_FREQ_ACTION_CHANCE) != 0:
            return

        if self.keys.any_pressed():
            self.keys = Keys()  # Release all
        else:
            self.keys.press(self._random_key())

    def _high_freq(self) -> None:
        for _ in range(HIGH_FREQ_ROLLS):
            if self._random.randrange(HIGH_FREQ_RELEASE_CHANCE) == 0:
                self.keys.release(self._random_key())

        for _ in range(HIGH_FREQ_ROLLS):
            if self._random.randrange(HIGH_FREQ_PRESS_CHANCE) == 0:
                self.keys.press(self._random_key())

    def _random_key(self) -> Key:
        return Key.from_index(self._random.randrange(KEY_COUNT))


class Solution:
    """Ring buffer of generated key states, indexed by offset from now."""

    def __init__(self, seed: str = DEFAULT_SEED) -> None:
        self._generator = SolutionGenerator(seed)
        self._keys = [self._generator.next() for _ in range(SOLUTION_SIZE)]
        self._first_index = 0

    def __len__(self) -> int:
        return SOLUTION_SIZE

    @property
    def first_index(self) -> int:
        return self._first_index

    def keys(self, time: int) -> Keys:
        """Key state `time` ticks from now (0 is the current tick)."""
        if not 0 <= time < SOLUTION_SIZE:
            raise IndexError(f"Solution offset {time} outside [0, {SOLUTION_SIZE})")

        index = (self._first_index + time) & (SOLUTION_SIZE - 1)
        return self._keys[index].copy()

    def update(self) -> None:
        """Drop the current tick and generate one more at the far end."""
        self._keys[self._first_index] = self._generator.next()
        self._first_index = (self._first_index + 1) & (SOLUTION_SIZE - 1)
