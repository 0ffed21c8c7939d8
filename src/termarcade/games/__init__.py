"""Dashboard games for termarcade."""

from termarcade.games.base import BaseGame, GameContext
from termarcade.games.motion import Parabola
from termarcade.games.solution import Solution, SolutionGenerator, SOLUTION_SIZE
from termarcade.games.trex import TRexGame

__all__ = [
    "BaseGame",
    "GameContext",
    "Parabola",
    "Solution",
    "SolutionGenerator",
    "SOLUTION_SIZE",
    "TRexGame",
]
