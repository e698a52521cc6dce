"""
Rock-paper-scissors
"""
import operator
from enum import IntEnum

import numpy as np

from .matrix_game import InvalidAction, MatrixGame


class RPSAction(IntEnum):
    ROCK = 0
    PAPER = 1
    SCISSORS = 2

    @classmethod
    def from_index(cls, i):
        """
        Checked conversion from a sampled index

        Public helper for callers that sample from an RPS strategy directly;
        SelfPlayRunner works on plain MatrixGame indices and does not use it.
        """
        try:
            i = operator.index(i)
        except TypeError:
            raise InvalidAction(f"rock-paper-scissors index must be an integer, got {i!r}") from None
        if not 0 <= i < len(_ACTIONS):
            raise InvalidAction(f"no rock-paper-scissors action with index {i}")
        return _ACTIONS[i]

    def to_reward(self) -> np.ndarray:
        """Counterfactual rewards of (rock, paper, scissors) against this action"""
        return _REWARDS[self]


# Row player's payoff, rows/cols in RPSAction order
PAYOFF = np.array([
    [0.0, -1.0, 1.0],
    [1.0, 0.0, -1.0],
    [-1.0, 1.0, 0.0],
])
PAYOFF.flags.writeable = False

_ACTIONS = tuple(RPSAction)
_REWARDS = {action: PAYOFF[:, action] for action in _ACTIONS}

NASH = np.full(3, 1.0 / 3.0)
NASH.flags.writeable = False


def create_rps():
    """Rock-paper-scissors as a matrix game"""
    return MatrixGame(PAYOFF, name="rps")


def create_weighted_rps():
    """RPS where wins with rock/scissors pay 2; equilibrium is (1/4, 1/2, 1/4)"""
    return MatrixGame([
        [0.0, -1.0, 2.0],
        [1.0, 0.0, -1.0],
        [-2.0, 1.0, 0.0],
    ], name="weighted_rps")
