"""Zero-sum matrix games and the self-play driver"""
from .matrix_game import InvalidAction, MatrixGame
from .rps import RPSAction, create_rps, create_weighted_rps
from .self_play import SelfPlayRunner

__all__ = [
    'MatrixGame',
    'InvalidAction',
    'RPSAction',
    'create_rps',
    'create_weighted_rps',
    'SelfPlayRunner',
]
