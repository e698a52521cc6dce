"""
Vanilla regret matching (Hart & Mas-Colell 2000)
"""
from .minimizer import RegretMinimizer


class VanillaCFR(RegretMinimizer):
    """
    Plain regret matching

    R = R + r with no clipping, so negative regret accumulates and has to be
    paid back before an action is played again. The strategy sum is a
    uniform average over iterations.
    """

    name = 'vanilla'
