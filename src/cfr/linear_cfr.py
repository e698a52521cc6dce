"""
Linear CFR implementation
Brown & Sandholm 2019
"""
from .minimizer import RegretMinimizer


class LinearCFR(RegretMinimizer):
    """
    Linear CFR - iteration t counts t times

    Regret:   R_t = R_{t-1} + t * r_t
    Strategy: S_t = S_{t-1} + t * p_t
    """

    name = 'linear'

    def _regret_weight(self, t):
        return float(t)

    def _strategy_weights(self, t):
        return 1.0, float(t)
