"""
Predictive CFR+ implementation
Farina, Kroer & Sandholm 2021
"""
from .minimizer import RegretMinimizer


class PCFRPlus(RegretMinimizer):
    """
    PCFR+ - CFR+ that plays against a forecast of the next regret

    The latest instantaneous regret is used as the prediction m of the next
    one:

        R_t     = max(0, R_{t-1} + r_t)
        p_{t+1} = regret_match(R_t + r_t)
        S_t     = S_{t-1} + t^2 * p_{t+1}
    """

    name = 'pcfr+'
    clip_regret = True

    def _prediction_discount(self, t):
        return 1.0

    def _strategy_weights(self, t):
        return 1.0, float(t * t)
