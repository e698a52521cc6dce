"""
DCFR+ implementation
"Equilibrium Finding with Weighted Regret Minimization" (arXiv:2404.13891)
"""
from .discount import check_exponent, discount_factor
from .minimizer import RegretMinimizer


class DCFRPlus(RegretMinimizer):
    """
    DCFR+ - DCFR discounting with CFR+ clipping

    The clip happens after the new regret is added, not before:

        R_t = max(0, R_{t-1} * d(t-1, α) + r_t)
        S_t = S_{t-1} * ((t-1)/t)^γ + p_t

    with d(t, α) = t^α / (t^α + 1). Recommended: α=1.5, γ=4
    """

    name = 'dcfr+'
    clip_regret = True

    def __init__(self, n_actions, alpha=1.5, gamma=4.0):
        super().__init__(n_actions)
        self.alpha = check_exponent('alpha', alpha)
        self.gamma = check_exponent('gamma', gamma)

    def _regret_discounts(self, t):
        d = discount_factor(t - 1, self.alpha)
        return d, d

    def _strategy_weights(self, t):
        return ((t - 1) / t) ** self.gamma, 1.0
