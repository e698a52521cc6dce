"""
Predictive Discounted CFR+ implementation
"Equilibrium Finding with Weighted Regret Minimization" (arXiv:2404.13891)
"""
from .discount import check_exponent, discount_factor
from .minimizer import RegretMinimizer


class PDCFRPlus(RegretMinimizer):
    """
    PDCFR+ - DCFR+ discounting combined with PCFR+ prediction

        R_t     = max(0, R_{t-1} * d(t-1, α) + r_t)
        p_{t+1} = regret_match(R_t * d(t, α) + r_t)
        S_t     = S_{t-1} * ((t-1)/t)^γ + p_{t+1}

    Recommended: α=2.3, γ=5
    """

    name = 'pdcfr+'
    clip_regret = True

    def __init__(self, n_actions, alpha=2.3, gamma=5.0):
        super().__init__(n_actions)
        self.alpha = check_exponent('alpha', alpha)
        self.gamma = check_exponent('gamma', gamma)

    def _regret_discounts(self, t):
        d = discount_factor(t - 1, self.alpha)
        return d, d

    def _prediction_discount(self, t):
        return discount_factor(t, self.alpha)

    def _strategy_weights(self, t):
        return ((t - 1) / t) ** self.gamma, 1.0
