"""
Discounted CFR implementation
Based on Brown & Sandholm 2019: "Solving Imperfect-Information Games via Discounted Regret Minimization"
"""
from .discount import LCFR, PRUNING_SAFE, RECOMMENDED, DiscountParams, discount_factor
from .minimizer import RegretMinimizer


class DiscountedCFR(RegretMinimizer):
    """
    Discounted CFR (DCFR)

    On iteration t, before the new regret is added:
    - Positive regrets multiplied by: t^α / (t^α + 1)
    - Negative regrets multiplied by: t^β / (t^β + 1)
    - Strategy sum multiplied by: (t / (t + 1))^γ

    Standard parameters from paper: α=1.5, β=0, γ=2
    """

    name = 'dcfr'

    def __init__(self, n_actions, alpha=1.5, beta=0.0, gamma=2.0):
        super().__init__(n_actions)
        self.params = DiscountParams(alpha=alpha, beta=beta, gamma=gamma)

    @classmethod
    def with_params(cls, n_actions, params: DiscountParams):
        return cls(n_actions, alpha=params.alpha, beta=params.beta, gamma=params.gamma)

    @classmethod
    def lcfr(cls, n_actions):
        """DCFR_{1,1,1}: every discount is linear"""
        return cls.with_params(n_actions, LCFR)

    @classmethod
    def recommended(cls, n_actions):
        return cls.with_params(n_actions, RECOMMENDED)

    @classmethod
    def pruning_safe(cls, n_actions):
        """DCFR_{1.5,0.5,2}"""
        return cls.with_params(n_actions, PRUNING_SAFE)

    @property
    def alpha(self):
        return self.params.alpha

    @property
    def beta(self):
        return self.params.beta

    @property
    def gamma(self):
        return self.params.gamma

    def _regret_discounts(self, t):
        return discount_factor(t, self.params.alpha), discount_factor(t, self.params.beta)

    def _strategy_weights(self, t):
        return (t / (t + 1)) ** self.params.gamma, 1.0

    def __repr__(self):
        return (f"DiscountedCFR(n_actions={self.n_actions}, α={self.alpha}, "
                f"β={self.beta}, γ={self.gamma}, t={self.t})")
