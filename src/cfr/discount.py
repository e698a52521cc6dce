"""
Discount parameters for Discounted CFR
Based on Brown & Sandholm 2019: "Solving Imperfect-Information Games via Discounted Regret Minimization"
"""
import math
from dataclasses import dataclass

from .errors import InvalidParameter


def check_exponent(name, value):
    """Exponents must be finite and non-negative"""
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidParameter(f"{name} must be a real number, got {value!r}") from None
    if not math.isfinite(value) or value < 0.0:
        raise InvalidParameter(f"{name} must be a finite non-negative number, got {value!r}")
    return value


def discount_factor(t, exp):
    """
    t^exp / (t^exp + 1)

    Returns 0.5 for exp = 0 and any t > 0, and approaches 1 faster as exp
    grows. t = 0 gives 0, which drops all history on the first iteration.

    Evaluated as 1 / (1 + t^-exp): for t >= 1 the power is at most 1 and can
    only underflow, so large exponents saturate at 1.0.
    """
    if t <= 0:
        return 0.0
    return 1.0 / (1.0 + float(t) ** -exp)


@dataclass(frozen=True)
class DiscountParams:
    """
    DCFR exponents

    - alpha: positive regrets are multiplied by t^α / (t^α + 1)
    - beta:  negative regrets are multiplied by t^β / (t^β + 1)
    - gamma: the strategy sum is multiplied by (t / (t + 1))^γ
    """
    alpha: float = 1.5
    beta: float = 0.0
    gamma: float = 2.0

    def __post_init__(self):
        for name in ('alpha', 'beta', 'gamma'):
            object.__setattr__(self, name, check_exponent(name, getattr(self, name)))


# Linear CFR expressed as DCFR_{1,1,1}
LCFR = DiscountParams(alpha=1.0, beta=1.0, gamma=1.0)

# DCFR_{1.5,0,2}, the paper's recommended setting
RECOMMENDED = DiscountParams(alpha=1.5, beta=0.0, gamma=2.0)

# DCFR_{1.5,0.5,2}, safer with regret-based pruning
PRUNING_SAFE = DiscountParams(alpha=1.5, beta=0.5, gamma=2.0)
