"""
Regret minimizer base class

Every CFR-family variant runs the same update:

    v = p . rewards                       expected reward of the held strategy
    r = rewards - v                       instantaneous regret
    R = R * discount(sign R) + w(t) * r   [clipped at 0 for "+" variants]
    p = regret_match(R)                   [or of d(t) * R + r when predictive]
    S = S * sd(t) + sw(t) * p

Subclasses only pick the numbers. The update writes into buffers allocated
once in __init__, so the per-iteration cost is O(n) with no allocation.
"""
import operator

import numpy as np

from .alias import sample_action
from .errors import DimensionMismatch, InvalidActionCount, InvalidWeights
from .regret_matching import normalize_by_sum, normalize_inplace, regret_match, uniform_weights


def _read_only(a: np.ndarray) -> np.ndarray:
    view = a.view()
    view.flags.writeable = False
    return view


class RegretMinimizer:
    """
    Per-player regret accumulator over a fixed set of n actions

    State:
        R: cumulative regret per action
        S: cumulative (weighted) strategy per action
        p: strategy to play next
        t: number of updates so far
    """

    name = 'base'
    clip_regret = False

    def __init__(self, n_actions):
        try:
            n = operator.index(n_actions)
        except TypeError:
            raise InvalidActionCount(n_actions) from None
        if n < 1:
            raise InvalidActionCount(n_actions)

        self.n_actions = n
        self.t = 0

        self._strategy = uniform_weights(n)
        self._regret = np.zeros(n)
        self._strategy_sum = np.zeros(n)

        # Scratch space reused by every update
        self._instant = np.zeros(n)
        self._scratch = np.zeros(n)
        self._mask = np.zeros(n, dtype=bool)

    @classmethod
    def from_strategy(cls, strategy, **params):
        """Build a minimizer that starts from a given strategy instead of uniform"""
        p = np.array(strategy, dtype=np.float64)
        if p.ndim != 1:
            raise InvalidWeights(f"initial strategy must be 1-D, got shape {p.shape}")
        if p.size == 0:
            raise InvalidActionCount(0)
        if np.any(p < 0) or not p.sum() > 0:
            raise InvalidWeights(f"initial strategy must be non-negative with a positive sum, got {p.tolist()}")
        minimizer = cls(p.size, **params)
        minimizer._strategy[:] = normalize_inplace(p)
        return minimizer

    # ------------------------------------------------------------------
    # Policy hooks

    def _regret_discounts(self, t):
        """Multipliers for (positive, non-positive) accumulated regret before iteration t"""
        return 1.0, 1.0

    def _regret_weight(self, t):
        """Weight of the instantaneous regret added on iteration t"""
        return 1.0

    def _prediction_discount(self, t):
        """None for non-predictive variants, else the multiplier d in d * R + r"""
        return None

    def _strategy_weights(self, t):
        """(multiplier for the old strategy sum, weight of the new strategy)"""
        return 1.0, 1.0

    # ------------------------------------------------------------------

    def update_regret(self, rewards):
        """
        Fold in one iteration of counterfactual rewards

        Args:
            rewards: Reward each action would have earned this iteration

        Raises:
            DimensionMismatch: rewards is not a length-n vector. Nothing is
                modified in that case.
        """
        rewards = np.asarray(rewards, dtype=np.float64)
        if rewards.shape != (self.n_actions,):
            raise DimensionMismatch(self.n_actions, rewards.shape)

        t = self.t + 1
        R = self._regret
        r = self._instant
        scratch = self._scratch
        mask = self._mask

        expected = np.dot(self._strategy, rewards)
        np.subtract(rewards, expected, out=r)

        pos, neg = self._regret_discounts(t)
        if pos != 1.0 or neg != 1.0:
            np.less_equal(R, 0.0, out=mask)
            np.multiply(R, neg, out=R, where=mask)
            np.logical_not(mask, out=mask)
            np.multiply(R, pos, out=R, where=mask)

        w = self._regret_weight(t)
        if w == 1.0:
            R += r
        else:
            np.multiply(r, w, out=scratch)
            R += scratch

        if self.clip_regret:
            np.maximum(R, 0.0, out=R)

        d = self._prediction_discount(t)
        if d is None:
            regret_match(R, out=self._strategy)
        else:
            np.multiply(R, d, out=scratch)
            scratch += r
            regret_match(scratch, out=self._strategy)

        decay, weight = self._strategy_weights(t)
        if decay != 1.0:
            self._strategy_sum *= decay
        if weight == 1.0:
            self._strategy_sum += self._strategy
        else:
            np.multiply(self._strategy, weight, out=scratch)
            self._strategy_sum += scratch

        self.t = t

    @property
    def num_updates(self) -> int:
        return self.t

    def current_strategy(self) -> np.ndarray:
        """Strategy to play on the next iteration (read-only view)"""
        return _read_only(self._strategy)

    def cumulative_strategy(self) -> np.ndarray:
        """Raw strategy sum S (read-only view)"""
        return _read_only(self._strategy_sum)

    @property
    def regrets(self) -> np.ndarray:
        """Cumulative regret R (read-only view)"""
        return _read_only(self._regret)

    def best_weight(self) -> np.ndarray:
        """
        Average strategy S / sum(S)

        This is the quantity that converges to a Nash equilibrium. Uniform
        before the first update.
        """
        return normalize_by_sum(self._strategy_sum)

    average_strategy = best_weight

    def next_action(self, rng: np.random.Generator) -> int:
        """Sample an action from the current strategy"""
        return sample_action(self._strategy, rng)

    def __repr__(self):
        return f"{type(self).__name__}(n_actions={self.n_actions}, t={self.t})"
