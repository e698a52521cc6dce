"""
Two-player zero-sum matrix games

The row player receives A[i, j] and the column player -A[i, j]. Reward
vectors handed to a regret minimizer are counterfactual: for each of the
player's own actions, what it would have earned against the opponent's move.
"""
import numpy as np
from scipy.optimize import linprog
from typing import Tuple

from cfr.errors import InvalidActionCount, InvalidParameter, RegretError


class InvalidAction(RegretError):
    """An integer does not name an action of the game"""


class MatrixGame:
    """
    Zero-sum game given by the row player's payoff matrix
    """

    def __init__(self, payoff, name="matrix"):
        A = np.array(payoff, dtype=np.float64)
        if A.ndim != 2:
            raise InvalidParameter(f"payoff must be a 2-D matrix, got shape {A.shape}")
        if A.shape[0] < 1 or A.shape[1] < 1:
            raise InvalidActionCount(min(A.shape))
        A.flags.writeable = False
        self.A = A
        self.name = name
        self.n_rows, self.n_cols = A.shape
        self._equilibrium = None

    @classmethod
    def random(cls, n_actions, rng: np.random.Generator, name="random"):
        """Square game with payoffs drawn uniformly from [-1, 1]"""
        if n_actions < 1:
            raise InvalidActionCount(n_actions)
        return cls(rng.uniform(-1.0, 1.0, size=(n_actions, n_actions)), name=name)

    @property
    def num_actions(self) -> Tuple[int, int]:
        return self.n_rows, self.n_cols

    def check_action(self, player: int, action: int) -> int:
        """Range-checked action index for a player"""
        bound = self.n_rows if player == 0 else self.n_cols
        if not 0 <= action < bound:
            raise InvalidAction(f"player {player} action {action} out of range [0, {bound})")
        return int(action)

    def row_rewards(self, col_action: int) -> np.ndarray:
        """Counterfactual rewards of each row action against col_action"""
        return self.A[:, self.check_action(1, col_action)]

    def col_rewards(self, row_action: int) -> np.ndarray:
        """Counterfactual rewards of each column action against row_action"""
        return -self.A[self.check_action(0, row_action), :]

    def expected_row_rewards(self, y: np.ndarray) -> np.ndarray:
        """Row rewards against a mixed column strategy y"""
        return self.A @ y

    def expected_col_rewards(self, x: np.ndarray) -> np.ndarray:
        """Column rewards against a mixed row strategy x"""
        return -(self.A.T @ x)

    def value(self, x: np.ndarray, y: np.ndarray) -> float:
        """Row player's expected payoff under (x, y)"""
        return float(x @ self.A @ y)

    def solve_exact(self):
        """
        Exact equilibrium via linear programming

        Returns:
            (x, y, v): row strategy, column strategy and game value
        """
        if self._equilibrium is None:
            x, v = _maximin(self.A)
            y, _ = _maximin(-self.A.T)
            self._equilibrium = (x, y, v)
        return self._equilibrium

    def __repr__(self):
        return f"MatrixGame({self.name}, {self.n_rows}x{self.n_cols})"


def _maximin(A: np.ndarray):
    """
    max_x min_j (x^T A)_j over the simplex

    Variables are [x_0..x_{m-1}, v]; minimise -v subject to
    v - (A^T x)_j <= 0 for every column j and sum(x) = 1.
    """
    m, n = A.shape
    c = np.zeros(m + 1)
    c[-1] = -1.0
    A_ub = np.hstack([-A.T, np.ones((n, 1))])
    b_ub = np.zeros(n)
    A_eq = np.hstack([np.ones((1, m)), np.zeros((1, 1))])
    b_eq = np.ones(1)
    bounds = [(0.0, None)] * m + [(None, None)]

    result = linprog(c, A_ub=A_ub, b_ub=b_ub, A_eq=A_eq, b_eq=b_eq,
                     bounds=bounds, method='highs')
    if not result.success:
        raise RegretError(f"equilibrium LP failed: {result.message}")

    x = np.clip(result.x[:m], 0.0, None)
    return x / x.sum(), float(result.x[-1])
