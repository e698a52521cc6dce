"""
Self-play driver: two regret minimizers learning a matrix game
"""
import copy
import time

import numpy as np

from cfr.errors import InvalidParameter
from cfr.registry import create_minimizer
from utils.metrics import compute_exploitability

MODES = ('sampled', 'expected')


class SelfPlayRunner:
    """
    Runs two minimizers against each other

    In 'sampled' mode each player draws a concrete action every round and
    the opponent is credited with the matching reward column, as in
    repeated play. In 'expected' mode both players are credited with their
    rewards against the opponent's full mixed strategy.
    """

    def __init__(self, game, minimizer_one, minimizer_two, mode='sampled'):
        if mode not in MODES:
            raise InvalidParameter(f"mode must be one of {MODES}, got {mode!r}")
        if minimizer_one.n_actions != game.n_rows or minimizer_two.n_actions != game.n_cols:
            raise InvalidParameter(
                f"minimizers have {minimizer_one.n_actions}/{minimizer_two.n_actions} actions, "
                f"game {game.name} needs {game.n_rows}/{game.n_cols}"
            )
        self.game = game
        self.matcher_one = minimizer_one
        self.matcher_two = minimizer_two
        self.mode = mode
        self.t = 0

        self._pending_one = np.zeros(game.n_rows)
        self._pending_two = np.zeros(game.n_cols)

    @classmethod
    def for_variant(cls, game, variant, mode='sampled', **params):
        """Both players use a fresh minimizer of the named variant"""
        return cls(
            game,
            create_minimizer(variant, game.n_rows, **params),
            create_minimizer(variant, game.n_cols, **params),
            mode=mode,
        )

    @classmethod
    def with_matchers(cls, game, matcher, mode='sampled'):
        """Both players start from copies of one pre-configured minimizer"""
        return cls(game, copy.deepcopy(matcher), copy.deepcopy(matcher), mode=mode)

    def run_one(self, rng: np.random.Generator):
        """Play one sampled round and queue the rewards it produced"""
        a1 = self.matcher_one.next_action(rng)
        a2 = self.matcher_two.next_action(rng)
        self._pending_one += self.game.row_rewards(a2)
        self._pending_two += self.game.col_rewards(a1)

    def update_regret(self):
        """Hand queued rewards to both minimizers and clear the queue"""
        self.matcher_one.update_regret(self._pending_one)
        self.matcher_two.update_regret(self._pending_two)
        self._pending_one.fill(0.0)
        self._pending_two.fill(0.0)
        self.t += 1

    def iteration(self, rng: np.random.Generator = None):
        """One round of self-play followed by one regret update"""
        if self.mode == 'sampled':
            if rng is None:
                rng = np.random.default_rng()
            self.run_one(rng)
        else:
            x = self.matcher_one.current_strategy()
            y = self.matcher_two.current_strategy()
            self._pending_one += self.game.expected_row_rewards(y)
            self._pending_two += self.game.expected_col_rewards(x)
        self.update_regret()

    def best_weight(self) -> np.ndarray:
        """Average strategy of the first player"""
        return self.matcher_one.best_weight()

    def opponent_best_weight(self) -> np.ndarray:
        """Average strategy of the second player"""
        return self.matcher_two.best_weight()

    def exploitability(self) -> float:
        """NashConv of the current average strategy profile"""
        return compute_exploitability(self.game, self.best_weight(), self.opponent_best_weight())

    def train(self, iterations, rng: np.random.Generator = None, log_every=0):
        """
        Run iterations rounds of self-play

        Args:
            iterations: Number of regret updates
            rng: Randomness for sampled mode (a fresh default_rng if None)
            log_every: Print progress every this many iterations (0 = quiet)

        Returns:
            List of (iteration, exploitability) pairs at each log point
        """
        if rng is None:
            rng = np.random.default_rng()
        if log_every:
            print(f"\nTraining {self.matcher_one.name} on {self.game.name} "
                  f"for {iterations} iterations ({self.mode})...")
        history = []
        start_time = time.time()

        for i in range(iterations):
            self.iteration(rng)

            if log_every and (i + 1) % log_every == 0:
                elapsed = time.time() - start_time
                exploit = self.exploitability()
                history.append((self.t, exploit))
                print(f"  Iter {self.t:6d} | exploit {exploit:.6f} | {elapsed:6.2f}s "
                      f"| {(i + 1) / max(elapsed, 1e-9):8.1f} iter/s")

        if log_every:
            print(f"✅ Complete: {time.time() - start_time:.2f}s")
        return history
