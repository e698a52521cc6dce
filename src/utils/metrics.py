"""
Metrics for evaluating average strategies
"""
import numpy as np


def compute_exploitability(game, x, y):
    """
    NashConv of the profile (x, y) in a zero-sum matrix game

    Sum over both players of what a best response gains over the profile.
    0 exactly at a Nash equilibrium.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    br0 = game.expected_row_rewards(y)
    br1 = game.expected_col_rewards(x)
    exploit_0 = np.max(br0) - np.dot(x, br0)
    exploit_1 = np.max(br1) - np.dot(y, br1)
    return float(exploit_0 + exploit_1)


def compute_nash_conv(game, x, y):
    """
    Exploitability as the average best-response gain (NashConv / 2)
    """
    return compute_exploitability(game, x, y) / 2.0


def max_deviation(weights, target):
    """Largest absolute difference between a strategy and a target strategy"""
    return float(np.max(np.abs(np.asarray(weights) - np.asarray(target))))
