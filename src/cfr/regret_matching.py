"""
Regret matching and the normalisation helpers shared by every variant

All functions work on float64 numpy arrays. The in-place versions write into
a caller-owned buffer so the per-iteration update never allocates.
"""
import numpy as np


def uniform_weights(n: int) -> np.ndarray:
    """Uniform distribution over n actions"""
    return np.full(n, 1.0 / n)


def normalize_inplace(p: np.ndarray) -> np.ndarray:
    """
    Scale non-negative values in p so they sum to 1

    Falls back to uniform when the sum is not positive. A NaN sum is not
    caught here and spreads to every entry.
    """
    total = p.sum()
    if total <= 0.0:
        p.fill(1.0 / len(p))
    else:
        p /= total
    return p


def normalize_by_sum(values: np.ndarray) -> np.ndarray:
    """Return values / sum(values) as a new array, uniform if the sum is not positive"""
    total = values.sum()
    if total <= 0.0:
        return uniform_weights(len(values))
    return values / total


def regret_match(regrets: np.ndarray, out: np.ndarray) -> np.ndarray:
    """
    Regret matching: out[i] = max(0, regrets[i]) / sum(max(0, regrets))

    All-zero or all-negative regret gives uniform play.

    Args:
        regrets: Accumulated (or predicted) regret per action
        out: Buffer of the same length that receives the strategy

    Returns:
        out
    """
    np.maximum(regrets, 0.0, out=out)
    return normalize_inplace(out)
