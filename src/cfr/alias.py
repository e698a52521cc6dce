"""
Weighted sampling with Vose's alias method

Building the table is O(n); every draw afterwards is O(1) and touches two
table entries. The table is immutable, so one instance can be shared by any
number of readers. Rebuild it to reflect new weights.
"""
import numpy as np

from .errors import InvalidWeights


class WeightedAliasIndex:
    """
    Alias table over a non-negative weight vector

    prob[j] is the chance of keeping column j, alias[j] the index returned
    otherwise. Drawing a uniform column j and a uniform u in [0, 1) and
    returning j if u < prob[j] else alias[j] reproduces weights / sum(weights).
    """

    def __init__(self, weights):
        w = np.asarray(weights, dtype=np.float64)
        if w.ndim != 1 or w.size == 0:
            raise InvalidWeights(f"weights must be a non-empty 1-D sequence, got shape {w.shape}")
        if np.any(w < 0):
            raise InvalidWeights(f"weights must be non-negative, got {w.tolist()}")
        total = w.sum()
        if not np.isfinite(total) or not total > 0:
            raise InvalidWeights(f"weights must have a finite positive sum, got {total}")

        n = w.size
        self.n = n
        self.prob = np.zeros(n)
        self.alias = np.zeros(n, dtype=np.int64)

        # Scale to mean 1 so "small" means below average
        scaled = (w * (n / total)).tolist()
        small = [i for i in range(n) if scaled[i] < 1.0]
        large = [i for i in range(n) if scaled[i] >= 1.0]

        while small and large:
            s = small.pop()
            g = large.pop()
            self.prob[s] = scaled[s]
            self.alias[s] = g
            scaled[g] = (scaled[g] + scaled[s]) - 1.0
            if scaled[g] < 1.0:
                small.append(g)
            else:
                large.append(g)

        # Whatever is left is 1 up to rounding error
        for i in large:
            self.prob[i] = 1.0
            self.alias[i] = i
        for i in small:
            self.prob[i] = 1.0
            self.alias[i] = i

        self.prob.flags.writeable = False
        self.alias.flags.writeable = False

    def sample(self, rng: np.random.Generator, size=None):
        """
        Draw index(es) with probability proportional to the weights

        Args:
            rng: numpy Generator supplying the uniform draws
            size: None for a single int, otherwise the output shape

        Returns:
            int, or int64 array of the requested shape
        """
        if size is None:
            j = int(rng.integers(self.n))
            if rng.random() < self.prob[j]:
                return j
            return int(self.alias[j])

        j = rng.integers(self.n, size=size)
        u = rng.random(size=size)
        return np.where(u < self.prob[j], j, self.alias[j])

    def probabilities(self) -> np.ndarray:
        """Distribution encoded by the table, recovered from prob/alias"""
        p = self.prob / self.n
        recovered = p.copy()
        np.add.at(recovered, self.alias, (1.0 - self.prob) / self.n)
        return recovered

    def __len__(self):
        return self.n

    def __repr__(self):
        return f"WeightedAliasIndex(n={self.n})"


def sample_action(strategy, rng: np.random.Generator) -> int:
    """Draw one action index from a probability vector"""
    return WeightedAliasIndex(strategy).sample(rng)
