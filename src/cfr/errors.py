"""
Errors raised by regret minimizers and the alias sampler
"""


class RegretError(ValueError):
    """Base class for every error raised by this package"""


class InvalidActionCount(RegretError):
    """A minimizer was built with fewer than one action"""

    def __init__(self, n_actions):
        self.n_actions = n_actions
        super().__init__(f"n_actions must be a positive integer, got {n_actions!r}")


class DimensionMismatch(RegretError):
    """A reward vector does not match the configured number of actions"""

    def __init__(self, expected, got):
        self.expected = expected
        self.got = got
        super().__init__(f"rewards must have shape ({expected},), got {got}")


class InvalidWeights(RegretError):
    """Weights are empty, negative somewhere, or do not have a positive total"""


class InvalidParameter(RegretError):
    """A configuration parameter is outside its valid range"""


class UnknownVariant(InvalidParameter):
    """No regret minimizer is registered under the requested name"""
