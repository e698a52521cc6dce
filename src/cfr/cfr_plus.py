"""
CFR+ implementation
Tammelin et al. 2014
"""
from .minimizer import RegretMinimizer


class CFRPlus(RegretMinimizer):
    """
    CFR+ - regret is floored at 0 after each update

        R_t = max(0, R_{t-1} + r_t)

    not max(0, R_{t-1}) + r_t, so an action that falls behind starts from 0
    the moment it becomes good again. Strategy sum is a plain running sum.
    """

    name = 'cfr+'
    clip_regret = True
