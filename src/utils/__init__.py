"""
Utilities module
"""
from .metrics import compute_exploitability, compute_nash_conv, max_deviation

__all__ = ['compute_exploitability', 'compute_nash_conv', 'max_deviation']
