"""
CFR-family regret minimizers and alias sampling
"""
from .alias import WeightedAliasIndex, sample_action
from .cfr_plus import CFRPlus
from .dcfr import DiscountedCFR
from .dcfr_plus import DCFRPlus
from .discount import DiscountParams
from .errors import (
    DimensionMismatch,
    InvalidActionCount,
    InvalidParameter,
    InvalidWeights,
    RegretError,
    UnknownVariant,
)
from .linear_cfr import LinearCFR
from .minimizer import RegretMinimizer
from .pcfr_plus import PCFRPlus
from .pdcfr_plus import PDCFRPlus
from .registry import VARIANTS, create_minimizer, get_variant
from .vanilla import VanillaCFR

__all__ = [
    'RegretMinimizer',
    'VanillaCFR',
    'CFRPlus',
    'DiscountedCFR',
    'DCFRPlus',
    'LinearCFR',
    'PCFRPlus',
    'PDCFRPlus',
    'DiscountParams',
    'WeightedAliasIndex',
    'sample_action',
    'VARIANTS',
    'create_minimizer',
    'get_variant',
    'RegretError',
    'InvalidActionCount',
    'DimensionMismatch',
    'InvalidWeights',
    'InvalidParameter',
    'UnknownVariant',
]
