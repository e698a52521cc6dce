"""
Lookup of regret minimizers by name
"""
from .cfr_plus import CFRPlus
from .dcfr import DiscountedCFR
from .dcfr_plus import DCFRPlus
from .errors import UnknownVariant
from .linear_cfr import LinearCFR
from .pcfr_plus import PCFRPlus
from .pdcfr_plus import PDCFRPlus
from .vanilla import VanillaCFR

VARIANTS = {
    cls.name: cls
    for cls in (VanillaCFR, CFRPlus, DiscountedCFR, DCFRPlus, LinearCFR, PCFRPlus, PDCFRPlus)
}

DISPLAY_NAMES = {
    'vanilla': 'Vanilla CFR',
    'cfr+': 'CFR+',
    'dcfr': 'DCFR',
    'dcfr+': 'DCFR+',
    'linear': 'Linear CFR',
    'pcfr+': 'PCFR+',
    'pdcfr+': 'PDCFR+',
}


def get_variant(name):
    """Minimizer class registered under name (case-insensitive)"""
    try:
        return VARIANTS[name.lower()]
    except (KeyError, AttributeError):
        raise UnknownVariant(
            f"unknown variant {name!r}, expected one of: {', '.join(VARIANTS)}"
        ) from None


def create_minimizer(name, n_actions, **params):
    """Build the named variant; params go to its constructor (e.g. alpha, gamma)"""
    return get_variant(name)(n_actions, **params)
