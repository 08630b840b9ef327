"""Redistribution of a raw LBP code histogram into uniform pattern bins.

The count of each code is spread over its siblings (see `siblings`). A code
without siblings keeps its count in its own bin. Integer division is used, as
in the established descriptor, so some mass is truncated away.
"""

import numpy as np

from .siblings import SIBLINGS
from .types import InvariantError
from .uniform import N_BINS, N_CODES, UNIFORM_LUT, UNIFORM_MASK


def sibling_stats(code):
    """Return the number of siblings, and the number of uniform ones."""
    siblings = SIBLINGS[code]
    n_uniform = sum(1 for x in siblings if UNIFORM_MASK[x])
    return len(siblings), n_uniform


def contributions(code, count):
    """Yield (sibling, contribution) pairs for spreading count of code.

    Uniform siblings get count // Ti each, non-uniform ones
    count * ((Ti - Ti1) // Ti), where Ti is the number of siblings and Ti1 the
    number of uniform siblings.
    """
    n, n_uniform = sibling_stats(code)
    for sibling in sorted(SIBLINGS[code]):
        if UNIFORM_MASK[sibling]:
            yield sibling, count // n
        else:
            yield sibling, count * ((n - n_uniform) // n)


def redistribute(raw, lut=UNIFORM_LUT):
    """Turn a 256-bin raw code histogram into a 59-bin uniform pattern
    histogram of type int64.
    """
    if lut is None:
        raise InvariantError('Uniformity lookup table not built')
    raw = np.asarray(raw, dtype=np.int64)
    if raw.shape != (N_CODES,):
        raise InvariantError('Invalid raw histogram shape: {}'.format(
            raw.shape))
    hist = np.zeros(N_BINS, dtype=np.int64)
    for code, count in enumerate(raw):
        if not SIBLINGS[code]:
            hist[lut[code]] += count
            continue
        for sibling, contribution in contributions(code, count):
            hist[lut[sibling]] += contribution
    return hist
