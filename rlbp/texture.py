"""Texture analysis.

Rotation invariant Local Binary Pattern (LBP) histogram: 3x3 neighbourhood
codes are collected into a 256-bin histogram, which is then redistributed into
59 bins (58 uniform patterns and one for the rest), spreading counts over
sibling patterns for approximate rotation invariance.
"""

from collections import OrderedDict

import numpy as np

from . import codes, redistribute, uniform
from .reduction import Pipeline, Reduction
from .types import InvariantError

EPSILON = 1e-6


class RLBP(Reduction):
    """Rotation invariant uniform LBP histogram reduction."""
    def __init__(self, name='RLBP',
                 description='Rotation invariant uniform LBP histogram'):
        super().__init__(name, description)
        self.lut = None

    def setup(self):
        self.inputs[0] = codes.as_grid(self.inputs[0])
        self.lut = uniform.UNIFORM_LUT
        self.output = np.zeros(uniform.N_CODES, dtype=np.int64)
        self.ready = True

    def scan(self, row_start, row_end):
        return codes.raw_histogram(self.inputs[0], row_start, row_end)

    def finalize(self):
        if not self.ready or self.done:
            raise InvariantError('Invalid finalize: {}'.format(self))
        self.output = redistribute.redistribute(self.output, lut=self.lut)
        self.done = True


METHODS = OrderedDict([
    ('rlbp', RLBP),
])


def get_reduction(method):
    """Return a new reduction object for a method name."""
    try:
        return METHODS[method]()
    except KeyError:
        raise ValueError('Invalid texture method: {}'.format(method))


def rlbp_histogram(img, n_jobs=None, verbose=None):
    """Return the 59-bin rotation invariant uniform LBP histogram of an 8-bit
    grayscale image. Images smaller than 3x3 give all zeros.
    """
    pipeline = Pipeline(RLBP(), verbose=verbose, n_jobs=n_jobs)
    return pipeline.run(img)


def normalized(hist):
    """Return histogram as frequencies that sum to one (unless all zero)."""
    hist = np.asarray(hist, dtype=np.float64)
    total = hist.sum()
    if total == 0:
        return hist
    return hist / total


def hist_dist(hist1, hist2, method='chi-squared', eps=EPSILON):
    """Measure the distance of two LBP frequency histograms.

    Method can be one of the following:
    intersection: histogram intersection distance measure
    log-likelihood: log-likelihood distance measure
    chi-squared: distance measure
    """
    a = np.asarray(hist1, dtype=np.float64)
    b = np.asarray(hist2, dtype=np.float64)
    if a.shape != b.shape:
        raise ValueError('Histogram shape mismatch: {}, {}'.format(a.shape,
                                                                   b.shape))
    if method == 'intersection':
        r = np.sum(np.minimum(a, b))
    elif method == 'log-likelihood':
        r = -np.sum(a * np.log(np.maximum(b, eps)))
    elif method == 'chi-squared':
        r = np.sum((a - b)**2 / np.maximum(a + b, eps))
    else:
        raise ValueError('Unknown distance measure: {}'.format(method))
    return float(r)
