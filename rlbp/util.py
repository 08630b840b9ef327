"""Utility functionality."""

import logging
import os

import numpy as np


def get_loglevel(name):
    """Return the numeric correspondent of a logging level name."""
    try:
        return getattr(logging, name.upper())
    except AttributeError:
        raise ValueError('Invalid log level: {}'.format(name))


def cpu_count():
    """Return CPU count, if possible."""
    n = os.cpu_count()
    if n is None:
        raise OSError(None, 'Could not determine CPU count')
    return n


def get_n_jobs(maxjobs, default=1):
    """Take a pick how many jobs we want to run simultaneously.

    Parameter maxjobs is an absolute number, a portion of CPU count (below
    one), or a joblib-type negative count (-1 => all, -2 => all but one, etc).
    """
    try:
        if maxjobs < 0:
            n = cpu_count() + maxjobs + 1
        elif maxjobs < 1:
            n = cpu_count() * maxjobs
        else:
            n = maxjobs
    except OSError:
        n = default
    return int(max(1, n))


def row_ranges(rows, parts):
    """Split rows [0, rows) into at most `parts` disjoint contiguous ranges.

    Returns a list of (start, stop) tuples, empty ranges left out.
    """
    if parts < 1:
        raise ValueError('Invalid number of parts: {}'.format(parts))
    chunks = np.array_split(np.arange(rows), parts)
    return [(int(x[0]), int(x[-1]) + 1) for x in chunks if len(x)]


def clip_range(start, stop, lo, hi):
    """Clip half-open range [start, stop) into [lo, hi). May become empty."""
    start = max(start, lo)
    stop = min(stop, hi)
    return start, max(start, stop)
