"""Local Binary Pattern (LBP) codes over a 3x3 neighbourhood.

Each neighbour that is at least as bright as the center sets its bit. Bits are
weighted clockwise starting from top-left:

      1   2   4
    128   c   8
     64  32  16

Image border is left out, as it lacks full neighbourhood.
"""

import numpy as np

from .uniform import N_CODES
from .util import clip_range

# Neighbour position relative to center (row, column) and its weight.
NEIGHBOURS = (
    ((-1, -1), 1),
    ((-1, 0), 2),
    ((-1, 1), 4),
    ((0, 1), 8),
    ((1, 1), 16),
    ((1, 0), 32),
    ((1, -1), 64),
    ((0, -1), 128),
    )


def as_grid(img):
    """Check and return image as a 2D uint8 array. None is an empty image."""
    if img is None:
        return np.zeros((0, 0), dtype=np.uint8)
    img = np.asanyarray(img)
    if img.ndim != 2:
        raise ValueError('Invalid image dimensionality: {}'.format(img.ndim))
    if img.dtype != np.uint8:
        raise ValueError('Invalid image type: {}'.format(img.dtype))
    return img


def interior_rows(img, row_start=0, row_end=None):
    """Return center rows [start, stop) that have full neighbourhood."""
    rows = img.shape[0]
    if row_end is None:
        row_end = rows
    return clip_range(row_start, row_end, 1, rows - 1)


def lbp_codes(img, row_start=0, row_end=None):
    """Return the LBP code map of interior pixels on center rows
    [row_start, row_end), shape (rows, columns - 2).

    Images smaller than 3x3 give an empty map.
    """
    img = as_grid(img)
    start, stop = interior_rows(img, row_start, row_end)
    cols = img.shape[1]
    if cols < 3:
        stop = start
    center = img[start:stop, 1:cols-1]
    codes = np.zeros(center.shape, dtype=np.uint8)
    for (dr, dc), weight in NEIGHBOURS:
        neighbour = img[start+dr:stop+dr, 1+dc:cols-1+dc]
        codes[neighbour >= center] |= weight
    return codes


def raw_histogram(img, row_start=0, row_end=None):
    """Return the 256-bin frequency histogram of LBP codes on center rows
    [row_start, row_end).
    """
    codes = lbp_codes(img, row_start, row_end)
    return np.bincount(codes.ravel(), minlength=N_CODES).astype(np.int64)
