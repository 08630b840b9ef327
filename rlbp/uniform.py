"""Uniform pattern classification of 8-bit LBP codes.

A uniform pattern is a circular sequence of bits that contains at most two
0-1 or 1-0 transitions (e.g. 11110011, 00110000). There are 58 of them among
the 256 possible codes. Each uniform code gets its own histogram bin, all the
rest share bin zero.

See Ojala et al. 2002: Multiresolution gray-scale and rotation invariant
texture classification with local binary patterns. More details in
http://www.bmva.org/bmvc/2013/Papers/paper0122/paper0122.pdf
"""

import numpy as np

from .types import InvariantError

N_BITS = 8
N_CODES = 2**N_BITS
N_UNIFORM = 58
N_BINS = N_UNIFORM + 1  # Bin zero collects non-uniform codes.


def transitions(code):
    """Count bit transitions of an 8-bit code as a circular sequence."""
    code = int(code)
    rotated = ((code >> 1) | (code << (N_BITS - 1))) & (N_CODES - 1)
    return bin(code ^ rotated).count('1')


def is_uniform_pattern(code):
    """Tell whether an 8-bit code has at most two circular transitions."""
    return transitions(code) <= 2


def build_uniformity_lut():
    """Build a lookup table that maps all 8-bit codes to histogram bins.

    Non-uniform codes map to bin 0, the 58 uniform codes to bins 1..58 in
    ascending order of the code. The returned array is read-only.
    """
    lut = np.zeros(N_CODES, dtype=np.uint8)
    uniforms = 0
    for code in range(N_CODES):
        if is_uniform_pattern(code):
            uniforms += 1
            lut[code] = uniforms
    if uniforms != N_UNIFORM:
        raise InvariantError('Uniform pattern count: {}'.format(uniforms))
    lut.flags.writeable = False
    return lut


UNIFORM_LUT = build_uniformity_lut()
UNIFORM_MASK = UNIFORM_LUT > 0
UNIFORM_MASK.flags.writeable = False
