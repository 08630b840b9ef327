"""Sibling codes for approximate rotation invariance.

Instead of rotating each neighbourhood, some local 3-bit sub-patterns that
make a code non-uniform are replaced by a nearby "fixed" version:

    y3 = (010) -> y3r = (000)
    y6 = (101) -> y6r = (111)

The windows are linear, not circular: offset i covers bits i, i+1, i+2, so
offsets run from 0 to 5. Siblings of a code are all the distinct codes that
can be produced by doing the replacements at strictly increasing offsets, in
any combination. A replacement at one offset may create or destroy a pattern
at the following overlapping offsets, so each variant is examined as it is.
"""

from .types import InvariantError
from .uniform import N_BITS, N_CODES

Y3, Y3R = 0b010, 0b000
Y6, Y6R = 0b101, 0b111
REPLACEMENTS = {Y3: Y3R, Y6: Y6R}
WINDOW = 0b111
N_OFFSETS = N_BITS - 2
MAX_BRANCHES = 2**N_OFFSETS


def window(code, offset):
    """Return the 3-bit window value of code at offset."""
    return (code >> offset) & WINDOW


def substitution(code, offset):
    """Return code with the 3-bit window at offset replaced, or None if no
    replacement applies there.
    """
    replacement = REPLACEMENTS.get(window(code, offset))
    if replacement is None:
        return None
    return (code & ~(WINDOW << offset) & (N_CODES - 1)) | (replacement << offset)


def sibling_set(code):
    """Return all codes different from code that can be created by replacing
    y3 and y6 patterns by y3r and y6r, as a frozenset.

    Work items are (next offset, variant) pairs. Skipping a replacement is the
    same as just continuing the scan, so only the replaced variants are pushed.
    Each item stands for one distinct set of offsets used, hence the bound.
    """
    code = int(code)
    result = set()
    stack = [(0, code)]
    branches = 0
    while stack:
        start, value = stack.pop()
        branches += 1
        if branches > MAX_BRANCHES:
            raise InvariantError('Too many branches for code {}'.format(code))
        for offset in range(start, N_OFFSETS):
            replaced = substitution(value, offset)
            if replaced is not None:
                stack.append((offset + 1, replaced))
        if value != code:
            result.add(value)
    return frozenset(result)


SIBLINGS = tuple(sibling_set(x) for x in range(N_CODES))
