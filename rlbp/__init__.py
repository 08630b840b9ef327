"""Module top-level functionality."""

from rlbp.conf import rcParams
from rlbp.types import InvariantError
from rlbp.texture import RLBP, rlbp_histogram
