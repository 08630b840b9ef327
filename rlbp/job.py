"""Functionality related to tasking and parallelization."""

# https://joblib.readthedocs.io/en/latest/parallel.html

from functools import partial

import joblib

_parallel_defaults = dict(
    # backend=None,
    verbose=0,
    # timeout=None,
    # pre_dispatch='2 * n_jobs',
    # batch_size='auto',
    )

Parallel = partial(joblib.Parallel, **_parallel_defaults)
delayed = partial(joblib.delayed)
