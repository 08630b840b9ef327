"""Image processing algorithms that reduce an image into a result.

An algorithm provides three stages:

- setup: called before any processing is done (single-threaded). Algorithms
  can use this to set up lookup tables and empty accumulators.
- process: scan a range of center rows into the accumulator. Possibly run in
  parallel over disjoint row ranges: in that case each range is scanned into a
  private accumulator and the partial results are merged afterwards.
- finalize: called after all processing is done (single-threaded), turns the
  accumulator into the final result.

The algorithm to run is chosen when a `Pipeline` is constructed.
"""

import logging
import time

from . import job, util
from .conf import rcParams
from .types import InvariantError

log = logging.getLogger(__name__)


class Reduction(object):
    """Base for image reductions.

    Subclasses implement `setup()`, `scan()`, and `finalize()`. Method
    `scan()` must not modify the object, it returns a partial accumulator.
    """
    def __init__(self, name, description=''):
        self.name = name  # Used in verbose mode to report running time.
        self.description = description
        self.reset()

    def __repr__(self):
        return '{}({!r})'.format(self.__class__.__name__, self.name)

    def reset(self):
        """Forget inputs and results of a previous run."""
        self.inputs = []
        self.output = None
        self.ready = False
        self.done = False

    def add_input(self, img):
        self.inputs.append(img)

    @property
    def rows(self):
        return self.inputs[0].shape[0]

    def setup(self):
        raise NotImplementedError()

    def scan(self, row_start, row_end):
        raise NotImplementedError()

    def finalize(self):
        raise NotImplementedError()

    def check_processing(self):
        """Raise InvariantError unless between setup and finalize."""
        if not self.ready:
            raise InvariantError('Processing before setup: {}'.format(self))
        if self.done:
            raise InvariantError('Processing after finalize: {}'.format(self))

    def accumulate(self, partial):
        """Merge a partial accumulator into the output."""
        self.check_processing()
        self.output += partial

    def process(self, row_start, row_end):
        """Scan center rows [row_start, row_end) into the output."""
        self.check_processing()
        self.accumulate(self.scan(row_start, row_end))


class Pipeline(object):
    """Runs the stages of a reduction on an image.

    If verbose, the duration of the processing stage is logged. Parameter
    n_jobs is the number of parallel jobs, see `util.get_n_jobs()`.
    """
    def __init__(self, algorithm, verbose=None, n_jobs=None):
        if verbose is None:
            verbose = rcParams.verbose
        if n_jobs is None:
            n_jobs = rcParams.maxjobs
        self.algorithm = algorithm
        self.verbose = verbose
        self.n_jobs = util.get_n_jobs(n_jobs)
        self.elapsed = None

    def process(self):
        """Run the processing stage over all rows."""
        algorithm = self.algorithm
        rows = algorithm.rows
        if self.n_jobs == 1:
            algorithm.process(0, rows)
            return
        ranges = util.row_ranges(rows, self.n_jobs)
        log.debug('Scanning %s in %d ranges', algorithm, len(ranges))
        partials = job.Parallel(n_jobs=self.n_jobs)(
            job.delayed(algorithm.scan)(a, b) for a, b in ranges)
        for partial in partials:
            algorithm.accumulate(partial)

    def run(self, img):
        """Reduce image and return the result."""
        algorithm = self.algorithm
        algorithm.reset()
        algorithm.add_input(img)
        log.debug('Setting up %s', algorithm)
        algorithm.setup()
        start = time.perf_counter()
        self.process()
        self.elapsed = time.perf_counter() - start
        log.debug('Finalizing %s', algorithm)
        algorithm.finalize()
        if self.verbose:
            log.info('%s execution time: %d ms', algorithm.name,
                     self.elapsed * 1000)
        return algorithm.output
