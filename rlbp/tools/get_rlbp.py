#!/usr/bin/python3

"""Calculate the rotation invariant uniform LBP histogram of an image."""

import logging

import rlbp.conf
import rlbp.files
import rlbp.texture
from rlbp import rcParams


def parse_args(argv=None):
    """Parse command-line arguments."""
    p = rlbp.conf.get_parser(description=__doc__)
    p.add('--input', '-i', required=True,
          help='input image')
    p.add('--output', '-o', metavar='FILENAME', required=True,
          help='output histogram file')
    p.add('--jobs', '-j', type=float, default=rcParams.maxjobs,
          help=('number of simultaneous jobs '
                '(absolute, portion of CPU count, or negative count)'))
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    rlbp.conf.init_logging(args, force=True)

    logging.info('Reading image: %s', args.input)
    img = rlbp.files.read_image(args.input)
    logging.info('Image: %s', img.shape)

    hist = rlbp.texture.rlbp_histogram(img, n_jobs=args.jobs,
                                       verbose=args.verbose)

    logging.info('Writing %d bins to %s', len(hist), args.output)
    rlbp.files.write_histogram(args.output, hist)
    return 0


if __name__ == '__main__':
    main()
