"""Operations regarding image and histogram files."""

import logging

import numpy as np
import skimage
from skimage import color, io

from .types import Path

log = logging.getLogger(__name__)
COMMENT_PREFIX = '#'


def sanitize_line(line, commenter=COMMENT_PREFIX):
    """Clean up input line."""
    return line.split(commenter, 1)[0].strip()


def valid_lines(path):
    """Read and yield lines that are neither empty nor comments."""
    with Path(path).open() as fp:
        yield from filter(None, (sanitize_line(x) for x in fp))


def ensure_dir(path):
    """Ensure existence of the file's parent directory."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def read_image(path):
    """Read an image as 8-bit grayscale. Colour is converted to luminance."""
    img = io.imread(str(path))
    log.debug('Read image %s: %s, %s', path, img.shape, img.dtype)
    if img.ndim == 3:
        if img.shape[-1] == 4:
            img = color.rgba2rgb(img)
        img = color.rgb2gray(img)
    return skimage.img_as_ubyte(img)


def write_histogram(path, hist, comment=None):
    """Write histogram as one integer per line."""
    ensure_dir(path)
    if comment is None:
        comment = 'bins: {}'.format(len(hist))
    with Path(path).open('w') as fp:
        fp.write('{} {}\n'.format(COMMENT_PREFIX, comment))
        for value in hist:
            fp.write('{:d}\n'.format(int(value)))


def read_histogram(path):
    """Read histogram written by `write_histogram()`."""
    return np.array([int(x) for x in valid_lines(path)], dtype=np.int64)
