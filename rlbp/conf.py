"""Modifiable runtime configuration parameters."""

import argparse
import logging
import shlex
from pprint import pformat

from . import util
from .types import Path

log = logging.getLogger(__name__)


class DefaultValueHelpFormatter(argparse.HelpFormatter):
    """A formatter that appends possible default value to argument helptext."""
    def _expand_help(self, action):
        s = super()._expand_help(action)
        default = getattr(action, 'default', None)
        if default is None or default in [False, argparse.SUPPRESS]:
            return s
        return '{} (default: {})'.format(s, repr(default))


class FileArgumentParser(argparse.ArgumentParser):
    """Custom ArgumentParser that is better for reading arguments from files.

    Modifications to argparse.ArgumentParser:
    - added `add` as a shortcut to `add_argument`
    - set `fromfile_prefix_chars` to `@` by default
    - more flexible `convert_arg_line_to_args()` using `shlex.split()`
    - added `parse_from_files()` to parse only from given files
    """
    add = argparse.ArgumentParser.add_argument

    def __init__(self, fromfile_prefix_chars='@', **kwargs):
        super().__init__(fromfile_prefix_chars=fromfile_prefix_chars, **kwargs)

    def convert_arg_line_to_args(self, arg_line):
        """Fancier file reading."""
        return shlex.split(arg_line, comments=True)

    def parse_from_files(self, paths):
        """Parse known arguments from files."""
        prefix = self.fromfile_prefix_chars[0]
        args = ['{}{}'.format(prefix, x) for x in paths]
        return self.parse_known_args(args)


def expanded_path(*args, **kwargs):
    """Automatically expanded `Path`. Useful as an argparse type from file."""
    return Path(*args, **kwargs).expanduser()


def get_config_paths():
    """Return existing default configuration files."""
    dirnames = ['/etc/rlbp', '~/.config/rlbp', '.']
    filename = 'rlbp.cfg'
    paths = [expanded_path(x) / filename for x in dirnames]
    return [x for x in paths if x.exists()]


def parse_config(parser, paths=None):
    """Parse configuration files."""
    if paths is None:
        paths = get_config_paths()
    args, extras = parser.parse_from_files(paths)
    log.debug('Extra arguments in config files: %s', extras)
    return args


def get_basic_parser():
    """Get basic parser."""
    p = FileArgumentParser(add_help=False)
    p.add('-v', '--verbose', action='count', default=0,
          help='increase verbosity')
    p.add('--logfile', type=expanded_path, help='log file')
    p.add('--loglevel', default='WARNING', help='log level name')
    return p


def get_config_parser():
    """Get configuration parser."""
    p = get_basic_parser()
    p.add('--maxjobs', type=float, default=1,
          help=('maximum number of simultaneous jobs '
                '(absolute, portion of CPU count, or negative count)'))
    return p


def get_parser(formatter_class=DefaultValueHelpFormatter, **kwargs):
    """Get an argument parser with the usual standard arguments ready."""
    parents = [get_basic_parser()]
    return FileArgumentParser(parents=parents, formatter_class=formatter_class,
                              **kwargs)


def init_logging(args, force=False):
    """Initialize logging. Verbosity raises the level to at least INFO.

    With force, handlers installed earlier (e.g. on import) are replaced.
    """
    d = dict(force=force)
    if args.logfile is not None:
        d['filename'] = str(args.logfile)
    level = logging.WARNING
    if args.loglevel is not None:
        level = util.get_loglevel(args.loglevel)
    if args.verbose:
        level = min(level, logging.INFO)
    d['level'] = level
    logging.basicConfig(**d)


def parse_args(parser=None, paths=None):
    """Parse args and configuration as well."""
    config_parser = get_config_parser()
    args = parse_config(config_parser, paths=paths)
    if parser is not None:
        parser.parse_args(namespace=args)
    init_logging(args)
    return args


rcParams = parse_args()
log.debug('Parsed config: %s', pformat(rcParams))
