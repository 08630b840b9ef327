"""Tests for runtime configuration."""

import logging

from rlbp import conf, rcParams


def test_defaults():
    assert rcParams.verbose >= 0
    args = conf.parse_config(conf.get_config_parser(), paths=[])
    assert args.verbose == 0
    assert args.maxjobs == 1
    assert args.loglevel == 'WARNING'
    assert args.logfile is None


def test_config_file(tmp_path):
    path = tmp_path / 'rlbp.cfg'
    path.write_text('--maxjobs 3  # three jobs\n'
                    '\n'
                    '--loglevel INFO\n'
                    '--unknown 5\n')
    args = conf.parse_config(conf.get_config_parser(), paths=[path])
    assert args.maxjobs == 3
    assert args.loglevel == 'INFO'


def test_parser():
    p = conf.get_parser(description='test')
    p.add('--input')
    args = p.parse_args(['-vv', '--input', 'x.png'])
    assert args.verbose == 2
    assert args.input == 'x.png'


def test_expanded_path():
    path = conf.expanded_path('~/rlbp.cfg')
    assert '~' not in str(path)


def test_help_formatter():
    p = conf.get_parser(description='test')
    action = p.add('--jobs', type=int, default=4, help='number of jobs')
    formatter = conf.DefaultValueHelpFormatter('prog')
    assert formatter._expand_help(action) == 'number of jobs (default: 4)'
    action = p.add('--quiet', action='store_true', help='be quiet')
    assert formatter._expand_help(action) == 'be quiet'


def test_init_logging(root_logger):
    args = conf.parse_config(conf.get_config_parser(), paths=[])
    args.loglevel = 'DEBUG'
    conf.init_logging(args, force=True)
    assert root_logger.level == logging.DEBUG
    args.loglevel = 'WARNING'
    args.verbose = 1
    conf.init_logging(args, force=True)
    assert root_logger.level == logging.INFO
