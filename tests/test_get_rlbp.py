"""Tests for the command line tool."""

import logging

import numpy as np
import pytest
from skimage import io

from rlbp import files, texture
from rlbp.tools import get_rlbp


def test_main(tmp_path, noise):
    inpath = tmp_path / 'in.png'
    outpath = tmp_path / 'out' / 'hist.txt'
    io.imsave(str(inpath), noise, check_contrast=False)
    ret = get_rlbp.main(['-v', '-i', str(inpath), '-o', str(outpath),
                         '-j', '1'])
    assert ret == 0
    hist = files.read_histogram(outpath)
    assert np.array_equal(hist, texture.rlbp_histogram(noise, n_jobs=1))


def test_missing_output(tmp_path, capsys):
    with pytest.raises(SystemExit):
        get_rlbp.parse_args(['-i', str(tmp_path / 'in.png')])
    assert '--output' in capsys.readouterr().err


def test_missing_input(tmp_path):
    with pytest.raises(SystemExit):
        get_rlbp.parse_args(['-o', str(tmp_path / 'out.txt')])


def test_logfile(tmp_path, noise, root_logger):
    inpath = tmp_path / 'in.png'
    logpath = tmp_path / 'run.log'
    io.imsave(str(inpath), noise, check_contrast=False)
    get_rlbp.main(['-v', '-i', str(inpath), '-o', str(tmp_path / 'out.txt'),
                   '--logfile', str(logpath), '-j', '1'])
    assert logpath.exists()
    assert 'RLBP execution time' in logpath.read_text()


def test_loglevel(tmp_path, noise, root_logger):
    inpath = tmp_path / 'in.png'
    io.imsave(str(inpath), noise, check_contrast=False)
    get_rlbp.main(['-i', str(inpath), '-o', str(tmp_path / 'out.txt'),
                   '--loglevel', 'DEBUG', '-j', '1'])
    assert root_logger.level == logging.DEBUG


def test_verbose_raises_level_to_info(tmp_path, noise, root_logger):
    inpath = tmp_path / 'in.png'
    io.imsave(str(inpath), noise, check_contrast=False)
    get_rlbp.main(['-v', '-i', str(inpath), '-o', str(tmp_path / 'out.txt'),
                   '--loglevel', 'ERROR', '-j', '1'])
    assert root_logger.level == logging.INFO
