#
# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""
Module that contains the command line app.

Why does this file exist, and why not put this in __main__?

  You might be tempted to import things from __main__ later, but that will cause
  problems: the code will get executed twice:

  - When you run `python -mdiffsharp` python will execute
    ``__main__.py`` as a script. That means there won't be any
    ``diffsharp.__main__`` in ``sys.modules``.
  - When you import __main__ it will get executed again (as a module) because
    there's no ``diffsharp.__main__`` in ``sys.modules``.

  Also see (1) from http://click.pocoo.org/5/setuptools/#setuptools-integration
"""

import logging
import os
import sys

import click
import numpy as np

from diffsharp.constants import HEIGHT, SAMPLE_MAX, T1, T2, WIDTH
from diffsharp.core.operations.pipeline import run_pipeline
from diffsharp.time import EventTimer
from diffsharp.verify import compare_results, reference_pipeline, verify

logger = logging.getLogger(__name__)


def _setup_logging(verbose):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)


def _report_mismatch(mismatch, width):
    row, col = mismatch.position(width)
    click.echo("Error: Result mismatch at index", err=True)
    click.echo(
        f"i = {mismatch.index} (row {row}, col {col})"
        f" reference result = {mismatch.expected}"
        f" pipeline result = {mismatch.actual}",
        err=True,
    )


@click.group()
@click.version_option(package_name="diffsharp")
def main():
    """Highlight and sharpen the differences between two grayscale images."""
    pass


@main.command()
@click.argument("image0", type=click.Path(exists=True, dir_okay=False))
@click.argument("image1", type=click.Path(exists=True, dir_okay=False))
@click.argument("output", type=click.Path(dir_okay=False, writable=True))
@click.option("--t1", type=int, default=T1, show_default=True)
@click.option("--t2", type=int, default=T2, show_default=True)
@click.option("--num-workers", type=int, default=os.cpu_count() or 1)
@click.option(
    "--verify/--no-verify",
    "check",
    default=False,
    help="Check the result against the reference oracle.",
)
@click.option("--verbose", is_flag=True)
def run(image0, image1, output, t1, t2, num_workers, check, verbose):
    """Write the posterized, sharpened difference of IMAGE0 and IMAGE1."""
    from .io import imread, imsave

    _setup_logging(verbose)

    try:
        img0 = imread(image0)
        img1 = imread(image1)
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Cannot read input image: {e}")
    logger.info("Loaded %s %s and %s %s",
                image0, repr(img0.shape), image1, repr(img1.shape))
    try:
        result = run_pipeline(
            img0, img1, t1, t2, shape=img0.shape, num_workers=num_workers
        )
    except (ValueError, TypeError) as e:
        raise click.ClickException(str(e))
    imsave(output, result)

    if check:
        outcome = verify(img0, img1, result, t1, t2, shape=img0.shape)
        if not outcome:
            _report_mismatch(outcome.mismatch, img0.shape[1])
            sys.exit(1)
        click.echo("Verification PASSED")


@main.command()
@click.option("--height", type=int, default=HEIGHT, show_default=True)
@click.option("--width", type=int, default=WIDTH, show_default=True)
@click.option("--t1", type=int, default=T1, show_default=True)
@click.option("--t2", type=int, default=T2, show_default=True)
@click.option("--seed", type=int, default=None)
@click.option("--num-workers", type=int, default=os.cpu_count() or 1)
@click.option("--verbose", is_flag=True)
def selftest(height, width, t1, t2, seed, num_workers, verbose):
    """Run the pipeline on random images and check it against the oracle."""
    _setup_logging(verbose)
    shape = (height, width)
    timer = EventTimer()

    timer.add("Fill the buffers")
    rng = np.random.default_rng(seed)
    image0 = rng.integers(0, SAMPLE_MAX + 1, size=height * width)
    image1 = rng.integers(0, SAMPLE_MAX + 1, size=height * width)

    timer.add("Pipeline execution")
    try:
        result = run_pipeline(
            image0, image1, t1, t2, shape=shape, num_workers=num_workers
        )
    except (ValueError, TypeError) as e:
        raise click.UsageError(str(e))

    timer.add("Software reference execution")
    expected = reference_pipeline(image0, image1, t1, t2, shape=shape)

    timer.add("Compare the results")
    mismatch = compare_results(expected, result)
    timer.finish()

    if mismatch is not None:
        _report_mismatch(mismatch, width)

    click.echo("----------------- Key execution times -----------------")
    for line in timer.report():
        click.echo(line)

    click.echo(f"TEST {'PASSED' if mismatch is None else 'FAILED'}")
    if mismatch is not None:
        sys.exit(1)
