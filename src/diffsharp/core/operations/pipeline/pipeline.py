# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import concurrent.futures
import logging
import operator
from typing import Any

import numpy as np

from diffsharp._shared.utils import (
    as_grid,
    check_shape,
    check_shape_equality,
    check_thresholds,
    restore_layout,
)
from diffsharp.constants import T1, T2

from ..posterize.posterize import _classify
from ..sharpen.sharpen import _sharpen_rows

logger = logging.getLogger(__name__)


def _row_bands(height, num_workers):
    bounds = np.linspace(0, height, min(num_workers, height) + 1).astype(int)
    return [
        (int(start), int(stop))
        for start, stop in zip(bounds[:-1], bounds[1:])
        if stop > start
    ]


def _posterize_band(grid0, grid1, t1, t2, out, band):
    start, stop = band
    out[start:stop] = _classify(grid0[start:stop], grid1[start:stop], t1, t2)


def _sharpen_band(classified, out, band):
    start, stop = band
    out[start:stop] = _sharpen_rows(classified, start, stop)


def _run_stage(executor, stage_name, func, bands):
    """Run `func` over all bands and wait for every one of them."""
    futures = [executor.submit(func, band) for band in bands]
    for band, future in zip(bands, futures):
        try:
            future.result()
        except Exception as e:
            logger.error(
                "%s failed on rows %d-%d: %s", stage_name, band[0], band[1], e,
                exc_info=True,
            )
            raise


def run_pipeline(
    image0: Any,
    image1: Any,
    t1: int = T1,
    t2: int = T2,
    *,
    shape=None,
    num_workers: int = 1,
) -> Any:
    """
    Posterize the difference of two images, then sharpen the result.

    Equivalent to ``sharpen(posterize_diff(image0, image1, t1, t2))``.

    Parameters
    ----------
    image0, image1 : array_like
        Integer images, flat row-major or 2-D of shape `shape`.
    t1, t2 : int, optional
        Threshold pair with ``0 <= t1 < t2``.
    shape : tuple of int, optional
        ``(height, width)`` of the images. Defaults to ``(HEIGHT, WIDTH)``.
    num_workers : int, optional
        Number of threads. With more than one worker each stage is split
        into disjoint row bands; the sharpen stage only starts once every
        band of the posterize stage has been written.

    Returns
    -------
    out : numpy.ndarray
        ``int64`` output image laid out like `image0`. The result does not
        depend on `num_workers`.

    Raises
    ------
    InvalidInput
        If the images differ in size or do not match `shape`.
    TypeError
        If the samples are not integers.
    ValueError
        If the thresholds are invalid or `num_workers` is less than 1.
    """
    shape = check_shape(shape)
    t1, t2 = check_thresholds(t1, t2)
    num_workers = operator.index(num_workers)
    if num_workers < 1:
        raise ValueError(f"num_workers must be at least 1, got {num_workers}")
    check_shape_equality(image0, image1)
    grid0 = as_grid(image0, shape, name="image0")
    grid1 = as_grid(image1, shape, name="image1")

    if num_workers == 1:
        classified = _classify(grid0, grid1, t1, t2)
        result = _sharpen_rows(classified, 0, shape[0])
        return restore_layout(result, image0)

    bands = _row_bands(shape[0], num_workers)
    logger.debug(
        "Running pipeline on %dx%d image with %d workers over %d bands",
        shape[0], shape[1], num_workers, len(bands),
    )
    classified = np.empty(shape, dtype=np.int64)
    result = np.empty(shape, dtype=np.int64)
    with concurrent.futures.ThreadPoolExecutor(
            max_workers=num_workers) as executor:
        _run_stage(
            executor,
            "posterize",
            lambda band: _posterize_band(grid0, grid1, t1, t2, classified,
                                         band),
            bands,
        )
        # every row of `classified` is written at this point
        classified.flags.writeable = False
        _run_stage(
            executor,
            "sharpen",
            lambda band: _sharpen_band(classified, result, band),
            bands,
        )
    return restore_layout(result, image0)
