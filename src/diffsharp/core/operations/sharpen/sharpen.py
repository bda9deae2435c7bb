# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Any

import numpy as np
import scipy.ndimage as ndimage

from diffsharp._shared.utils import as_grid, check_shape, restore_layout
from diffsharp.constants import SAMPLE_MAX, SAMPLE_MIN

# 5 * center minus the four axis-aligned neighbors
SHARPEN_STENCIL = np.array(
    [[0, -1, 0],
     [-1, 5, -1],
     [0, -1, 0]],
    dtype=np.int64,
)


def _sharpen_rows(grid, start, stop):
    """Sharpen rows ``[start, stop)`` of `grid`.

    Reads at most one halo row on each side of the band and never writes to
    `grid`, so disjoint bands may be processed concurrently.
    """
    height, width = grid.shape
    lo = max(start - 1, 0)
    hi = min(stop + 1, height)
    filtered = ndimage.correlate(
        grid[lo:hi], SHARPEN_STENCIL, mode="constant", cval=0
    )
    band = np.clip(filtered[start - lo:stop - lo], SAMPLE_MIN, SAMPLE_MAX)

    # border pass-through
    source = grid[start:stop]
    rows = np.arange(start, stop)
    border_rows = (rows == 0) | (rows == height - 1)
    band[border_rows] = source[border_rows]
    band[:, 0] = source[:, 0]
    band[:, width - 1] = source[:, width - 1]
    return band


def sharpen(image: Any, *, shape=None) -> Any:
    """
    Apply the five-point sharpening stencil to a classification image.

    Interior pixels become
    ``clip(5 * center - up - down - left - right, 0, 255)``. Pixels on the
    outermost rows and columns are copied unchanged.

    Parameters
    ----------
    image : array_like
        Integer image, flat row-major or 2-D of shape `shape`. Any integer
        values are accepted, not only the three classification levels.
    shape : tuple of int, optional
        ``(height, width)`` of the image. Defaults to ``(HEIGHT, WIDTH)``.

    Returns
    -------
    out : numpy.ndarray
        ``int64`` image laid out like `image`.

    Raises
    ------
    InvalidInput
        If `image` does not match `shape`.
    TypeError
        If the samples are not integers.

    Notes
    -----
    Border handling is a pass-through, not a padding mode: no value outside
    the image is ever read for an output pixel.

    Examples
    --------
    >>> from diffsharp import sharpen
    >>> sharpen([0, 0, 0, 0, 255, 0, 0, 0, 0], shape=(3, 3)).reshape(3, 3)
    array([[  0,   0,   0],
           [  0, 255,   0],
           [  0,   0,   0]])
    """
    shape = check_shape(shape)
    grid = as_grid(image, shape)
    return restore_layout(_sharpen_rows(grid, 0, shape[0]), image)
