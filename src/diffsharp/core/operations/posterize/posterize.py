# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Any

import numpy as np

from diffsharp._shared.utils import (
    as_grid,
    check_shape,
    check_shape_equality,
    check_thresholds,
    restore_layout,
)
from diffsharp.constants import HIGH, LOW, MID, T1, T2


def _classify(grid0, grid1, t1, t2):
    abs_diff = np.abs(grid0 - grid1)
    return np.select(
        [abs_diff < t1, abs_diff < t2], [LOW, MID], default=HIGH
    ).astype(np.int64, copy=False)


def posterize_diff(
    image0: Any,
    image1: Any,
    t1: int = T1,
    t2: int = T2,
    *,
    shape=None,
) -> Any:
    """
    Classify the absolute difference of two images into three levels.

    For every pixel, ``|image0 - image1|`` below `t1` maps to ``LOW`` (0),
    values in ``[t1, t2)`` map to ``MID`` (128) and values of at least `t2`
    map to ``HIGH`` (255).

    Parameters
    ----------
    image0, image1 : array_like
        Integer images. Either flat row-major sequences of
        ``height * width`` samples or 2-D arrays of shape ``shape``.
    t1, t2 : int, optional
        Threshold pair with ``0 <= t1 < t2``.
    shape : tuple of int, optional
        ``(height, width)`` of the images. Defaults to ``(HEIGHT, WIDTH)``.

    Returns
    -------
    out : numpy.ndarray
        ``int64`` classification image laid out like `image0`.

    Raises
    ------
    InvalidInput
        If the images differ in size or do not match `shape`.
    TypeError
        If the samples are not integers.
    ValueError
        If the thresholds violate ``0 <= t1 < t2``.

    Examples
    --------
    >>> from diffsharp import posterize_diff
    >>> posterize_diff([0, 40, 200], [0, 0, 0], shape=(1, 3))
    array([  0, 128, 255])
    """
    shape = check_shape(shape)
    t1, t2 = check_thresholds(t1, t2)
    check_shape_equality(image0, image1)
    grid0 = as_grid(image0, shape, name="image0")
    grid1 = as_grid(image1, shape, name="image1")
    return restore_layout(_classify(grid0, grid1, t1, t2), image0)
