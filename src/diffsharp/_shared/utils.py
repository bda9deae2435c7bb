# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import numbers
import operator

import numpy as np

from diffsharp.constants import HEIGHT, SAMPLE_LIMIT, WIDTH

__all__ = [
    "InvalidInput",
    "as_grid",
    "check_shape_equality",
    "check_thresholds",
    "check_shape",
    "restore_layout",
]


class InvalidInput(ValueError):
    """Raised when an image buffer does not match the configured geometry."""


def check_shape(shape=None):
    """Return ``shape`` as a ``(height, width)`` tuple.

    ``None`` selects the configured ``(HEIGHT, WIDTH)``.
    """
    if shape is None:
        return HEIGHT, WIDTH
    try:
        height, width = (operator.index(s) for s in shape)
    except (TypeError, ValueError):
        raise ValueError(
            f"shape must be a (height, width) pair of integers, got {shape!r}"
        )
    if height < 1 or width < 1:
        raise ValueError(f"shape must be positive, got {(height, width)}")
    return height, width


def check_thresholds(t1, t2):
    t1 = operator.index(t1)
    t2 = operator.index(t2)
    if not 0 <= t1 < t2:
        raise ValueError(
            f"thresholds must satisfy 0 <= t1 < t2, got t1={t1}, t2={t2}"
        )
    return t1, t2


def check_shape_equality(image0, image1):
    """Raise an error if the two images hold a different number of samples."""
    size0 = np.size(image0)
    size1 = np.size(image1)
    if size0 != size1:
        raise InvalidInput(
            f"Input images must have the same dimensions, got {size0} and "
            f"{size1} samples."
        )


def _check_samples(arr, name):
    """Return `arr` as int64 after checking sample type and range."""
    if arr.dtype == object:
        samples = arr.reshape(-1).tolist()
        if not all(isinstance(x, numbers.Integral) for x in samples):
            raise TypeError(f"{name} must contain integer samples")
        if any(abs(int(x)) > SAMPLE_LIMIT for x in samples):
            raise InvalidInput(
                f"{name} has samples outside [-{SAMPLE_LIMIT}, {SAMPLE_LIMIT}]"
            )
        return np.array(samples, dtype=np.int64).reshape(arr.shape)
    if arr.dtype.kind not in "iu":
        raise TypeError(
            f"{name} must contain integer samples, got dtype {arr.dtype}"
        )
    if arr.size:
        # unsigned arrays are never below the lower bound
        too_low = arr.dtype.kind == "i" and arr.min() < -SAMPLE_LIMIT
        if too_low or arr.max() > SAMPLE_LIMIT:
            raise InvalidInput(
                f"{name} has samples outside [-{SAMPLE_LIMIT}, {SAMPLE_LIMIT}]"
            )
    return arr.astype(np.int64, copy=False)


def as_grid(image, shape, name="image"):
    """Validate ``image`` and view it as a ``(height, width)`` int64 grid.

    Parameters
    ----------
    image : array_like
        Flat row-major sequence of ``height * width`` integer samples, or a
        2-D integer array of exactly ``shape``.
    shape : tuple of int
        ``(height, width)`` as returned by :func:`check_shape`.
    name : str, optional
        Name used in error messages.

    Returns
    -------
    grid : numpy.ndarray
        2-D ``int64`` array. It may share memory with ``image`` and must not
        be written to.

    Raises
    ------
    InvalidInput
        If the number or arrangement of samples does not match ``shape``, or
        a sample lies outside ``[-SAMPLE_LIMIT, SAMPLE_LIMIT]``.
    TypeError
        If the samples are not integers.
    """
    arr = np.asarray(image)
    height, width = shape
    if arr.ndim == 1:
        if arr.size != height * width:
            raise InvalidInput(
                f"{name} has {arr.size} samples, expected "
                f"{height} * {width} = {height * width}"
            )
    elif arr.ndim == 2:
        if arr.shape != (height, width):
            raise InvalidInput(
                f"{name} has shape {arr.shape}, expected {(height, width)}"
            )
    else:
        raise InvalidInput(f"{name} must be 1-D or 2-D, got {arr.ndim}-D")
    return _check_samples(arr, name).reshape(height, width)


def restore_layout(grid, image):
    """Return ``grid`` laid out like ``image`` (flat or 2-D)."""
    if np.ndim(image) == 1:
        return grid.reshape(-1)
    return grid
