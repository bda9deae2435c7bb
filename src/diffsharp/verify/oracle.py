# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Reference oracle for the difference-posterize-sharpen pipeline.

A deliberately plain re-derivation of the two stages over flat lists of
Python integers, used to check results produced by another execution path
(for example the threaded pipeline) by exact comparison. It shares nothing
with :mod:`diffsharp.core.operations` except the configuration constants, so
keep the integer semantics, clamp bounds and threshold comparisons in step
with it.
"""

import logging
from typing import NamedTuple, Optional

import numpy as np

from diffsharp._shared.utils import InvalidInput, check_shape, check_thresholds
from diffsharp.constants import (
    HIGH,
    LOW,
    MID,
    SAMPLE_LIMIT,
    SAMPLE_MAX,
    SAMPLE_MIN,
    T1,
    T2,
)

__all__ = [
    "Mismatch",
    "VerificationResult",
    "compare_results",
    "reference_pipeline",
    "reference_posterize",
    "reference_sharpen",
    "verify",
]

logger = logging.getLogger(__name__)


class Mismatch(NamedTuple):
    """First index at which two results disagree."""

    index: int
    expected: int
    actual: int

    def position(self, width):
        """Return ``(row, col)`` of the mismatch in an image of `width`."""
        return divmod(self.index, width)


class VerificationResult(NamedTuple):
    passed: bool
    mismatch: Optional[Mismatch] = None

    def __bool__(self):
        return self.passed


def _flatten(image, size, name):
    samples = np.asarray(image).reshape(-1).tolist()
    if len(samples) != size:
        raise InvalidInput(
            f"{name} has {len(samples)} samples, expected {size}"
        )
    if any(abs(x) > SAMPLE_LIMIT for x in samples):
        raise InvalidInput(
            f"{name} has samples outside [-{SAMPLE_LIMIT}, {SAMPLE_LIMIT}]"
        )
    return samples


def _clip(x, min_val, max_val):
    if x < min_val:
        return min_val
    elif x > max_val:
        return max_val
    else:
        return x


def reference_posterize(image0, image1, t1=T1, t2=T2, *, shape=None):
    """Flat-list re-derivation of :func:`diffsharp.posterize_diff`."""
    height, width = check_shape(shape)
    t1, t2 = check_thresholds(t1, t2)
    a = _flatten(image0, height * width, "image0")
    b = _flatten(image1, height * width, "image1")

    classified = []
    for val_a, val_b in zip(a, b):
        abs_diff = abs(val_a - val_b)
        if abs_diff < t1:
            classified.append(LOW)
        elif abs_diff < t2:
            classified.append(MID)
        else:
            classified.append(HIGH)
    return classified


def reference_sharpen(image, *, shape=None):
    """Flat-list re-derivation of :func:`diffsharp.sharpen`."""
    height, width = check_shape(shape)
    c = _flatten(image, height * width, "image")

    out = [0] * (height * width)
    for i in range(height):
        for j in range(width):
            idx = i * width + j
            if i == 0 or i == height - 1 or j == 0 or j == width - 1:
                out[idx] = c[idx]
            else:
                center = c[idx]
                up = c[(i - 1) * width + j]
                down = c[(i + 1) * width + j]
                left = c[i * width + (j - 1)]
                right = c[i * width + (j + 1)]
                val = 5 * center - up - down - left - right
                out[idx] = _clip(val, SAMPLE_MIN, SAMPLE_MAX)
    return out


def reference_pipeline(image0, image1, t1=T1, t2=T2, *, shape=None):
    """Return the expected flat output for `image0` and `image1`."""
    classified = reference_posterize(image0, image1, t1, t2, shape=shape)
    return reference_sharpen(classified, shape=shape)


def compare_results(expected, actual):
    """
    Compare two results sample by sample in index order.

    Parameters
    ----------
    expected, actual : array_like
        Results holding the same number of samples. Any layout is accepted;
        both are compared in row-major order.

    Returns
    -------
    mismatch : Mismatch or None
        The first index where the results differ, with both values, or
        ``None`` when they are identical.

    Raises
    ------
    InvalidInput
        If the results hold a different number of samples.
    """
    expected = np.asarray(expected).reshape(-1).tolist()
    actual = np.asarray(actual).reshape(-1).tolist()
    if len(expected) != len(actual):
        raise InvalidInput(
            f"Cannot compare results of {len(expected)} and {len(actual)} "
            "samples."
        )
    for index, (want, got) in enumerate(zip(expected, actual)):
        if want != got:
            return Mismatch(index, want, got)
    return None


def verify(image0, image1, actual, t1=T1, t2=T2, *, shape=None):
    """
    Check `actual` against the oracle output for `image0` and `image1`.

    Returns
    -------
    result : VerificationResult
        Truthy when every sample matches; otherwise ``result.mismatch``
        holds the first divergence.
    """
    _, width = check_shape(shape)
    expected = reference_pipeline(image0, image1, t1, t2, shape=shape)
    mismatch = compare_results(expected, actual)
    if mismatch is not None:
        row, col = mismatch.position(width)
        logger.info(
            "Result mismatch at index %d (row %d, col %d): expected %d, "
            "got %d", mismatch.index, row, col, mismatch.expected,
            mismatch.actual,
        )
        return VerificationResult(False, mismatch)
    return VerificationResult(True)
