# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Reading and writing 8-bit grayscale images."""

import logging
from pathlib import Path

import numpy as np
from PIL import Image

from diffsharp.constants import SAMPLE_MAX, SAMPLE_MIN

__all__ = ["imread", "imsave"]

logger = logging.getLogger(__name__)


def imread(path):
    """Read an image as a 2-D ``int64`` array.

    ``.npy`` files are loaded with :func:`numpy.load`; anything else is opened
    with Pillow and converted to 8-bit grayscale.
    """
    path = Path(path)
    if path.suffix.lower() == ".npy":
        arr = np.load(path)
        if arr.ndim != 2:
            raise ValueError(f"{path} must hold a 2-D array, got {arr.ndim}-D")
    else:
        with Image.open(path) as img:
            if img.mode != "L":
                logger.info("Converting %s from mode %s to L", path, img.mode)
                img = img.convert("L")
            arr = np.asarray(img)
    return arr.astype(np.int64)


def imsave(path, image):
    """Write a 2-D image with samples in ``[0, 255]``."""
    path = Path(path)
    arr = np.asarray(image)
    if arr.ndim != 2:
        raise ValueError(f"image must be 2-D, got {arr.ndim}-D")
    if arr.size and (arr.min() < SAMPLE_MIN or arr.max() > SAMPLE_MAX):
        raise ValueError(
            f"image samples must lie in [{SAMPLE_MIN}, {SAMPLE_MAX}], got "
            f"[{arr.min()}, {arr.max()}]"
        )
    if path.suffix.lower() == ".npy":
        np.save(path, arr)
    else:
        Image.fromarray(arr.astype(np.uint8)).save(path)
    logger.info("Saved %s %s", path, repr(arr.shape))
