# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Configuration constants of the difference-posterize-sharpen pipeline.

These are the defaults used when a caller does not pass ``shape``, ``t1`` or
``t2`` explicitly.
"""

# image geometry
HEIGHT = 128
WIDTH = 128
IMAGE_SIZE = HEIGHT * WIDTH

# absolute difference thresholds, 0 <= T1 < T2
T1 = 32
T2 = 96

# classification levels
LOW = 0
MID = 128
HIGH = 255

# sample depth limits used by the saturating clamp
SAMPLE_MIN = 0
SAMPLE_MAX = 255

# largest accepted sample magnitude; keeps 5 * center plus four neighbors
# exact in float64 (9 * 2**49 < 2**53) and every difference exact in int64
SAMPLE_LIMIT = 2 ** 49

__all__ = [
    "HEIGHT",
    "WIDTH",
    "IMAGE_SIZE",
    "T1",
    "T2",
    "LOW",
    "MID",
    "HIGH",
    "SAMPLE_MIN",
    "SAMPLE_MAX",
    "SAMPLE_LIMIT",
]
