# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from .oracle import (
    Mismatch,
    VerificationResult,
    compare_results,
    reference_pipeline,
    reference_posterize,
    reference_sharpen,
    verify,
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
