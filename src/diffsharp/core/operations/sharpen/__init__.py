# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from .sharpen import SHARPEN_STENCIL, sharpen

__all__ = ["sharpen", "SHARPEN_STENCIL"]
