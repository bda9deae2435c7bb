# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from diffsharp.core.operations.pipeline import run_pipeline  # noqa
from diffsharp.core.operations.posterize import posterize_diff  # noqa
from diffsharp.core.operations.sharpen import sharpen  # noqa
