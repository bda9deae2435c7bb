#
# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""diffsharp module

Highlight and sharpen the regions where two grayscale images differ.

The absolute difference of the two images is posterized into three levels
and the resulting classification image is sharpened with a five-point
stencil. The main operations are available from the top-level import;
subpackages can also be imported individually.

Subpackages
-----------

core
    The posterize, sharpen and pipeline operations.
verify
    Reference oracle used to validate other execution paths.

"""

import lazy_loader as _lazy

from ._version import __git_commit__, __version__

__getattr__, __lazy_dir__, __all__ = _lazy.attach_stub(__name__, __file__)


def __dir__():
    return __lazy_dir__() + ["__version__", "__git_commit__"]
