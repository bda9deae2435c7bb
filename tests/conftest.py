from .fixtures.testimage import (  # noqa: F401
    testimg_random_16x16,
    testimg_square_32x24,
    testimg_stripe_8x12,
)
