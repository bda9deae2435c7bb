import numpy as np
import pytest
from numpy.testing import assert_array_equal

from diffsharp import HIGH, LOW, MID, SAMPLE_LIMIT, InvalidInput
from diffsharp.core.operations.sharpen import sharpen


def _border_mask(shape):
    mask = np.zeros(shape, dtype=bool)
    mask[0, :] = mask[-1, :] = True
    mask[:, 0] = mask[:, -1] = True
    return mask


def test_sharpen_all_zeros():
    output = sharpen(np.zeros(9, dtype=np.int64), shape=(3, 3))
    assert_array_equal(output, np.zeros(9))


def test_sharpen_center_high_saturates():
    grid = np.array([[0, 0, 0], [0, HIGH, 0], [0, 0, 0]])
    output = sharpen(grid, shape=(3, 3))
    assert_array_equal(output, grid)


def test_sharpen_center_low_saturates():
    grid = np.full((3, 3), HIGH)
    grid[1, 1] = LOW
    output = sharpen(grid, shape=(3, 3))
    expected = grid.copy()
    expected[1, 1] = 0
    assert_array_equal(output, expected)


def test_sharpen_uniform_field_is_unchanged():
    grid = np.full((8, 8), MID)
    assert_array_equal(sharpen(grid, shape=(8, 8)), grid)


def test_sharpen_interior_formula():
    grid = np.array(
        [[0, 0, 0, 0],
         [0, MID, LOW, 0],
         [0, LOW, MID, 0],
         [0, 0, 0, 0]]
    )
    output = sharpen(grid, shape=(4, 4))
    # 5 * 128 - 0 - 0 - 0 - 0 clamps to 255
    assert output[1, 1] == 255
    # 5 * 0 - 128 - 128 clamps to 0
    assert output[1, 2] == 0


def test_sharpen_unclamped_value():
    grid = np.zeros((3, 3), dtype=np.int64)
    grid[1, 1] = 40
    grid[0, 1] = 30
    grid[1, 0] = 20
    # 5 * 40 - 30 - 20 = 150
    assert sharpen(grid, shape=(3, 3))[1, 1] == 150


def test_sharpen_border_pass_through():
    rng = np.random.default_rng(0)
    grid = rng.integers(-1000, 1000, size=(9, 13))
    output = sharpen(grid, shape=(9, 13))
    mask = _border_mask(grid.shape)
    assert_array_equal(output[mask], grid[mask])
    assert output[~mask].min() >= 0
    assert output[~mask].max() <= 255


@pytest.mark.parametrize("shape", [(1, 1), (1, 5), (2, 7), (6, 2)])
def test_sharpen_without_interior(shape):
    rng = np.random.default_rng(1)
    grid = rng.integers(-300, 300, size=shape)
    assert_array_equal(sharpen(grid, shape=shape), grid)


def test_sharpen_flat_input_stays_flat():
    grid = np.arange(16)
    output = sharpen(grid, shape=(4, 4))
    assert output.shape == (16,)
    assert output.dtype == np.int64


def test_sharpen_param():
    with pytest.raises(InvalidInput):
        sharpen([])
    with pytest.raises(InvalidInput):
        sharpen([], shape=(3, 3))
    with pytest.raises(InvalidInput):
        sharpen(np.zeros(10, dtype=np.int64), shape=(3, 3))
    with pytest.raises(InvalidInput):
        sharpen(np.zeros((3, 3, 1), dtype=np.int64), shape=(3, 3))
    with pytest.raises(InvalidInput):
        sharpen(np.zeros(9, dtype=np.int64))
    with pytest.raises(TypeError):
        sharpen(np.zeros(9), shape=(3, 3))


def test_sharpen_large_samples_are_exact():
    from diffsharp.verify import reference_sharpen

    grid = np.full((3, 3), (5 * SAMPLE_LIMIT - 100) // 4, dtype=np.int64)
    grid[1, 1] = SAMPLE_LIMIT
    output = sharpen(grid, shape=(3, 3))
    # 5 * center - 4 * neighbor == 100, below the clamp
    assert output[1, 1] == 100
    assert_array_equal(output.ravel(), reference_sharpen(grid, shape=(3, 3)))

    grid = np.full((3, 3), SAMPLE_LIMIT, dtype=np.int64)
    grid[1, 1] = -SAMPLE_LIMIT
    assert sharpen(grid, shape=(3, 3))[1, 1] == 0


def test_sharpen_rejects_out_of_range():
    grid = np.zeros((3, 3), dtype=np.int64)
    grid[1, 1] = 2**54
    with pytest.raises(InvalidInput):
        sharpen(grid, shape=(3, 3))
