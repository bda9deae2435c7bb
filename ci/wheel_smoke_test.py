import numpy as np

import diffsharp
import diffsharp.verify


if __name__ == "__main__":
    # verify that the top-level exports resolve
    assert diffsharp.run_pipeline is not None
    assert diffsharp.verify.verify is not None

    # generate a synthetic pair and run the pipeline end to end
    rng = np.random.default_rng(0)
    img0 = rng.integers(0, 256, size=(diffsharp.HEIGHT, diffsharp.WIDTH))
    img1 = rng.integers(0, 256, size=(diffsharp.HEIGHT, diffsharp.WIDTH))

    out = diffsharp.run_pipeline(img0, img1, num_workers=2)
    assert out.shape == (diffsharp.HEIGHT, diffsharp.WIDTH)
    assert out.min() >= diffsharp.SAMPLE_MIN
    assert out.max() <= diffsharp.SAMPLE_MAX

    assert diffsharp.verify.verify(img0, img1, out)
