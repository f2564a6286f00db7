# visodom

Building blocks for direct visual odometry: run-time settings and residual
point patterns, image containers, a per-frame pose record, camera intrinsics
for every level of an image pyramid, bilinear and bicubic sampling, debug
colour maps and a thread pool that reduces over an index range. Built on
NumPy.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `visodom.settings`: the `Settings` dataclass holding every tunable parameter
  with its default, the process-wide instance from `get_settings()` and
  `reset_settings()` to restore its defaults. `Settings.handle_key("d")` and
  `handle_key("s")` cycle `free_debug_param5` up and down through 0..9.
  `SolverMode` is the flag set for the linear solver; `pattern(index)` returns
  one of the ten static residual patterns (offsets and padding).
- `visodom.numtypes`: `AffLight`, the affine brightness model
  `I_frame = exp(a) * I_global + b`. `AffLight.from_to_vec_exposure` gives the
  factors `(a, b)` relating two frames; a zero exposure on either side is
  treated as 1 for both.
- `visodom.images`: `MinimalImage`, a pixel grid over a NumPy array with
  `at`, `clone`, `set_black`, `set_const` and the drawing helpers
  `set_pixel1`, `set_pixel4`, `set_pixel9` and `set_pixel_circ`; and
  `ImageAndExposure`, a float32 irradiance image with timestamp and exposure
  time, with `copy_meta_to` and `deep_copy`.
- `visodom.frame_shell`: `FrameShell`, the pose (4x4 matrices), affine
  brightness and statistics of one frame.
- `visodom.calibration`: `build_pyramid(width, height, K, max_levels)` halves
  the image while both sides are even, the pixel count exceeds 5000 and fewer
  than `max_levels` levels exist, and returns a `CalibrationPyramid` with the
  sizes, camera matrices and inverses per level.
- `visodom.interpolation`: `interpolate_bilinear`,
  `interpolate_bilinear_and` / `interpolate_bilinear_or` (which also combine
  a boolean flag image), `interpolate_bilinear_with_gradient`, `cubic`,
  `cubic_with_derivative`, `interpolate_bicubic` and
  `interpolate_bicubic_with_gradient`. Samples reaching outside the image
  raise `IndexError`.
- `visodom.colormaps`: `make_rainbow_f3`, `make_rainbow_3b`, `make_jet_3b` and
  `make_red_green_3b` map scalars to colours for debug views.
- `visodom.threadreduce`: `IndexThreadReduce` keeps a pool of worker threads,
  splits an index range into chunks and sums the partial results with `+=`.

## Examples

Intrinsics for an image pyramid:

```python
import numpy as np
from visodom.calibration import build_pyramid

K = np.array([[500.0, 0.0, 319.5], [0.0, 500.0, 239.5], [0.0, 0.0, 1.0]])
pyramid = build_pyramid(640, 480, K, 6)
print(pyramid.levels_used, pyramid.widths, pyramid.fx)
```

Sampling an image between pixels:

```python
import numpy as np
from visodom.interpolation import interpolate_bilinear

image = np.arange(16, dtype=np.float32).reshape(4, 4)
print(interpolate_bilinear(image, 1.5, 1.5))
```

A thread-parallel reduction over an index range:

```python
from visodom.threadreduce import IndexThreadReduce

def work(start, end, stats, thread_id):
    stats.extend(range(start, end))

with IndexThreadReduce(list, 4) as reducer:
    total = reducer.reduce(work, 0, 100, 0)
```

## What this package does not do

It does not read calibration files, photometric calibrations or vignette
images, does not undistort images with a camera model, and does not read
image sequences from folders or archives. It has no command-line program; it
is a library of helpers to build those on.