"""Plain image containers: a raw pixel grid and an irradiance image with exposure."""

from __future__ import annotations

from typing import Any

import numpy as np


class MinimalImage:
    """A width x height grid of pixels held in a numpy array of shape (height, width[, channels]).

    Without ``data`` a float32 image of zeros is allocated; with ``data`` the given
    array (of shape (height, width, ...) or (width*height, ...)) is wrapped without copying.
    """

    def __init__(self, width: int, height: int, data: Any = None) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid image size {width} x {height}")
        self.width = int(width)
        self.height = int(height)
        if data is None:
            self.data = np.zeros((self.height, self.width), dtype=np.float32)
            self.owns_data = True
            return
        arr = np.asarray(data)
        if arr.shape[:2] == (self.height, self.width):
            self.data = arr
        elif arr.ndim >= 1 and arr.shape[0] == self.width * self.height:
            self.data = arr.reshape((self.height, self.width) + arr.shape[1:])
        else:
            raise ValueError(
                f"data of shape {arr.shape} does not fit a {self.width} x {self.height} image"
            )
        self.owns_data = False

    def clone(self) -> MinimalImage:
        """Return an independent copy with its own pixel storage."""
        copy = MinimalImage(self.width, self.height, self.data.copy())
        copy.owns_data = True
        return copy

    def _locate(self, x: float, y: float | None) -> tuple[int, int]:
        index = int(x) if y is None else int(x) + int(y) * self.width
        if not 0 <= index < self.width * self.height:
            raise IndexError(f"pixel ({x}, {y}) lies outside the image")
        row, col = divmod(index, self.width)
        return row, col

    def at(self, x: float, y: float | None = None) -> Any:
        """Return the pixel at (x, y); coordinates are truncated to integers.

        With ``y`` omitted, ``x`` is the row-major flat index.
        """
        return self.data[self._locate(x, y)]

    def _put(self, x: float, y: float, value: Any) -> None:
        self.data[self._locate(x, y)] = value

    def set_black(self) -> None:
        """Set every pixel to zero."""
        self.data.fill(0)

    def set_const(self, value: Any) -> None:
        """Set every pixel to ``value``."""
        self.data[...] = value

    def set_pixel1(self, u: float, v: float, value: Any) -> None:
        """Set the pixel nearest to the sub-pixel position (u, v)."""
        self._put(u + 0.5, v + 0.5, value)

    def set_pixel4(self, u: float, v: float, value: Any) -> None:
        """Set the 2x2 block whose top-left corner is (u, v)."""
        self._put(u + 1.0, v + 1.0, value)
        self._put(u + 1.0, v, value)
        self._put(u, v + 1.0, value)
        self._put(u, v, value)

    def set_pixel9(self, u: int, v: int, value: Any) -> None:
        """Set the 3x3 block centred on (u, v)."""
        for du in (1, 0, -1):
            for dv in (-1, 0, 1):
                self._put(u + du, v + dv, value)

    def set_pixel_circ(self, u: int, v: int, value: Any) -> None:
        """Draw a square ring of radius 2 to 3 around (u, v)."""
        for i in range(-3, 4):
            self._put(u + 3, v + i, value)
            self._put(u - 3, v + i, value)
            self._put(u + 2, v + i, value)
            self._put(u - 2, v + i, value)
            self._put(u + i, v - 3, value)
            self._put(u + i, v + 3, value)
            self._put(u + i, v - 2, value)
            self._put(u + i, v + 2, value)


class ImageAndExposure:
    """An irradiance image (float32, values in 0..256) with timestamp and exposure time in ms."""

    def __init__(self, width: int, height: int, timestamp: float = 0.0) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid image size {width} x {height}")
        self.width = int(width)
        self.height = int(height)
        self.timestamp = float(timestamp)
        self.image = np.zeros((self.height, self.width), dtype=np.float32)
        self.exposure_time = 1.0

    def copy_meta_to(self, other: ImageAndExposure) -> None:
        """Copy the exposure time to ``other``."""
        other.exposure_time = self.exposure_time

    def deep_copy(self) -> ImageAndExposure:
        """Return an independent copy of image and metadata."""
        copy = ImageAndExposure(self.width, self.height, self.timestamp)
        copy.exposure_time = self.exposure_time
        copy.image = self.image.copy()
        return copy