"""Settings, image containers, calibration pyramids, interpolation, colour maps and parallel reduction for direct visual odometry."""

__version__ = "0.1.0"