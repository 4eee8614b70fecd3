"""Default configuration values for euclid2d geometry operations."""

from __future__ import annotations

# Vector-to-point conversion narrows to float32 unless told otherwise.
DEFAULT_POINT_PRECISION = "single"
DEFAULT_TOLERANCE = 1e-9
