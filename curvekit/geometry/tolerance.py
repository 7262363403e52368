from __future__ import annotations

# Positional epsilon for near-zero distance/length checks.
EPS_POS = 1e-12

# Angular epsilon (dimensionless tolerance used for orthogonality/unit checks).
EPS_ANG = 1e-9

# Default tolerance for point equality comparisons.
EPS_WELD = 1e-6

# Segment counts above this still get returned, but with a RuntimeWarning.
LARGE_SEGMENT_COUNT = 1_000_000
