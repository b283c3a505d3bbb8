from __future__ import annotations

# Display ranges narrower than this are treated as degenerate.
EPS_RANGE = 1e-12

# Normal vectors at or below this length are left unnormalized.
EPS_NORMAL = 1e-9

# Width substituted for a degenerate display range.
UNIT_RANGE = 1.0
