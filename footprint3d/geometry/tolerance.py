from __future__ import annotations

# Positional epsilon for near-zero length and normalisation checks.
EPS_POS = 1e-12

# Cross-product threshold below which a corner counts as collinear, not convex.
EPS_CONVEX = 1e-12

# Barycentric slack; points on a triangle edge count as inside.
EPS_BARYCENTRIC = 1e-5

# Twice-area threshold below which a triangle is treated as degenerate.
EPS_TRI_DENOM = 1e-12

# Polygon area below which the centroid falls back to the point mean (m^2).
EPS_CENTROID_AREA = 1e-6

# Minimum wall edge length (m); shorter edges get no side quad.
EPS_EDGE = 1e-4

# Minimum slab thickness (m) for side walls to be generated.
EPS_THICKNESS = 1e-4

# Distance (m) within which a trailing point repeats the first one.
EPS_CLOSING = 1e-3

# Vertex weld epsilon for closedness checks on generated meshes.
EPS_WELD = 1e-6
