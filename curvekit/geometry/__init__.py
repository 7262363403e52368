"""
curvekit geometry

 - geometry.tolerance: shared numerical tolerances.
 - geometry.bounds: axis-aligned bounding boxes.
 - geometry.polyline: 2D/3D polylines and their length, extent and centroid.
 - geometry.curves: curve primitives, the Curve union and error-bounded discretization.

Submodules are imported explicitly; this package re-exports nothing
so that curvekit.core can depend on geometry.tolerance without an import cycle.
"""
