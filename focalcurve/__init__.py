'''
# focalcurve

Smooth interpolating curves through 2D sample points, and signed-distance
contours of those curves.

Curve
-----
Functions and classes for building and sampling a curve through a polyline.
 - curve.geometry: point deduplication, tangent estimation, and the focal
   (normal-line intersection) of each segment, in homogeneous coordinates.
 - curve.focal_curve: the Curve class, which owns the points, tangents and
   focals of a curve and samples it at arbitrary parametric positions.
 - curve.sample: evaluate a curve or its contour at one or many positions,
   and trace either as a polyline for drawing.
 - curve.interpolate: resample traced curves (or any polyline) to equally
   spaced points.

Datafile
--------
 - datafile: save and restore the input points and contour offset of a curve,
   as JSON files or URL query strings.

'''
