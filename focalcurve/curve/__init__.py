'''
Curve
-----
Functions for building plane curves through series of points and sampling them or their offset contours.
 - curve.geometry: basic algorithms for polylines: deduplication, tangents, focals.
 - curve.focal_curve: the Curve class.
 - curve.sample: evaluate and trace curves and contours.
 - curve.interpolate: methods for resampling polylines and traced curves.
 '''
from .focal_curve import Curve
