import logging

import numpy

from . import geometry
from . import sample

logger = logging.getLogger(__name__)

def _read_only(array):
    array.setflags(write=False)
    return array

class Curve:
    """Smooth curve through a sequence of 2D points, with signed-distance contours.

    The input points are deduplicated, a tangent is estimated at each
    remaining point, and a focal point (in homogeneous coordinates) is found
    for each segment as the intersection of the normals at its ends. The curve
    between two points swings around that focal, blending the two points'
    distances from it; the contour at a given offset adds that offset to the
    distance from the focal.

    A Curve is immutable: its arrays are read-only copies of the input, and a
    changed point list requires a new Curve (see with_point()).

    Attributes:
        raw_points: the input points, shape (m, 2)
        points: points retained after deduplication, shape (n, 2)
        tangents: unit tangent at each point, shape (n, 2)
        lefts: left normal at each point, shape (n, 2)
        focals: homogeneous focal of each segment, shape (n-1, 3)
        eps: tolerance for duplicate points and focals at infinity

    Example:
        curve = Curve([(0, 0), (10, 5), (20, 0), (30, 8)])
        center = curve.generate_points(numpy.linspace(0, len(curve) - 1, 200))
        contour = curve.generate_points(numpy.linspace(0, len(curve) - 1, 200), offset=2)
    """
    def __init__(self, raw_points, eps=geometry.EPS):
        self.eps = eps
        self.raw_points = _read_only(geometry.as_points(raw_points).copy())
        self.points = _read_only(geometry.filter_dup_points(self.raw_points, eps))
        self.tangents = _read_only(geometry.estimate_tangents(self.points))
        self.lefts = _read_only(geometry.left_normals(self.tangents))
        self.focals = _read_only(geometry.solve_focals(self.points, self.tangents))
        logger.debug('Curve: %d input points, %d retained, %d of %d focals at infinity',
            len(self.raw_points), len(self.points),
            geometry.is_at_infinity(self.focals, eps).sum(), len(self.focals))

    def __len__(self):
        """Number of points retained after deduplication."""
        return len(self.points)

    def __repr__(self):
        return '{}({} points)'.format(type(self).__name__, len(self))

    def _check_index(self, i, count, kind):
        if not 0 <= i < count:
            raise IndexError('{} index {} out of range for curve with {} points'.format(kind, i, len(self)))

    def point(self, i):
        """Return the i-th retained point, 0 <= i < len(self)."""
        self._check_index(i, len(self), 'point')
        return self.points[i]

    def tangent(self, i):
        self._check_index(i, len(self), 'tangent')
        return self.tangents[i]

    def left(self, i):
        self._check_index(i, len(self), 'left normal')
        return self.lefts[i]

    def focal(self, i):
        """Return the homogeneous (x, y, w) focal of segment i, 0 <= i < n-1."""
        self._check_index(i, len(self.focals), 'focal')
        return self.focals[i]

    def focal_point(self, i):
        """Return the focal of segment i as a 2D point (non-finite if at infinity)."""
        return geometry.from_homogeneous(self.focal(i))

    def generate_point(self, t, offset=0):
        """Return the point at parametric position t, optionally offset from
        the curve by a signed distance. See sample.generate_point()."""
        return sample.generate_point(self, t, offset)

    def generate_points(self, positions, offset=0):
        return sample.generate_points(self, positions, offset)

    def with_point(self, point):
        """Return a new Curve with point appended to the input points."""
        point = numpy.asarray(point, dtype=float).reshape(1, 2)
        return type(self)(numpy.concatenate([self.raw_points, point]), self.eps)
