import numpy

# Tolerance for coincident points and for focals at infinity.
EPS = 1e-8

def as_points(points):
    """Return the input as a float array of shape (n, 2).

    Empty input (e.g. an empty list) becomes an array of shape (0, 2). Any
    other input that cannot be interpreted as n 2D points raises ValueError."""
    points = numpy.asarray(points, dtype=float)
    if points.size == 0:
        return numpy.empty((0, 2))
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError('points must be an array of shape (n, 2), not {}'.format(points.shape))
    return points

def cumulative_distances(points, unit=True):
    """Return cumulative distances along a polyline.

    Parameters:
    points: array of shape (n,m) consisting of n points in m dimensions
    unit: if True, return distances divided by total length of the curve,
          if False, return actual arc lengths. A polyline of zero length
          yields all zeros either way."""
    points = numpy.asarray(points, dtype=float)
    distances = numpy.concatenate([[0], numpy.add.accumulate(numpy.sqrt(((points[:-1] - points[1:])**2).sum(axis=1)))])
    if unit and distances[-1] > 0:
        distances /= distances[-1]
    return distances

def filter_dup_points(points, eps=EPS):
    """Return a polyline with no duplicate or near-duplicate points.

    The first point is always kept. Each subsequent point is kept only if it
    lies more than eps away from the last point that was kept (not the last
    input point), so a run of near-duplicates collapses to its first member.
    Filtering an already-filtered polyline returns it unchanged."""
    points = as_points(points)
    if len(points) == 0:
        return points.copy()
    points_out = [points[0]]
    for point in points[1:]:
        if numpy.sqrt(((point - points_out[-1])**2).sum()) > eps:
            points_out.append(point)
    return numpy.array(points_out)

def normalize(vectors):
    """Scale vectors (shape (m) or (n, m)) to unit length.

    Zero-length vectors are returned unchanged rather than divided by zero."""
    vectors = numpy.asarray(vectors, dtype=float)
    norms = numpy.sqrt((vectors**2).sum(axis=-1))[..., numpy.newaxis]
    return vectors / numpy.where(norms == 0, 1, norms)

def estimate_tangents(points):
    """Estimate a unit tangent at each point of a deduplicated polyline.

    The first tangent is the direction of the first segment and the last is
    the direction of the last segment. Each internal tangent bisects the
    directions of its incoming and outgoing segments. Where those directions
    are exactly opposed, the bisector is the zero vector.

    Parameters:
    points: array of shape (n, 2), with no consecutive duplicates (see
        filter_dup_points).

    Returns: array of shape (n, 2). For a single point the tangent is
    undefined and given as the zero vector."""
    points = as_points(points)
    n = len(points)
    if n < 2:
        return numpy.zeros((n, 2))
    directions = normalize(points[1:] - points[:-1])
    # last point borrows the direction of the last segment
    tangents = numpy.concatenate([directions, directions[-1:]])
    # averaging each tangent with its (original) predecessor, from the end
    # backward, is a single vectorized step.
    tangents[1:] = normalize(tangents[1:] + tangents[:-1])
    return tangents

def left_normals(tangents):
    """Rotate tangent vectors (shape (2) or (n, 2)) 90 degrees counterclockwise."""
    tangents = numpy.asarray(tangents, dtype=float)
    lefts = numpy.empty_like(tangents)
    lefts[..., 0] = -tangents[..., 1]
    lefts[..., 1] = tangents[..., 0]
    return lefts

def to_homogeneous(points):
    """Lift 2D points of shape (..., 2) to homogeneous coordinates (x, y, 1)."""
    points = numpy.asarray(points, dtype=float)
    ones = numpy.ones(points.shape[:-1] + (1,))
    return numpy.concatenate([points, ones], axis=-1)

def from_homogeneous(points):
    """Project homogeneous points of shape (..., 3) back to 2D.

    Points at infinity (w == 0) give non-finite coordinates."""
    points = numpy.asarray(points, dtype=float)
    with numpy.errstate(divide='ignore', invalid='ignore'):
        return points[..., :2] / points[..., 2:]

def is_at_infinity(focals, eps=EPS):
    """Return True where a homogeneous point's w coordinate is within eps of zero."""
    focals = numpy.asarray(focals, dtype=float)
    return numpy.absolute(focals[..., 2]) <= eps

def solve_focals(points, tangents):
    """Find the focal point of each segment of a polyline.

    The focal of segment i is the intersection of the two lines through
    points i and i+1 along their left normals. If the curve is locally close to
    a circular arc, the focal approximates its center. Lines and their
    intersection are computed in homogeneous coordinates (each line is the
    cross product of two points on it; the intersection is the cross product
    of the lines), so parallel normals simply yield a focal at infinity,
    with w near zero.

    Parameters:
    points: array of shape (n, 2)
    tangents: array of shape (n, 2), as from estimate_tangents()

    Returns: array of shape (n-1, 3) of homogeneous (x, y, w) focals; empty
    if there are fewer than two points."""
    points = as_points(points)
    tangents = numpy.asarray(tangents, dtype=float).reshape(-1, 2)
    if len(points) != len(tangents):
        raise ValueError('points and tangents must have the same length')
    if len(points) < 2:
        return numpy.empty((0, 3))
    offset_points = points + left_normals(tangents)
    normal_lines = numpy.cross(to_homogeneous(points), to_homogeneous(offset_points))
    return numpy.cross(normal_lines[:-1], normal_lines[1:])
