import numpy

from . import geometry

# Number of positions a renderer evaluates to draw a curve as a polyline.
DEFAULT_SAMPLE_COUNT = 1000

def generate_point(curve, t, offset=0):
    """Return the point of a curve at parametric position t.

    Parameters:
        curve: Curve object (see focal_curve.Curve)
        t: real-valued position. Integer values correspond to the curve's
            points; values in between interpolate along the segment using the
            segment's focal as a pivot. Values beyond [0, n-1] extrapolate
            along the first or last segment.
        offset: signed distance from the curve. 0 gives the curve itself;
            nonzero values give a parallel contour on one side or the other.

    Returns: array of shape (2,). An empty curve gives the origin and a
    single-point curve gives that point, regardless of t and offset.
    """
    return generate_points(curve, t, offset)

def generate_points(curve, positions, offset=0):
    """Evaluate generate_point() at an array of parametric positions.

    Returns: array of shape positions.shape + (2,)
    """
    positions = numpy.asarray(positions, dtype=float)
    out_shape = positions.shape + (2,)
    n = len(curve.points)
    if n == 0:
        return numpy.zeros(out_shape)
    if n == 1:
        return numpy.array(numpy.broadcast_to(curve.points[0], out_shape))
    t = positions.reshape(-1)
    # focals run from 0 to n-2, so the segment index is clamped to that range
    i = numpy.clip(numpy.floor(t), 0, n - 2).astype(int)
    r = (t - i)[:, numpy.newaxis]
    p = curve.points[i]
    q = curve.points[i + 1]
    focals = curve.focals[i]
    w = focals[:, 2]

    # locally straight segments: the start point, displaced along its normal
    straight = p + curve.lefts[i] * offset

    with numpy.errstate(divide='ignore', invalid='ignore'):
        f = focals[:, :2] / w[:, numpy.newaxis]
        lerped = p * (1 - r) + q * r
        directions = geometry.normalize(lerped - f)
        dp = numpy.sqrt(((p - f)**2).sum(axis=1))
        dq = numpy.sqrt(((q - f)**2).sum(axis=1))
        d = dp * (1 - r[:, 0]) + dq * r[:, 0] + offset * numpy.sign(w)
        curved = f + directions * d[:, numpy.newaxis]

    degenerate = numpy.absolute(w) <= curve.eps
    out = numpy.where(degenerate[:, numpy.newaxis], straight, curved)
    return out.reshape(out_shape)

def sample_positions(n, num_samples=DEFAULT_SAMPLE_COUNT, endpoint=False):
    """Return num_samples parametric positions spanning a curve of n points.

    With endpoint=False, position k is k / num_samples * (n - 1), so the final
    point of the curve (at n - 1) is approached but not included. With
    endpoint=True the positions run from 0 to n - 1 inclusive."""
    return numpy.linspace(0, max(n - 1, 0), num_samples, endpoint=endpoint)

def trace(curve, num_samples=DEFAULT_SAMPLE_COUNT, offset=0, endpoint=False):
    """Approximate a curve (or its contour at the given offset) as a polyline.

    Returns: array of shape (num_samples, 2)"""
    positions = sample_positions(len(curve.points), num_samples, endpoint)
    return generate_points(curve, positions, offset)

def centerline_and_contour(curve, offset, num_samples=DEFAULT_SAMPLE_COUNT, endpoint=False):
    """Trace a curve and its contour at a signed offset at the same positions.

    Returns: (center, contour), each of shape (num_samples, 2), such that
    contour[k] is the offset counterpart of center[k].
    """
    positions = sample_positions(len(curve.points), num_samples, endpoint)
    center = generate_points(curve, positions)
    contour = generate_points(curve, positions, offset)
    return center, contour
