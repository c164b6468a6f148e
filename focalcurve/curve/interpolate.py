import numpy

from . import geometry
from . import sample

def polyline_length(points):
    """Return the total length of a polyline of shape (n, m)."""
    return geometry.cumulative_distances(points, unit=False)[-1]

def linear_resample_polyline(points, num_points):
    """Resample a piecewise linear curve to contain a given number of
    equally-spaced points, using linear interpolation.

    Parameters:
    points: array of n points x,y; shape=(n,2)
    num_points: number of output points in array.

    Returns a resampled array, of shape (num_points,2). A polyline of zero
    length resamples to copies of its single location."""
    points = geometry.as_points(points)
    if len(points) == 0:
        raise ValueError('Cannot resample an empty polyline.')
    distances = geometry.cumulative_distances(points, unit=True)
    if distances[-1] == 0:
        return numpy.repeat(points[:1], num_points, axis=0)
    sample_positions = numpy.linspace(0, 1, num_points)
    x = numpy.interp(sample_positions, distances, points[:,0])
    y = numpy.interp(sample_positions, distances, points[:,1])
    return numpy.transpose([x,y])

def resample_curve(curve, num_points, offset=0, num_samples=sample.DEFAULT_SAMPLE_COUNT):
    """Return num_points equally spaced (by distance along the curve) on a
    curve or on its contour at the given offset.

    The curve is first traced as a polyline of num_samples points, from its
    first point to its last, and that polyline is then resampled. Larger
    values of num_samples give more accurate spacing.

    Returns: array of shape (num_points, 2)
    """
    polyline = sample.trace(curve, num_samples, offset, endpoint=True)
    return linear_resample_polyline(polyline, num_points)
