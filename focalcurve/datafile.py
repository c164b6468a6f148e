import json
import logging
import os
import pathlib
import tempfile
import urllib.parse

import numpy

from .curve import geometry

logger = logging.getLogger(__name__)

# Query-string parameter names for the input points and the contour offset.
POINTS_PARAM = 'points'
SIGNED_DISTANCE_PARAM = 'signedDistance'

class _NumpyEncoder(json.JSONEncoder):
    """JSON encoder that is smart about converting iterators and numpy arrays to
    lists, and converting numpy scalars to python scalars.
    """
    def default(self, o):
        if isinstance(o, numpy.ndarray):
            return o.tolist()
        if isinstance(o, numpy.generic):
            return o.item()
        try:
            return list(o)
        except TypeError:
            return super().default(o)

_COMPACT_ENCODER = _NumpyEncoder(separators=(',', ':'))
_READABLE_ENCODER = _NumpyEncoder(indent=4, sort_keys=True)

def json_encode_compact_to_str(data):
    """Encode compact JSON, e.g. for embedding in a URL."""
    return _COMPACT_ENCODER.encode(data)

def json_encode_legible_to_str(data):
    """Encode nicely-formatted JSON to a string."""
    return _READABLE_ENCODER.encode(data)

def json_encode_atomic_legible_to_file(data, filename):
    """Encode nicely-formatted JSON, and if there was no error, atomically write.

    Care is taken to never overwrite an existing file except in an atomic manner
    after all other steps have occured. This prevents errors from causing a
    partial overwrite of an existing file: the result of this function is all or
    none.

    Parameters:
        data: python objects to be JSON encoded
        filename: string or pathlib.Path object for destination file.
    """
    s = json_encode_legible_to_str(data)
    filename = pathlib.Path(filename)
    prefix = filename.name + '-temp.'
    fd, tmp_path = tempfile.mkstemp(prefix=prefix, dir=str(filename.parent))
    try:
        with os.fdopen(fd, 'w') as f:
            f.write(s)
        os.replace(tmp_path, filename)
    except Exception:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise

def encode_query(points, signed_distance=None):
    """Encode curve input points and an optional contour offset as a URL query.

    The points are stored as a compact JSON list of [x, y] pairs. If there are
    no points, the points parameter is omitted entirely.

    Example:
        query = encode_query([(10, 20), (30, 25)], signed_distance=5)
        url = 'http://localhost:8000/index.html?' + query
        points, signed_distance = decode_query(url)
    """
    points = geometry.as_points(points)
    params = {}
    if len(points) > 0:
        params[POINTS_PARAM] = json_encode_compact_to_str(points)
    if signed_distance is not None:
        params[SIGNED_DISTANCE_PARAM] = json_encode_compact_to_str(float(signed_distance))
    return urllib.parse.urlencode(params)

def decode_query(query):
    """Decode points and a contour offset from a URL or its query string.

    A missing or malformed points parameter gives no points, and a missing or
    malformed offset gives 0. Malformed values are logged as warnings rather
    than raised, so that a bad URL just yields an empty curve.

    Returns: (points, signed_distance), where points has shape (n, 2).
    """
    query = urllib.parse.urlsplit(query).query or query
    params = urllib.parse.parse_qs(query)
    points = numpy.empty((0, 2))
    if POINTS_PARAM in params:
        encoded = params[POINTS_PARAM][0]
        try:
            points = geometry.as_points(json.loads(encoded))
        except (ValueError, TypeError):
            logger.warning('Ignoring malformed %r query parameter: %r', POINTS_PARAM, encoded)
    signed_distance = 0.0
    if SIGNED_DISTANCE_PARAM in params:
        encoded = params[SIGNED_DISTANCE_PARAM][0]
        try:
            signed_distance = float(encoded)
        except ValueError:
            logger.warning('Ignoring malformed %r query parameter: %r', SIGNED_DISTANCE_PARAM, encoded)
    return points, signed_distance

def dump_curve_state(path, points, signed_distance=0):
    """Atomically write curve input points and a contour offset to a JSON file.

    Example:
        dump_curve_state('path/to/curve.json', [(10, 20), (30, 25)], signed_distance=5)
        points, signed_distance = load_curve_state('path/to/curve.json')
    """
    points = geometry.as_points(points)
    data = {'points': points, 'signed_distance': float(signed_distance)}
    json_encode_atomic_legible_to_file(data, path)
    logger.debug('Wrote %d points to %s', len(points), path)

def load_curve_state(path):
    """Load curve input points and a contour offset written by dump_curve_state().

    Returns: (points, signed_distance), where points has shape (n, 2).
    """
    path = pathlib.Path(path)
    with path.open('r') as f:
        data = json.load(f)
    points = geometry.as_points(data['points'])
    return points, float(data.get('signed_distance', 0))
