"""Validation of values crossing into the heap

Everything handed to MinMaxHeap goes through here first. Batches are
validated as a whole so a bad item never leaves a batch half-inserted.
"""
import math
import numbers
import operator

import numpy as np

INT64 = np.iinfo(np.int64)

class MinMaxError(Exception):
    """Base class for errors raised by this package"""

class CoercionError(MinMaxError, TypeError):
    """A value could not be interpreted as a 64-bit signed integer"""

class Int64RangeError(CoercionError, OverflowError):
    """An integer value falls outside the 64-bit signed range"""

def to_int64(value, name='value'):
    """Return value as a Python int in the int64 range

    Accepts anything implementing ``__index__`` (Python ints, numpy integer
    scalars) except booleans. Other finite real numbers (floats, numpy
    floats, fractions) are truncated toward zero; NaN and infinities are
    rejected.
    """
    if isinstance(value, (bool, np.bool_)):
        raise CoercionError('{} must be an integer, not bool'.format(name))
    if isinstance(value, numbers.Real) and not isinstance(value, numbers.Integral):
        value = _truncate(value, name)
    try:
        value = operator.index(value)
    except TypeError:
        raise CoercionError(
            '{} must be an integer, not {}'.format(name, type(value).__name__)
        ) from None
    if not INT64.min <= value <= INT64.max:
        raise Int64RangeError('{} {} does not fit in a signed 64-bit integer'.format(name, value))
    return value

def _truncate(value, name):
    if math.isnan(value):
        raise CoercionError('{} must be a number, not NaN'.format(name))
    if math.isinf(value):
        raise Int64RangeError('{} {} does not fit in a signed 64-bit integer'.format(name, value))
    return int(value)

def coerce_pairs(pairs):
    """Convert a batch of (priority, payload) pairs to a list of int tuples

    Args:
        pairs (iterable or np.ndarray):
            Pairs of numbers, or an integer or float array of shape (n, 2)

    Returns:
        list of (int, int) tuples, ready to insert

    Raises:
        CoercionError: if any item is not a pair of real numbers, or is NaN
        Int64RangeError: if any value does not fit in int64 (including infinities)
    """
    if isinstance(pairs, np.ndarray):
        return _coerce_array(pairs)
    try:
        pairs = list(pairs)
    except TypeError:
        raise CoercionError(
            'expected an iterable of (priority, payload) pairs, not {}'.format(type(pairs).__name__)
        ) from None
    coerced = []
    for index, pair in enumerate(pairs):
        if isinstance(pair, (str, bytes)):
            raise CoercionError('item {} is not a (priority, payload) pair: {!r}'.format(index, pair))
        try:
            priority, payload = pair
        except (TypeError, ValueError):
            raise CoercionError(
                'item {} is not a (priority, payload) pair: {!r}'.format(index, pair)
            ) from None
        coerced.append((to_int64(priority, 'priority'), to_int64(payload, 'payload')))
    return coerced

def _coerce_array(array):
    if array.ndim != 2 or array.shape[1] != 2:
        raise CoercionError('expected an array of shape (n, 2), got {}'.format(array.shape))
    if array.dtype.kind == 'f':
        # truncated and range-checked value by value
        return coerce_pairs(array.tolist())
    if array.dtype.kind not in 'iu':
        raise CoercionError('expected an integer or float array, got dtype {}'.format(array.dtype))
    if array.dtype.kind == 'u' and array.size and array.max() > INT64.max:
        raise Int64RangeError('array holds values that do not fit in a signed 64-bit integer')
    return [tuple(row) for row in array.tolist()]
