"""Conversion of ordinal x values (dates, integers) to floats.

Splines are built and evaluated on real numbers. Calendar values are reduced
to proleptic Gregorian day ordinals, the scale used by ``date.toordinal()``,
so a spline built on dates can be queried with dates, with
``numpy.datetime64`` values, or with the equivalent ordinal floats.
"""

from __future__ import annotations

import datetime

import numpy as np

EPOCH_ORDINAL = datetime.date(1970, 1, 1).toordinal()
SECONDS_PER_DAY = 86400.0


def is_date_like(value) -> bool:
    """Whether a scalar is a calendar value rather than a number."""
    return isinstance(value, (datetime.date, np.datetime64))


def _scalar_ordinal(value) -> float:
    if isinstance(value, datetime.datetime):
        seconds = (
            value.hour * 3600 + value.minute * 60 + value.second
            + value.microsecond / 1e6
        )
        return value.toordinal() + seconds / SECONDS_PER_DAY
    if isinstance(value, datetime.date):
        return float(value.toordinal())
    if isinstance(value, np.datetime64):
        return float(_datetime64_ordinal(np.asarray(value)))
    return float(value)


def _datetime64_ordinal(values: np.ndarray) -> np.ndarray:
    days = (values - np.datetime64('1970-01-01')) / np.timedelta64(1, 'D')
    return days + EPOCH_ORDINAL


def to_ordinal(values) -> float | np.ndarray:
    """Convert numbers or calendar values to floats.

    Args:
        values: A scalar or array-like of numbers, ``datetime.date``,
            ``datetime.datetime`` or ``numpy.datetime64`` values.

    Returns:
        A float for scalar input, otherwise a float64 array with the input's
        shape.
    """
    if is_date_like(values):
        return _scalar_ordinal(values)

    arr = np.asarray(values)

    if arr.dtype.kind == 'M':
        result = _datetime64_ordinal(arr)
    elif arr.dtype.kind == 'O':
        result = np.array(
            [_scalar_ordinal(v) for v in arr.ravel()], dtype=float
        ).reshape(arr.shape)
    else:
        result = arr.astype(float)

    if result.ndim == 0:
        return float(result)
    return result
