"""
#################################################
Interval arithmetic (:mod:`cranberries.interval`)
#################################################

.. currentmodule:: cranberries.interval

This module provides interval arithmetic with double-precision endpoints.

Intervals
=========

.. autosummary::
    :toctree: generated/

    Interval

Exceptions
==========

.. autosummary::
    :toctree: generated/

    InvalidBoundsError
    IntervalDomainError
    IntervalPoleError
    IntervalZeroDivisionError

"""

from .interval import (
    Interval,
    IntervalDomainError,
    IntervalPoleError,
    IntervalZeroDivisionError,
    InvalidBoundsError,
)

__all__ = [
    "Interval",
    "IntervalDomainError",
    "IntervalPoleError",
    "IntervalZeroDivisionError",
    "InvalidBoundsError",
]
