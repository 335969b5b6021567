"""
################################################
Exact interval arithmetic (:mod:`ratmath.interval`)
################################################

.. currentmodule:: ratmath.interval

This module provides closed intervals with exact endpoints.

Intervals
=========

.. autosummary::
    :toctree: generated/

    RationalInterval
    FractionInterval

"""

from .fractioninterval import FractionInterval
from .rationalinterval import RationalInterval

__all__ = [
    "FractionInterval",
    "RationalInterval",
]
