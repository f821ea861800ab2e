"""
Type definitions for radialcal

Common types used throughout the package for type checking and documentation.
"""

from __future__ import annotations
from typing import TypedDict, Literal, Tuple, Union
from pathlib import Path

# Type aliases
PathLike = Union[str, Path]
"""File path as string or Path object"""

Point = Tuple[float, float]
"""(x, y) in view-box coordinates, y pointing down"""

OutOfRangePolicy = Literal['drop', 'clamp', 'reject']
"""Handling of events whose slice index falls outside [0, N)"""

PeriodUnit = Literal['hour', 'day', 'week']
"""Time bucket represented by one slice"""

OUT_OF_RANGE_POLICIES: Tuple[str, ...] = ('drop', 'clamp', 'reject')


class EventRecord(TypedDict, total=False):
    """
    One row of an events table

    Only id, slice_index, name and color are required by the layout.
    """
    id: str
    slice_index: int
    name: str
    color: str
    timestamp: str
    view: str
