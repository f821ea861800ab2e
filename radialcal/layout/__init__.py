"""
Layout Module for radialcal
Slice-and-dot layout engine for radial calendar views

Public API:
    - SliceLayoutEngine: Main layout calculation engine
    - compute_slices: One-shot convenience wrapper
    - SliceGeometry: Layout of one slice
    - EventDot: Placed event marker
    - CalendarEvent: Input event
"""

from .engine import SliceLayoutEngine, compute_slices
from .types import (
    CalendarEvent,
    EventDot,
    SliceGeometry,
)

__all__ = [
    'SliceLayoutEngine',
    'compute_slices',
    'CalendarEvent',
    'EventDot',
    'SliceGeometry',
]
