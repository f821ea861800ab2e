"""
Layout types for radialcal
Data structures for the slice layout engine

All types are immutable (frozen) so results can be shared and compared.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from ..geometry import WedgePath


@dataclass(frozen=True)
class CalendarEvent:
    """
    An event attached to one slice

    Attributes:
        id: Unique, opaque identifier
        slice_index: Slice the event belongs to (intended domain [0, N))
        name: Display label
        color: Marker fill (any CSS/matplotlib color string)
        timestamp: Optional display time, ignored by the layout
    """
    id: str
    slice_index: int
    name: str
    color: str
    timestamp: Optional[str] = None


@dataclass(frozen=True)
class EventDot:
    """
    A placed event marker

    Attributes:
        id: Id of the event the dot represents
        cx: Absolute x coordinate
        cy: Absolute y coordinate
        radius: Visual radius of the dot
        fill: Fill color (the event color)
        distance: Radial distance from the circle center
    """
    id: str
    cx: float
    cy: float
    radius: float
    fill: str
    distance: float


@dataclass(frozen=True)
class SliceGeometry:
    """
    Layout result for one slice

    Attributes:
        index: Slice index, 0 at the top, increasing clockwise
        path: Wedge outline
        event_dots: Placed markers (capped and radially clipped)
        original_events: Every event bucketed into this slice, input order
    """
    index: int
    path: WedgePath
    event_dots: Tuple[EventDot, ...]
    original_events: Tuple[CalendarEvent, ...]

    @property
    def id(self) -> str:
        """Stable id derived from the index"""
        return f"slice-{self.index}"

    @property
    def d(self) -> str:
        """SVG path data of the wedge"""
        return self.path.to_svg()

    @property
    def start_angle(self) -> float:
        return self.path.start_angle

    @property
    def end_angle(self) -> float:
        return self.path.end_angle

    @property
    def angle_span(self) -> float:
        """Angular width in degrees"""
        return self.path.end_angle - self.path.start_angle

    @property
    def mid_angle(self) -> float:
        return self.path.start_angle + self.angle_span / 2

    @property
    def n_events(self) -> int:
        return len(self.original_events)

    @property
    def n_hidden(self) -> int:
        """Events bucketed here but not drawn as dots"""
        return len(self.original_events) - len(self.event_dots)
