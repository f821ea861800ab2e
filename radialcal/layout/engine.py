"""
Slice Layout Engine for radialcal
Pure slice-and-dot layout for radial calendar views

Algorithm:
- Split the circle into N equal wedges, slice 0 starting at the top
- Bucket events by slice index, preserving input order
- Place at most max_dots_per_slice dots along each slice's mid-angle,
  stepping outward from start_radius_factor by radius_increment_factor
- Drop any dot that would land at or beyond the clip radius
"""
from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Sequence
from math import isfinite
from numbers import Integral, Real
import logging

from ..config import DotPlacementConfig, LayoutConfig
from ..errors import InvalidConfiguration, OutOfRangeEvent
from ..geometry import WedgePath, polar_to_cartesian
from ..types import OUT_OF_RANGE_POLICIES, OutOfRangePolicy
from .types import CalendarEvent, EventDot, SliceGeometry

logger = logging.getLogger(__name__)


class SliceLayoutEngine:
    """
    Stateless slice-and-dot layout

    The engine holds only its constants; every call to compute() builds a
    fresh result from its inputs, so one engine can be shared freely.
    """

    def __init__(self, config: Optional[LayoutConfig] = None) -> None:
        """
        Initialize layout engine

        Args:
            config: Geometry constants. If None, uses default settings.
        """
        self.config: LayoutConfig = config or LayoutConfig()

    def compute(
        self,
        events: Iterable[CalendarEvent],
        number_of_slices: int,
        view_box_size: Optional[float] = None,
        dot_placement: Optional[DotPlacementConfig] = None,
        out_of_range: Optional[OutOfRangePolicy] = None
    ) -> List[SliceGeometry]:
        """
        Lay out all slices and their event dots

        Args:
            events: Events tagged with slice indices
            number_of_slices: Number of equal wedges (>= 1)
            view_box_size: Edge of the square coordinate system (default: config)
            dot_placement: Dot placement factors (default: config)
            out_of_range: 'drop', 'clamp' or 'reject' (default: config)

        Returns:
            Exactly number_of_slices SliceGeometry objects, ascending index

        Raises:
            InvalidConfiguration: Bad slice count, view box or placement factors
            OutOfRangeEvent: Under the 'reject' policy only
        """
        size = self.config.view_box_size if view_box_size is None else view_box_size
        placement = dot_placement or self.config.dot_placement
        policy = out_of_range or self.config.out_of_range
        self._validate(number_of_slices, size, placement, policy)
        number_of_slices = int(number_of_slices)

        buckets = self._bucket_events(list(events), number_of_slices, policy)

        center = size / 2
        slice_radius = (size / 2) * self.config.slice_radius_fraction
        clip_radius = slice_radius * self.config.dot_clip_fraction
        dot_radius = size * self.config.dot_radius_fraction
        angle_per_slice = 360 / number_of_slices
        large_arc = 0 if angle_per_slice <= 180 else 1

        slices: List[SliceGeometry] = []
        for i in range(number_of_slices):
            start_deg = i * angle_per_slice + self.config.angle_offset
            end_deg = (i + 1) * angle_per_slice + self.config.angle_offset

            path = WedgePath(
                center=(center, center),
                start=polar_to_cartesian((center, center), slice_radius, start_deg),
                end=polar_to_cartesian((center, center), slice_radius, end_deg),
                radius=slice_radius,
                start_angle=start_deg,
                end_angle=end_deg,
                large_arc=large_arc,
                sweep=1
            )

            slice_events = buckets[i]
            mid_deg = start_deg + angle_per_slice / 2
            dots: List[EventDot] = []
            for k, event in enumerate(slice_events[:placement.max_dots_per_slice]):
                distance = slice_radius * (
                    placement.start_radius_factor + k * placement.radius_increment_factor
                )
                if distance >= clip_radius:
                    continue
                cx, cy = polar_to_cartesian((center, center), distance, mid_deg)
                dots.append(EventDot(
                    id=event.id,
                    cx=cx,
                    cy=cy,
                    radius=dot_radius,
                    fill=event.color,
                    distance=distance
                ))

            slices.append(SliceGeometry(
                index=i,
                path=path,
                event_dots=tuple(dots),
                original_events=tuple(slice_events)
            ))

        logger.debug(f"Computed {number_of_slices} slices, "
                     f"{sum(len(s.event_dots) for s in slices)} dots")
        return slices

    def _bucket_events(
        self,
        events: Sequence[CalendarEvent],
        number_of_slices: int,
        policy: OutOfRangePolicy
    ) -> Dict[int, List[CalendarEvent]]:
        """
        Group events by slice index in input order, applying the out-of-range policy

        Events whose slice index is not an integer belong to no slice under
        any policy; 'clamp' never moves them into range.
        """
        buckets: Dict[int, List[CalendarEvent]] = {i: [] for i in range(number_of_slices)}
        excluded: List[CalendarEvent] = []
        n_malformed = 0
        n_clamped = 0

        for event in events:
            index = event.slice_index
            if isinstance(index, bool) or not isinstance(index, Integral):
                excluded.append(event)
                n_malformed += 1
            elif 0 <= index < number_of_slices:
                buckets[index].append(event)
            elif policy == 'clamp':
                buckets[0 if index < 0 else number_of_slices - 1].append(event)
                n_clamped += 1
            else:
                excluded.append(event)

        if excluded and policy == 'reject':
            raise OutOfRangeEvent([e.id for e in excluded], number_of_slices)
        if n_clamped:
            logger.info(f"Clamped {n_clamped} event(s) into slice range [0, {number_of_slices})")
        if excluded:
            logger.warning(f"Dropped {len(excluded)} event(s) outside slice range "
                           f"[0, {number_of_slices}) ({n_malformed} with a non-integer index)")

        return buckets

    @staticmethod
    def _validate(
        number_of_slices: int,
        view_box_size: float,
        placement: DotPlacementConfig,
        policy: str
    ) -> None:
        """Reject inputs that cannot produce a layout"""
        if isinstance(number_of_slices, bool) or not isinstance(number_of_slices, Integral):
            raise InvalidConfiguration(
                f"number_of_slices must be an integer, got {number_of_slices!r}")
        if number_of_slices <= 0:
            raise InvalidConfiguration(
                f"number_of_slices must be positive, got {number_of_slices}")

        if (isinstance(view_box_size, bool) or not isinstance(view_box_size, Real)
                or not isfinite(view_box_size) or view_box_size <= 0):
            raise InvalidConfiguration(
                f"view_box_size must be a positive finite number, got {view_box_size!r}")

        for name in ('start_radius_factor', 'radius_increment_factor'):
            value = getattr(placement, name)
            if (isinstance(value, bool) or not isinstance(value, Real)
                    or not isfinite(value) or value < 0):
                raise InvalidConfiguration(
                    f"{name} must be a finite non-negative number, got {value!r}")

        max_dots = placement.max_dots_per_slice
        if isinstance(max_dots, bool) or not isinstance(max_dots, Integral) or max_dots < 0:
            raise InvalidConfiguration(
                f"max_dots_per_slice must be a non-negative integer, got {max_dots!r}")

        if policy not in OUT_OF_RANGE_POLICIES:
            raise InvalidConfiguration(
                f"out_of_range must be one of {', '.join(OUT_OF_RANGE_POLICIES)}, got {policy!r}")


def compute_slices(
    events: Iterable[CalendarEvent],
    number_of_slices: int,
    view_box_size: Optional[float] = None,
    dot_placement: Optional[DotPlacementConfig] = None,
    out_of_range: Optional[OutOfRangePolicy] = None
) -> List[SliceGeometry]:
    """
    Convenience wrapper around SliceLayoutEngine().compute()

    Example:
        >>> slices = compute_slices([CalendarEvent('a', 1, 'A', 'red')], 4)
        >>> len(slices), len(slices[1].event_dots)
        (4, 1)
    """
    return SliceLayoutEngine().compute(
        events, number_of_slices, view_box_size, dot_placement, out_of_range
    )
