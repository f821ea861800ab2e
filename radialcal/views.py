"""
Radial calendar views

View definitions (12-hour clock, 7-day week, 4-week month), the caller-owned
navigation state and the keyboard adapter. None of this lives in the layout
engine; views call the engine again whenever their events change.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple
import logging

from .config import DotPlacementConfig
from .layout import CalendarEvent, SliceGeometry, SliceLayoutEngine
from .types import PeriodUnit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewDefinition:
    """
    One radial calendar view

    Attributes:
        name: Registry key ('12hour', '7day', '4week')
        route: URL path the view is served under
        number_of_slices: Number of slices in the circle
        unit: Time bucket a slice represents
        labels: One label per slice, clockwise from the top
        title: Human-readable view title
    """
    name: str
    route: str
    number_of_slices: int
    unit: PeriodUnit
    labels: Tuple[str, ...]
    title: str
    dot_placement: DotPlacementConfig = field(default_factory=DotPlacementConfig)

    def compute(
        self,
        events: Iterable[CalendarEvent],
        engine: Optional[SliceLayoutEngine] = None
    ) -> List[SliceGeometry]:
        """Lay out this view's slices for the given events"""
        engine = engine or SliceLayoutEngine()
        return engine.compute(
            events,
            self.number_of_slices,
            dot_placement=self.dot_placement
        )

    def label(self, index: int) -> str:
        return self.labels[index % self.number_of_slices]


VIEWS: Dict[str, ViewDefinition] = {
    '12hour': ViewDefinition(
        name='12hour',
        route='/',
        number_of_slices=12,
        unit='hour',
        labels=('12',) + tuple(str(h) for h in range(1, 12)),
        title='12 Hour View'
    ),
    '7day': ViewDefinition(
        name='7day',
        route='/7day',
        number_of_slices=7,
        unit='day',
        labels=('Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun'),
        title='7 Day View'
    ),
    '4week': ViewDefinition(
        name='4week',
        route='/4week',
        number_of_slices=4,
        unit='week',
        labels=tuple(f"Week {w}" for w in range(1, 5)),
        title='4 Week View'
    ),
}


def get_view(name: str) -> ViewDefinition:
    """
    Look up a view by name

    Raises:
        KeyError: Unknown view name
    """
    try:
        return VIEWS[name]
    except KeyError:
        raise KeyError(f"Unknown view '{name}'. Available: {', '.join(VIEWS)}") from None


def view_for_route(route: str) -> ViewDefinition:
    """
    Look up a view by its URL path ('/', '/7day', '/4week')

    Raises:
        KeyError: No view is served under the route
    """
    normalized = '/' + route.strip('/')
    for view in VIEWS.values():
        if view.route == normalized:
            return view
    raise KeyError(f"No view for route '{route}'")


@dataclass
class PeriodNavigator:
    """
    Navigation state for one view

    `current` is a simulated period counter (hours, days or weeks from the
    starting point); the highlighted slice follows it around the circle.

    Attributes:
        view: View being navigated
        current: Period counter, may be negative
        selected: Index of the slice whose details are shown, if any
    """
    view: ViewDefinition
    current: int = 0
    selected: Optional[int] = None

    @property
    def highlighted_index(self) -> int:
        """Slice of the current period"""
        return self.current % self.view.number_of_slices

    @property
    def period_label(self) -> str:
        """e.g. 'Tue (+8 days)' or 'Week 1 (now)'"""
        label = self.view.label(self.highlighted_index)
        if self.current == 0:
            return f"{label} (now)"
        unit = self.view.unit if abs(self.current) == 1 else f"{self.view.unit}s"
        return f"{label} ({self.current:+d} {unit})"

    def advance(self, steps: int = 1) -> int:
        """Move forward and return the new highlighted index"""
        self.current += steps
        logger.debug(f"{self.view.name}: advanced to {self.current}")
        return self.highlighted_index

    def retreat(self, steps: int = 1) -> int:
        """Move backward and return the new highlighted index"""
        return self.advance(-steps)

    def reset(self) -> int:
        self.current = 0
        return self.highlighted_index

    def select(self, index: int) -> None:
        """
        Select a slice for the detail surface

        Raises:
            IndexError: index outside [0, N)
        """
        if not 0 <= index < self.view.number_of_slices:
            raise IndexError(
                f"Slice {index} outside [0, {self.view.number_of_slices}) for view {self.view.name}")
        self.selected = index

    def clear_selection(self) -> None:
        self.selected = None

    def selected_events(self, slices: Sequence[SliceGeometry]) -> Tuple[CalendarEvent, ...]:
        """Full, uncapped event list of the selected slice"""
        if self.selected is None:
            return ()
        return slices[self.selected].original_events


# ============================================================
# KEYBOARD
# ============================================================

KeyAction = Callable[[PeriodNavigator], None]

KEY_BINDINGS: Dict[str, KeyAction] = {
    'ArrowRight': lambda nav: nav.advance(),
    'ArrowLeft': lambda nav: nav.retreat(),
    'Home': lambda nav: nav.reset(),
    'Enter': lambda nav: nav.select(nav.highlighted_index),
    'Escape': lambda nav: nav.clear_selection(),
}


def handle_key(navigator: PeriodNavigator, key: str) -> bool:
    """
    Apply a key press to the navigator

    Digit keys select the slice with that index (when it exists).

    Returns:
        True if the key was consumed
    """
    action = KEY_BINDINGS.get(key)
    if action is not None:
        action(navigator)
        return True

    if len(key) == 1 and key in '0123456789' and int(key) < navigator.view.number_of_slices:
        navigator.select(int(key))
        return True

    return False
