"""radialcal: slice-and-dot layout for radial calendar views"""

from .config import DotPlacementConfig, LayoutConfig, PlotConfig
from .errors import InvalidConfiguration, OutOfRangeEvent
from .layout import CalendarEvent, EventDot, SliceGeometry, SliceLayoutEngine, compute_slices
from .views import VIEWS, PeriodNavigator, ViewDefinition, get_view, handle_key
from .visualizer import RadialPlotter

__version__ = "0.1.0"
__all__ = [
    "DotPlacementConfig", "LayoutConfig", "PlotConfig",
    "InvalidConfiguration", "OutOfRangeEvent",
    "CalendarEvent", "EventDot", "SliceGeometry", "SliceLayoutEngine", "compute_slices",
    "VIEWS", "PeriodNavigator", "ViewDefinition", "get_view", "handle_key",
    "RadialPlotter"]
