"""Command-line subcommands for radialcal"""

from __future__ import annotations
from typing import List, Optional
import logging

from ..data import DEFAULT_SAMPLE_EVENTS
from ..io import read_events
from ..layout import CalendarEvent

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False) -> None:
    """Configure root logging for a subcommand run"""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Silence very noisy third-party loggers (matplotlib font discovery etc.)
    for noisy in ("matplotlib", "matplotlib.font_manager", "PIL", "PIL.Image", "fontTools"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def load_view_events(events_file: Optional[str], view: str) -> List[CalendarEvent]:
    """Read events for a view, falling back to the bundled sample data"""
    if events_file is None:
        logger.info("Using bundled sample events")
        events_file = DEFAULT_SAMPLE_EVENTS
    else:
        logger.info(f"Using events file: {events_file}")
    events = read_events(events_file, view)
    logger.info(f"Loaded {len(events)} events for view {view}")
    return events
