"""
I/O Readers

Reads event tables into CalendarEvent lists.
"""

from __future__ import annotations
from typing import List, Optional
from pathlib import Path
import pandas as pd
import logging

from ..layout import CalendarEvent
from ..types import EventRecord, PathLike

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ('id', 'slice_index', 'name', 'color')


class EventReader:
    """Reads tab-separated event tables"""

    @staticmethod
    def read_frame(events_file: PathLike) -> pd.DataFrame:
        """
        Load and validate the raw events table

        Args:
            events_file: Path to a TSV with id, slice_index, name, color
                         and optional timestamp/view columns

        Returns:
            DataFrame with slice_index as int; rows with a missing or
            non-integer slice index are dropped

        Raises:
            FileNotFoundError: File does not exist
            ValueError: Required columns are missing
        """
        if not Path(events_file).exists():
            raise FileNotFoundError(f"Events file not found: {events_file}")

        # Everything as text so ids and names stay verbatim ('01' != '1')
        frame: pd.DataFrame = pd.read_csv(events_file, sep='\t', dtype=str, keep_default_na=False)
        missing = [c for c in REQUIRED_COLUMNS if c not in frame.columns]
        if missing:
            raise ValueError(f"{events_file}: missing required column(s): {', '.join(missing)}")

        index = pd.to_numeric(frame['slice_index'], errors='coerce')
        invalid = index.isna() | (index % 1 != 0)
        if invalid.any():
            logger.warning(f"Skipping {int(invalid.sum())} row(s) with invalid slice_index "
                           f"in {events_file}")
        frame = frame.loc[~invalid].copy()
        frame['slice_index'] = index[~invalid].astype(int)
        return frame

    @staticmethod
    def from_frame(frame: pd.DataFrame, view: Optional[str] = None) -> List[CalendarEvent]:
        """
        Convert an events DataFrame into CalendarEvent objects, input order kept

        Args:
            frame: DataFrame as returned by read_frame
            view: Keep only rows for this view (when a 'view' column exists)
        """
        if view is not None and 'view' in frame.columns:
            frame = frame[frame['view'] == view]

        records: List[EventRecord] = frame.to_dict('records')  # type: ignore
        events: List[CalendarEvent] = []
        for record in records:
            timestamp = record.get('timestamp')
            if timestamp is not None and (pd.isna(timestamp) or timestamp == ''):
                timestamp = None
            events.append(CalendarEvent(
                id=str(record['id']),
                slice_index=int(record['slice_index']),
                name=str(record['name']),
                color=str(record['color']),
                timestamp=None if timestamp is None else str(timestamp)
            ))
        return events

    @classmethod
    def read(cls, events_file: PathLike, view: Optional[str] = None) -> List[CalendarEvent]:
        """
        Read events for one view (or all rows when view is None)
        """
        events = cls.from_frame(cls.read_frame(events_file), view)
        logger.debug(f"Read {len(events)} events from {events_file}")
        return events


def read_events(events_file: PathLike, view: Optional[str] = None) -> List[CalendarEvent]:
    """
    Convenience function to read an events table

    Args:
        events_file: Path to events TSV
        view: Optional view name filter

    Returns:
        List of CalendarEvent in file order
    """
    return EventReader.read(events_file, view)
