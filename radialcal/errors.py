"""Exceptions raised by radialcal"""

from typing import Sequence


class InvalidConfiguration(ValueError):
    """Slice count, view box or dot placement cannot produce a layout"""


class OutOfRangeEvent(ValueError):
    """
    Raised under the 'reject' policy when events point outside [0, N)

    Attributes:
        event_ids: Ids of the offending events, in input order
        number_of_slices: Slice count the events were checked against
    """

    def __init__(self, event_ids: Sequence[str], number_of_slices: int) -> None:
        self.event_ids = list(event_ids)
        self.number_of_slices = number_of_slices
        shown = ', '.join(self.event_ids[:5])
        more = f" (+{len(self.event_ids) - 5} more)" if len(self.event_ids) > 5 else ""
        super().__init__(
            f"{len(self.event_ids)} event(s) outside slice range [0, {number_of_slices}): "
            f"{shown}{more}"
        )
