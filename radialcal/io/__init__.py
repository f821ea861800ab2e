"""I/O utilities for radialcal"""

from .readers import EventReader, read_events
from .writers import LayoutWriter, SVGWriter, write_layout, write_svg

__all__ = [
    'EventReader', 'read_events',
    'LayoutWriter', 'write_layout',
    'SVGWriter', 'write_svg']
