"""
I/O Writers

Writes layout results as TSV tables and standalone SVG documents.
"""

from __future__ import annotations
from typing import Optional, Sequence
from html import escape
from pathlib import Path
import pandas as pd
import logging

from ..geometry import format_number
from ..layout import SliceGeometry
from ..types import PathLike

logger = logging.getLogger(__name__)


class LayoutWriter:
    """Writes slice and dot tables in TSV format"""

    @staticmethod
    def slices_frame(slices: Sequence[SliceGeometry]) -> pd.DataFrame:
        """One row per slice"""
        return pd.DataFrame({
            'slice_id': [s.id for s in slices],
            'index': [s.index for s in slices],
            'start_angle': [s.start_angle for s in slices],
            'end_angle': [s.end_angle for s in slices],
            'n_events': [s.n_events for s in slices],
            'n_dots': [len(s.event_dots) for s in slices],
            'd': [s.d for s in slices],
        })

    @staticmethod
    def dots_frame(slices: Sequence[SliceGeometry]) -> pd.DataFrame:
        """One row per placed dot, in slice then placement order"""
        rows = [
            {
                'slice_id': s.id,
                'event_id': dot.id,
                'cx': dot.cx,
                'cy': dot.cy,
                'radius': dot.radius,
                'fill': dot.fill,
                'distance': dot.distance,
            }
            for s in slices
            for dot in s.event_dots
        ]
        columns = ['slice_id', 'event_id', 'cx', 'cy', 'radius', 'fill', 'distance']
        return pd.DataFrame(rows, columns=columns)

    def write(
        self,
        slices: Sequence[SliceGeometry],
        slices_file: PathLike,
        dots_file: PathLike
    ) -> None:
        """
        Write both tables

        Args:
            slices: Layout result
            slices_file: Output path for the slice table
            dots_file: Output path for the dot table
        """
        for output in (slices_file, dots_file):
            Path(output).parent.mkdir(parents=True, exist_ok=True)

        slices_df = self.slices_frame(slices)
        dots_df = self.dots_frame(slices)
        slices_df.to_csv(slices_file, sep='\t', index=False)
        dots_df.to_csv(dots_file, sep='\t', index=False)
        logger.info(f"Wrote {len(slices_df)} slices to {slices_file}")
        logger.info(f"Wrote {len(dots_df)} dots to {dots_file}")


class SVGWriter:
    """Writes a layout as a standalone SVG document"""

    def __init__(
        self,
        view_box_size: float = 200.0,
        slice_fill: str = '#f4f4f6',
        highlight_fill: str = '#ffe8a3',
        stroke: str = '#9aa0a6'
    ) -> None:
        self.view_box_size = view_box_size
        self.slice_fill = slice_fill
        self.highlight_fill = highlight_fill
        self.stroke = stroke

    def render(
        self,
        slices: Sequence[SliceGeometry],
        highlighted: Optional[int] = None,
        title: Optional[str] = None
    ) -> str:
        """
        Build the SVG markup

        Args:
            slices: Layout result
            highlighted: Index of the slice to fill with the highlight color
            title: Optional <title> element text
        """
        size = format_number(self.view_box_size)
        lines = [
            f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {size} {size}" '
            f'width="{size}" height="{size}">'
        ]
        if title:
            lines.append(f'  <title>{escape(title)}</title>')

        for s in slices:
            fill = self.highlight_fill if s.index == highlighted else self.slice_fill
            lines.append(f'  <g id="{s.id}">')
            lines.append(f'    <path d="{s.d}" fill="{fill}" stroke="{self.stroke}" stroke-width="0.5"/>')
            for dot in s.event_dots:
                lines.append(
                    f'    <circle id="{escape(dot.id, quote=True)}" cx="{format_number(dot.cx)}" '
                    f'cy="{format_number(dot.cy)}" r="{format_number(dot.radius)}" '
                    f'fill="{escape(dot.fill, quote=True)}"/>'
                )
            lines.append('  </g>')

        lines.append('</svg>')
        return '\n'.join(lines) + '\n'

    def write(
        self,
        slices: Sequence[SliceGeometry],
        output_file: PathLike,
        highlighted: Optional[int] = None,
        title: Optional[str] = None
    ) -> None:
        """Render and save the SVG document"""
        Path(output_file).parent.mkdir(parents=True, exist_ok=True)
        Path(output_file).write_text(self.render(slices, highlighted, title), encoding='utf-8')
        logger.info(f"Wrote SVG: {output_file}")


def write_layout(slices: Sequence[SliceGeometry], slices_file: PathLike, dots_file: PathLike) -> None:
    """Convenience function for LayoutWriter().write()"""
    LayoutWriter().write(slices, slices_file, dots_file)


def write_svg(
    slices: Sequence[SliceGeometry],
    output_file: PathLike,
    view_box_size: float = 200.0,
    highlighted: Optional[int] = None,
    title: Optional[str] = None
) -> None:
    """Convenience function for SVGWriter().write()"""
    SVGWriter(view_box_size).write(slices, output_file, highlighted, title)
