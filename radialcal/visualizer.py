"""
Radial calendar visualizer

Draws a slice layout with matplotlib in the layout's own coordinate
system (square view box, y pointing down).
"""

from __future__ import annotations
from typing import Optional, Sequence
from pathlib import Path
import matplotlib.pyplot as plt
import matplotlib.patches as patches
from matplotlib.figure import Figure
from matplotlib.path import Path as MplPath
import logging

from .config import PlotConfig
from .geometry import polar_to_cartesian
from .layout import SliceGeometry

logger = logging.getLogger(__name__)


class RadialPlotter:
    """
    Renders SliceGeometry lists produced by SliceLayoutEngine
    """

    def __init__(self, config: Optional[PlotConfig] = None) -> None:
        """
        Initialize RadialPlotter

        Args:
            config: Plot styling. If None, uses default settings.

        Example:
            >>> plotter = RadialPlotter()
            >>> plotter = RadialPlotter(PlotConfig.presentation())
        """
        self.config: PlotConfig = config or PlotConfig()

    def wedge_patch(self, geometry: SliceGeometry, **kwargs) -> patches.PathPatch:
        """Closed wedge outline as a matplotlib patch"""
        vertices = geometry.path.polygon(self.config.arc_resolution)
        codes = ([MplPath.MOVETO]
                 + [MplPath.LINETO] * (len(vertices) - 2)
                 + [MplPath.CLOSEPOLY])
        return patches.PathPatch(MplPath(vertices, codes), **kwargs)

    def plot(
        self,
        slices: Sequence[SliceGeometry],
        output_file: Optional[str] = None,
        labels: Optional[Sequence[str]] = None,
        highlighted: Optional[int] = None,
        selected: Optional[int] = None,
        title: Optional[str] = None,
        view_box_size: Optional[float] = None,
        show: bool = False
    ) -> Figure:
        """
        Draw all slices and their dots

        Args:
            slices: Layout result from SliceLayoutEngine
            output_file: Path to save the figure (format from the extension)
            labels: One label per slice, drawn at the mid-angle
            highlighted: Index of the slice to fill with the highlight color
            selected: Index of the slice to outline as selected
            title: Figure title
            view_box_size: Coordinate system edge (default: layout config)
            show: Whether to display the plot

        Returns:
            matplotlib Figure object
        """
        size = view_box_size or self.config.layout.view_box_size
        if labels is not None and len(labels) != len(slices):
            raise ValueError(f"Got {len(labels)} labels for {len(slices)} slices")

        fig, ax = plt.subplots(figsize=self.config.figure_size)

        for geometry in slices:
            is_selected = geometry.index == selected
            ax.add_patch(self.wedge_patch(
                geometry,
                facecolor=(self.config.highlight_color if geometry.index == highlighted
                           else self.config.slice_color),
                edgecolor=(self.config.selected_edge_color if is_selected
                           else self.config.edge_color),
                linewidth=self.config.edge_linewidth * (2 if is_selected else 1),
                zorder=2 if is_selected else 1
            ))

            for dot in geometry.event_dots:
                ax.add_patch(patches.Circle(
                    (dot.cx, dot.cy), dot.radius, facecolor=dot.fill, edgecolor='none', zorder=3
                ))

            if labels is not None and self.config.show_labels:
                label_x, label_y = polar_to_cartesian(
                    geometry.path.center,
                    geometry.path.radius * self.config.label_radius_fraction,
                    geometry.mid_angle
                )
                ax.text(label_x, label_y, labels[geometry.index],
                        ha='center', va='center',
                        fontsize=self.config.label_fontsize, zorder=4)

        ax.set_xlim(0, size)
        ax.set_ylim(size, 0)
        ax.set_aspect('equal')
        ax.axis('off')

        if title:
            ax.set_title(title, fontsize=self.config.title_fontsize)

        if output_file:
            Path(output_file).parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(output_file, dpi=self.config.dpi, bbox_inches='tight')
            logger.info(f"Saved plot: {output_file}")

        if show:
            plt.show()

        return fig
