"""
radialcal Configuration

Layout constants, dot placement and plot styling.
The fractional constants are fixed visual proportions of the radial views.
"""
from dataclasses import dataclass, field
from typing import Tuple

from .types import OutOfRangePolicy


@dataclass(frozen=True)
class DotPlacementConfig:
    """
    Radial placement of event dots inside a slice

    All factors are fractions of the slice radius.
    """

    start_radius_factor: float = 0.45
    """Distance of the first dot from the center"""

    radius_increment_factor: float = 0.15
    """Distance added for every following dot"""

    max_dots_per_slice: int = 3
    """Upper bound on dots drawn per slice"""


@dataclass
class LayoutConfig:
    """
    Geometry constants for the slice layout engine
    """

    # ============================================================
    # COORDINATE SYSTEM
    # ============================================================
    view_box_size: float = 200.0
    """Edge length of the square coordinate system"""

    angle_offset: float = -90.0
    """Rotation of slice 0 from the positive x-axis (degrees, -90 = top)"""

    # ============================================================
    # FRACTIONS
    # ============================================================
    slice_radius_fraction: float = 0.95
    """Slice radius as a fraction of half the view box (5% margin)"""

    dot_clip_fraction: float = 0.88
    """Dots at or beyond this fraction of the slice radius are dropped"""

    dot_radius_fraction: float = 0.018
    """Visual dot radius as a fraction of the view box size"""

    # ============================================================
    # PLACEMENT
    # ============================================================
    dot_placement: DotPlacementConfig = field(default_factory=DotPlacementConfig)
    """Default dot placement when the caller passes none"""

    out_of_range: OutOfRangePolicy = 'drop'
    """What to do with events whose slice index is outside [0, N)"""


@dataclass
class PlotConfig:
    """
    Plot styling for RadialPlotter
    """

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    """Layout configuration"""

    # ============================================================
    # RENDERING
    # ============================================================
    arc_resolution: int = 60
    """Number of points sampled along each wedge arc"""

    slice_color: str = '#f4f4f6'
    """Fill of regular slices"""

    highlight_color: str = '#ffe8a3'
    """Fill of the slice at the current period"""

    selected_edge_color: str = '#d9480f'
    """Outline of the selected slice"""

    edge_color: str = '#9aa0a6'
    """Outline of regular slices"""

    edge_linewidth: float = 1.0
    """Slice outline width (pt)"""

    show_labels: bool = True
    """Draw slice labels at the mid-angle"""

    label_radius_fraction: float = 0.25
    """Label distance from the center as a fraction of the slice radius"""

    label_fontsize: int = 9
    """Font size for slice labels"""

    # ============================================================
    # FIGURE SETTINGS
    # ============================================================
    figure_size: Tuple[float, float] = (6.0, 6.0)
    """Figure size in inches"""

    dpi: int = 150
    """DPI for saved figures"""

    title_fontsize: int = 12
    """Font size for the title"""

    # ============================================================
    # PRESET CONFIGURATIONS
    # ============================================================

    @classmethod
    def presentation(cls) -> 'PlotConfig':
        """
        Larger figure and fonts for screen viewing

        Example:
            >>> config = PlotConfig.presentation()
            >>> plotter = RadialPlotter(config)
        """
        config = cls()
        config.figure_size = (9.0, 9.0)
        config.label_fontsize = 13
        config.title_fontsize = 16
        config.edge_linewidth = 1.8
        return config

    @classmethod
    def compact(cls) -> 'PlotConfig':
        """
        Small thumbnail without labels
        """
        config = cls()
        config.figure_size = (3.0, 3.0)
        config.dpi = 100
        config.show_labels = False
        config.arc_resolution = 24
        return config
