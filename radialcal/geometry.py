"""
Geometry helpers

Polar conversion and the wedge path shared by the layout engine,
the SVG writer and the matplotlib renderer.
Angles are in degrees from the positive x-axis; y grows downward.
"""

from __future__ import annotations
from dataclasses import dataclass
from math import cos, sin, radians
import numpy as np

from .types import Point


def polar_to_cartesian(center: Point, radius: float, angle_deg: float) -> Point:
    """
    Convert a polar position around `center` to screen coordinates

    Args:
        center: (x, y) of the circle center
        radius: Distance from the center
        angle_deg: Angle in degrees, clockwise on screen

    Returns:
        (x, y) tuple
    """
    rad = radians(angle_deg)
    return (center[0] + radius * cos(rad), center[1] + radius * sin(rad))


def format_number(value: float) -> str:
    """Shortest round-trip text for a coordinate ('100' not '100.0')"""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True)
class WedgePath:
    """
    Closed pie wedge: center -> start point -> arc -> end point -> close

    Attributes:
        center: Circle center
        start: Point on the circle at the start angle
        end: Point on the circle at the end angle
        radius: Arc radius
        start_angle: Start angle (degrees)
        end_angle: End angle (degrees)
        large_arc: SVG large-arc flag (1 when the wedge spans more than 180 degrees)
        sweep: SVG sweep flag (1 = clockwise on screen)
    """
    center: Point
    start: Point
    end: Point
    radius: float
    start_angle: float
    end_angle: float
    large_arc: int = 0
    sweep: int = 1

    def to_svg(self) -> str:
        """SVG path data, e.g. 'M 100 100 L 100 5 A 95 95 0 0 1 147.5 17.7 Z'"""
        f = format_number
        cx, cy = self.center
        x1, y1 = self.start
        x2, y2 = self.end
        return ' '.join([
            f"M {f(cx)} {f(cy)}",
            f"L {f(x1)} {f(y1)}",
            f"A {f(self.radius)} {f(self.radius)} 0 {self.large_arc} {self.sweep} {f(x2)} {f(y2)}",
            'Z',
        ])

    def arc_points(self, resolution: int = 60) -> np.ndarray:
        """
        Sample the arc from start to end angle

        Args:
            resolution: Number of sampled points (>= 2)

        Returns:
            Array of shape (resolution, 2)
        """
        angles = np.radians(np.linspace(self.start_angle, self.end_angle, max(resolution, 2)))
        xs = self.center[0] + self.radius * np.cos(angles)
        ys = self.center[1] + self.radius * np.sin(angles)
        return np.column_stack([xs, ys])

    def polygon(self, resolution: int = 60) -> np.ndarray:
        """Closed outline (center, arc samples, center) as an (n, 2) array"""
        center = np.array([self.center])
        return np.vstack([center, self.arc_points(resolution), center])
