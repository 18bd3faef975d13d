"""Pie chart data derived from the category list."""

import math
from dataclasses import dataclass
from typing import List

from models.category import Category

PALETTE = ["#4f46e5", "#0ea5e9", "#22c55e", "#f97316", "#e11d48", "#a855f7"]

CHART_CENTER = 100.0
CHART_RADIUS = 90.0
START_ANGLE = -90.0  # 12 o'clock


@dataclass(frozen=True)
class PieSlice:
    """One visible slice of the allocation chart."""

    name: str
    percentage: float
    color: str


@dataclass(frozen=True)
class ArcPath:
    """SVG path for one slice."""

    name: str
    color: str
    path: str


def get_pie_slices(categories: List[Category]) -> List[PieSlice]:
    """Get slices for every category with a positive percentage.

    Colors cycle through PALETTE in the order of the visible slices.

    Args:
        categories: Categories in display order.

    Returns:
        List of PieSlice; empty when nothing is allocated.
    """
    visible = [
        (index, category)
        for index, category in enumerate(categories)
        if category.percentage > 0
    ]
    return [
        PieSlice(
            name=category.name if category.name.strip() else f"Category {index + 1}",
            percentage=category.percentage,
            color=PALETTE[position % len(PALETTE)],
        )
        for position, (index, category) in enumerate(visible)
    ]


def get_arc_paths(
    categories: List[Category],
    center_x: float = CHART_CENTER,
    center_y: float = CHART_CENTER,
    radius: float = CHART_RADIUS,
) -> List[ArcPath]:
    """Get SVG paths drawing each slice as a wedge of a circle.

    Slices fill the whole circle in proportion to their share of the total
    percentage, starting at 12 o'clock and running clockwise. A slice that
    covers the whole circle is drawn as two half-circle arcs because a
    single arc can't start and end at the same point.

    Args:
        categories: Categories in display order.
        center_x: Horizontal center of the circle.
        center_y: Vertical center of the circle.
        radius: Circle radius.

    Returns:
        List of ArcPath, one per visible slice; empty when nothing is allocated.

    Example:
        Two categories at 50% each give two half-circle wedges:
        [ArcPath(name="Rent", color="#4f46e5",
                 path="M 100.00 100.00 L 100.00 10.00 A 90.00 90.00 0 0 1 100.00 190.00 Z"),
         ArcPath(name="Savings", color="#0ea5e9", path="...")]
    """
    slices = get_pie_slices(categories)
    total = sum(s.percentage for s in slices)
    if total <= 0:
        return []

    paths = []
    start = START_ANGLE
    for pie_slice in slices:
        sweep = pie_slice.percentage / total * 360
        if sweep >= 360:
            path = _full_circle_path(center_x, center_y, radius)
        else:
            path = _wedge_path(center_x, center_y, radius, start, sweep)
        paths.append(ArcPath(name=pie_slice.name, color=pie_slice.color, path=path))
        start += sweep
    return paths


def _point(center_x: float, center_y: float, radius: float, angle: float):
    radians = math.radians(angle)
    return (
        center_x + radius * math.cos(radians),
        center_y + radius * math.sin(radians),
    )


def _wedge_path(center_x, center_y, radius, start, sweep) -> str:
    x1, y1 = _point(center_x, center_y, radius, start)
    x2, y2 = _point(center_x, center_y, radius, start + sweep)
    large_arc = 1 if sweep > 180 else 0
    return (
        f"M {center_x:.2f} {center_y:.2f} "
        f"L {x1:.2f} {y1:.2f} "
        f"A {radius:.2f} {radius:.2f} 0 {large_arc} 1 {x2:.2f} {y2:.2f} Z"
    )


def _full_circle_path(center_x, center_y, radius) -> str:
    top = center_y - radius
    bottom = center_y + radius
    return (
        f"M {center_x:.2f} {top:.2f} "
        f"A {radius:.2f} {radius:.2f} 0 1 1 {center_x:.2f} {bottom:.2f} "
        f"A {radius:.2f} {radius:.2f} 0 1 1 {center_x:.2f} {top:.2f} Z"
    )
