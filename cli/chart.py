#!/usr/bin/env python3

import html

from tools.chart import get_arc_paths, get_pie_slices
from logger import get_logger

logger = get_logger()


def cmd_slices(args, services):
    """List the chart slices."""
    slices = get_pie_slices(services.budget.categories)
    if not slices:
        logger.info("Nothing allocated yet.")
        return

    for pie_slice in slices:
        logger.info(
            f"{pie_slice.color}  {pie_slice.name:<30} {pie_slice.percentage:>7.2f}%"
        )


def cmd_paths(args, services):
    """Print SVG paths for the chart slices."""
    paths = get_arc_paths(
        services.budget.categories,
        center_x=args.center,
        center_y=args.center,
        radius=args.radius,
    )
    if not paths:
        logger.info("Nothing allocated yet.")
        return

    for arc in paths:
        title = html.escape(arc.name)
        logger.info(
            f'<path d="{arc.path}" fill="{arc.color}"><title>{title}</title></path>'
        )


def setup_parser(subparsers):
    """Setup chart subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "chart",
        help="Allocation chart data",
        description="Show the allocation pie chart as slices or SVG paths",
    )

    chart_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available chart commands",
        dest="subcommand",
        required=True,
    )

    slices_parser = chart_subparsers.add_parser("slices", help="List chart slices")
    slices_parser.set_defaults(func=cmd_slices)

    paths_parser = chart_subparsers.add_parser("paths", help="Print SVG slice paths")
    paths_parser.add_argument("--center", type=float, default=100.0)
    paths_parser.add_argument("--radius", type=float, default=90.0)
    paths_parser.set_defaults(func=cmd_paths)
