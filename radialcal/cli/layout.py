"""Layout subcommand - slice and dot tables"""

from __future__ import annotations
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction

from ..config import DotPlacementConfig
from ..io import LayoutWriter, SVGWriter
from ..layout import SliceLayoutEngine
from ..types import OUT_OF_RANGE_POLICIES
from ..views import VIEWS, get_view
from . import configure_logging, load_view_events

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add layout subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for layout subcommand
    """
    parser = subparsers.add_parser(
        'layout',
        help='Compute slice paths and dot positions for a view'
    )

    parser.add_argument('--view', choices=list(VIEWS), default='12hour',
                        help='View to lay out (default: 12hour)')
    parser.add_argument('--events', metavar='TSV',
                        help='Events table (default: bundled sample events)')
    parser.add_argument('--prefix', required=True,
                        help='Output file prefix')
    parser.add_argument('--output-dir', required=True,
                        help='Output directory')

    # Placement overrides
    defaults = DotPlacementConfig()
    parser.add_argument('--max-dots', type=int, default=defaults.max_dots_per_slice,
                        help=f'Maximum dots per slice (default: {defaults.max_dots_per_slice})')
    parser.add_argument('--start-factor', type=float, default=defaults.start_radius_factor,
                        help=f'Radius factor of the first dot (default: {defaults.start_radius_factor})')
    parser.add_argument('--increment-factor', type=float, default=defaults.radius_increment_factor,
                        help=f'Radius factor step per dot (default: {defaults.radius_increment_factor})')
    parser.add_argument('--out-of-range', choices=list(OUT_OF_RANGE_POLICIES), default='drop',
                        help='Handling of events outside the slice range (default: drop)')

    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute layout subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    configure_logging(getattr(args, "debug", False))

    view = get_view(args.view)
    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    slices_file = output_dir / f"{args.prefix}.slices.tsv"
    dots_file = output_dir / f"{args.prefix}.dots.tsv"
    svg_file = output_dir / f"{args.prefix}.svg"

    logger.info(f"View: {view.name} ({view.number_of_slices} slices)")

    events = load_view_events(args.events, view.name)
    placement = DotPlacementConfig(
        start_radius_factor=args.start_factor,
        radius_increment_factor=args.increment_factor,
        max_dots_per_slice=args.max_dots
    )

    engine = SliceLayoutEngine()
    slices = engine.compute(
        events,
        view.number_of_slices,
        dot_placement=placement,
        out_of_range=args.out_of_range
    )

    LayoutWriter().write(slices, slices_file, dots_file)
    SVGWriter(engine.config.view_box_size).write(slices, svg_file, title=view.title)

    logger.info(f"✓ Layout saved: {slices_file.name}, {dots_file.name}, {svg_file.name}")
