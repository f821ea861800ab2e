"""Plot subcommand - visualization"""

from __future__ import annotations
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction
import matplotlib.pyplot as plt

from ..config import PlotConfig
from ..layout import SliceLayoutEngine
from ..views import VIEWS, PeriodNavigator, get_view
from ..visualizer import RadialPlotter
from . import configure_logging, load_view_events

logger = logging.getLogger(__name__)

PRESETS = {
    'default': PlotConfig,
    'presentation': PlotConfig.presentation,
    'compact': PlotConfig.compact,
}


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add plot subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for plot subcommand
    """
    parser = subparsers.add_parser(
        'plot',
        help='Render a radial calendar view'
    )

    parser.add_argument('--view', choices=list(VIEWS), default='12hour',
                        help='View to render (default: 12hour)')
    parser.add_argument('--events', metavar='TSV',
                        help='Events table (default: bundled sample events)')
    parser.add_argument('--prefix', required=True,
                        help='Output file prefix')
    parser.add_argument('--output-dir', required=True,
                        help='Output directory')

    # Navigation state
    parser.add_argument('--period', type=int, default=0,
                        help='Periods to advance (negative to go back) from now (default: 0)')
    parser.add_argument('--select', type=int, metavar='INDEX',
                        help='Slice to select; its full event list is logged')

    # Output
    parser.add_argument('--format', choices=['png', 'svg', 'pdf'], default='png',
                        help='Image format (default: png)')
    parser.add_argument('--preset', choices=list(PRESETS), default='default',
                        help='Plot style preset (default: default)')

    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute plot subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    configure_logging(getattr(args, "debug", False))

    view = get_view(args.view)
    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    plot_file = output_dir / f"{args.prefix}.{args.format}"

    config = PRESETS[args.preset]()
    navigator = PeriodNavigator(view)
    navigator.advance(args.period)
    if args.select is not None:
        navigator.select(args.select)

    logger.info(f"View: {view.name}, period: {navigator.period_label}")

    events = load_view_events(args.events, view.name)
    slices = view.compute(events, SliceLayoutEngine(config.layout))

    for event in navigator.selected_events(slices):
        logger.info(f"  [{view.label(navigator.selected)}] {event.name}"
                    f"{' @ ' + event.timestamp if event.timestamp else ''}")

    plotter = RadialPlotter(config)
    fig = plotter.plot(
        slices,
        output_file=str(plot_file),
        labels=view.labels,
        highlighted=navigator.highlighted_index,
        selected=navigator.selected,
        title=f"{view.title} - {navigator.period_label}"
    )

    plt.close(fig)

    logger.info(f"✓ Plot saved: {plot_file}")
