#!/usr/bin/env python3
"""Trace freehand strokes from the command line.

Reads the points of a stroke from a JSON file and writes the outline,
SVG path data or a JSON summary to stdout.

The input file holds either a list of points or a saved mark object::

    [[0, 0, 0.5], [10, 2, 0.6], [20, 5]]

    {"type": "pen", "points": [{"x": 0, "y": 0, "pressure": 0.5}, ...]}

Example:
    SVG path data with default options::

        $ freehand stroke.json

    Outline points for a thick pen stroke with clipping::

        $ freehand stroke.json --size 16 --thinning 0.75 --clip --format outline

    Options from a settings file, input from stdin::

        $ cat stroke.json | freehand - --options settings.json --format info
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional, Sequence, Tuple

from . import config
from .api.services import StrokeService
from .domain.options import EASINGS, StrokeOptions
from .render.clipping import ClipUnavailableError

logger = logging.getLogger(__name__)

FORMATS = ('path', 'outline', 'info')


def _read_input(source: str) -> Tuple[List[Any], Optional[str]]:
    """Load points and the optional device type from a JSON file or stdin.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the content is not valid stroke JSON.
    """
    if source == '-':
        data = json.load(sys.stdin)
    else:
        with open(source, encoding='utf-8') as f:
            data = json.load(f)

    if isinstance(data, list):
        return data, None
    if isinstance(data, dict) and isinstance(data.get('points'), list):
        return data['points'], data.get('type')
    raise ValueError("Input must be a list of points or an object with a 'points' list")


def build_options(args: argparse.Namespace) -> StrokeOptions:
    """Combine preset, options file and command-line flags, in that order."""
    options = StrokeOptions()
    if args.preset == 'app':
        options = StrokeOptions.from_dict(config.APP_DEFAULTS)
    if args.options:
        options = config.load_options(args.options, base=options)

    overrides = {
        'size': args.size,
        'thinning': args.thinning,
        'smoothing': args.smoothing,
        'streamline': args.streamline,
        'easing': args.easing,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if args.no_thinning:
        overrides['thinning'] = None
    if args.no_simulate_pressure:
        overrides['simulate_pressure'] = False
    if args.clip:
        overrides['clip'] = True
    return options.patch(**overrides)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Trace the outline of a freehand stroke')
    parser.add_argument('input', help="JSON file with stroke points, or '-' for stdin")
    parser.add_argument('--format', choices=FORMATS, default='path', help='Output format')
    parser.add_argument('--preset', choices=('default', 'app'), default='default',
                        help='Starting option set')
    parser.add_argument('--options', help='JSON file with stroke options')
    parser.add_argument('--size', type=float, help='Base stroke diameter')
    parser.add_argument('--thinning', type=float, help='Effect of pressure on width (-1..1)')
    parser.add_argument('--no-thinning', action='store_true', help='Constant stroke width')
    parser.add_argument('--smoothing', type=float, help='Edge softening')
    parser.add_argument('--streamline', type=float, help='Position smoothing (0..1)')
    parser.add_argument('--easing', choices=sorted(EASINGS), help='Pressure easing')
    parser.add_argument('--no-simulate-pressure', action='store_true',
                        help='Use reported pressure instead of velocity')
    parser.add_argument('--clip', action='store_true', help='Remove self-overlap')
    parser.add_argument('--device-type', help="Capture device ('pen', 'mouse', 'touch')")
    parser.add_argument('--precision', type=int, default=config.PATH_PRECISION,
                        help='Decimal places in path data')
    parser.add_argument('--log-level', default='WARNING', help='Log level')
    parser.add_argument('--log-file', help='Optional log file')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse command-line arguments and write the traced stroke.

    Returns:
        Process exit status: 0 on success, 1 on input or clipping errors.
    """
    args = build_parser().parse_args(argv)
    config.configure_logging(args.log_level, args.log_file)

    try:
        points, device_type = _read_input(args.input)
        options = build_options(args)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    device_type = args.device_type or device_type
    service = StrokeService(options, precision=args.precision)
    logger.info("Tracing %d point(s) from %s (device=%s)", len(points), args.input, device_type)

    if args.format == 'outline':
        outline = service.get_outline(points, device_type)
        print(json.dumps([[x, y] for x, y in outline]))
    elif args.format == 'info':
        print(json.dumps(service.describe(points, device_type), indent=2))
    else:
        try:
            print(service.get_path(points, device_type))
        except ClipUnavailableError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
