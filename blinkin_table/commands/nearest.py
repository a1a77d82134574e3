"""Find the solid colour pattern closest to an RGB colour.

Takes a hex colour (#rrggbb or #rgb) and returns the solid pattern whose
approximate RGB is nearest by Euclidean distance. With --threshold, a match
further away than the threshold is reported as none.

Only the 22 solid colours take part; animated patterns have no single RGB.

Example:
    blinkin-table nearest '#fe0102'
    blinkin-table nearest 80c0ff --threshold 40
"""

from blinkin_table.core.palette import SOLID_HEX, hex_to_rgb, nearest_pattern
from blinkin_table.core.types import Command, Report

command = Command(
    name='nearest',
    help='Solid colour pattern nearest to a hex colour.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('colour', help='Hex colour, e.g. #ff8000')
    parser.add_argument(
        '-t',
        '--threshold',
        type=float,
        default=None,
        metavar='T',
        help='Maximum RGB distance for a match',
    )


@command.run
def run(args, report: Report) -> None:
    rgb = hex_to_rgb(args.colour)
    pattern, dist = nearest_pattern(rgb, threshold=args.threshold)
    report.set('colour', args.colour)
    report.set('name', pattern.label if pattern else None)
    report.set('value', pattern.as_percentage() if pattern else None)
    report.set('hex', SOLID_HEX[pattern] if pattern else None)
    report.set('distance', round(dist, 1))
