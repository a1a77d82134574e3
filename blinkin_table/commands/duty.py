"""Scale a pattern's duty to a PWM channel's range.

Maps the pattern onto 0..max_duty, where max_duty is the channel's maximum
duty count (255 for an 8-bit channel). Integer maxima truncate the result.
The default maximum comes from BLINKIN_MAX_DUTY, else 255.

Example:
    blinkin-table duty color1-larson
    blinkin-table duty red --max-duty 65535
"""

from blinkin_table.core.env import Settings
from blinkin_table.core.table import get_table
from blinkin_table.core.types import Command, Report

command = Command(
    name='duty',
    help='Duty count for a pattern on a PWM channel with the given maximum.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('label', help='Pattern label, e.g. red')
    parser.add_argument(
        '-m',
        '--max-duty',
        type=int,
        default=None,
        metavar='N',
        help='Maximum duty count of the channel (default: $BLINKIN_MAX_DUTY or 255)',
    )


@command.run
def run(args, report: Report) -> None:
    max_duty = args.max_duty if args.max_duty is not None else Settings.from_env().max_duty
    pattern = get_table().pattern_of(args.label)
    report.set('name', pattern.label)
    report.set('max_duty', max_duty)
    report.set('duty', pattern.as_duty(max_duty))
