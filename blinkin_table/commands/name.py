"""Reverse lookup: find the pattern for a duty value.

The value must be one the table defines exactly (an odd hundredth between
-0.99 and 0.99). Anything else exits with status 1.

Example:
    blinkin-table name 0.61
    blinkin-table name -- -0.59
"""

from blinkin_table.core.table import get_table
from blinkin_table.core.types import Command, Report

command = Command(
    name='name',
    help='Pattern label for an exact duty value.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('value', type=float, help='Duty value, e.g. 0.61')


@command.run
def run(args, report: Report) -> None:
    table = get_table()
    name = table.name_of(args.value)
    report.set('name', name)
    report.set('value', args.value)
    report.set('description', table.pattern_of(name).title)
