"""List every pattern in the colour table, in the vendor's order.

Prints label, duty value, table code, category and the vendor description
for all 100 output modes. --category restricts the list to one section of
the table: fixed-palette, color-1, color-2, color-1-and-2 or solid.

Example:
    blinkin-table list
    blinkin-table list --category solid
    blinkin-table --json list
"""

from blinkin_table.core.patterns import Category
from blinkin_table.core.table import get_table
from blinkin_table.core.types import Command, Report

command = Command(
    name='list',
    help='List every pattern with its duty value, optionally one category only.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument(
        '-c',
        '--category',
        choices=[c.value for c in Category],
        help='Only list patterns in this section of the table',
    )


@command.run
def run(args, report: Report) -> None:
    table = get_table()
    if args.category:
        entries = table.entries_in(Category(args.category))
    else:
        entries = table.all_entries()

    for entry in entries:
        report.add(
            {
                'name': entry.name,
                'value': entry.value,
                'code': entry.pattern.code,
                'category': entry.pattern.category.value,
                'description': entry.pattern.title,
            }
        )
    report.set('count', len(entries))
