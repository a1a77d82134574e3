"""Look up the duty value for a pattern label.

The label must match exactly (kebab-case, as printed by `list`); there is
no case folding or partial matching. Unknown labels exit with status 1.

Prints the value on the -0.99..0.99 scale, the 0..1 scale, the table code
and the pulse width in microseconds the driver decodes as the pattern.

Example:
    blinkin-table value red
    blinkin-table value fire-medium
"""

from blinkin_table.core.table import get_table
from blinkin_table.core.types import Command, Report

command = Command(
    name='value',
    help='Duty value, code and pulse width for a pattern label.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('label', help='Pattern label, e.g. red or fire-medium')


@command.run
def run(args, report: Report) -> None:
    pattern = get_table().pattern_of(args.label)
    report.set('name', pattern.label)
    report.set('value', pattern.as_percentage())
    report.set('abs_value', pattern.as_abs_percentage())
    report.set('code', pattern.code)
    report.set('pulse_us', pattern.pulse_width_us())
    report.set('description', pattern.title)
