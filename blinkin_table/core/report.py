"""Report builder: text and JSON output for blinkin-table results."""

import json
from typing import Any

from blinkin_table.core.types import Report


def _cell(value: Any) -> str:
    if isinstance(value, float):
        return f'{value:g}'
    return str(value)


def format_text(report: Report) -> str:
    """Format report as aligned columns followed by summary lines."""
    lines = []
    if report.rows:
        columns = list(report.rows[0])
        cells = [[_cell(row.get(c, '')) for c in columns] for row in report.rows]
        widths = [max(len(c), *(len(r[i]) for r in cells)) for i, c in enumerate(columns)]
        lines.append('  '.join(c.ljust(w) for c, w in zip(columns, widths)).rstrip())
        lines.append('  '.join('─' * w for w in widths))
        for r in cells:
            lines.append('  '.join(v.ljust(w) for v, w in zip(r, widths)).rstrip())
        if report.summary:
            lines.append('')

    for key, value in report.summary.items():
        lines.append(f'{key}: {_cell(value)}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {'command': report.command}
    if report.rows:
        obj['rows'] = report.rows
    if report.summary:
        obj['summary'] = report.summary
    return json.dumps(obj, indent=2)
