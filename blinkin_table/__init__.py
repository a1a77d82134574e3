"""REV Blinkin LED driver colour table.

    from blinkin_table import Pattern, get_table

    get_table().value_of('red')        # 0.61
    Pattern.RED.as_duty(255)           # 205
"""

from blinkin_table.core.patterns import Category, Pattern
from blinkin_table.core.table import ColorEntry, ColorTable, get_table
from blinkin_table.core.types import NotFound

__all__ = ['Category', 'ColorEntry', 'ColorTable', 'NotFound', 'Pattern', 'get_table']
