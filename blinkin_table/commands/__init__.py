"""Auto-discovery of command modules.

Every .py file in this package that defines a `command` object is
auto-registered by blinkin_table.registry.discover().

The explicit imports below keep these modules in zipped or frozen installs,
where pkgutil.iter_modules cannot list the package.
"""

# keep this list in sync with command modules
import blinkin_table.commands.duty as _duty  # noqa: F401
import blinkin_table.commands.list as _list  # noqa: F401
import blinkin_table.commands.name as _name  # noqa: F401
import blinkin_table.commands.nearest as _nearest  # noqa: F401
import blinkin_table.commands.swatch as _swatch  # noqa: F401
import blinkin_table.commands.value as _value  # noqa: F401
