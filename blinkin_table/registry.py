"""Command auto-discovery and registration.

Scans blinkin_table/commands/ for modules that define a `command` object
of type Command. Collects them into a dict keyed by name.

Falls back to the explicit module list when pkgutil.iter_modules finds
nothing (zipped or frozen installs).
"""

import importlib
import pkgutil
import threading

from blinkin_table.core.types import Command, NotFound

_registry: dict[str, Command] = {}
_lock = threading.Lock()

# Known command module names, fallback for frozen installs
_COMMAND_MODULES = [
    'duty',
    'list',
    'name',
    'nearest',
    'swatch',
    'value',
]


def discover() -> dict[str, Command]:
    """Import all command modules and return the registry."""
    if _registry:
        return _registry

    with _lock:
        if _registry:
            return _registry

        import blinkin_table.commands as pkg

        found_modules = [
            modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
        ]
        if not found_modules:
            found_modules = _COMMAND_MODULES

        found: dict[str, Command] = {}
        for modname in found_modules:
            module = importlib.import_module(f'blinkin_table.commands.{modname}')
            cmd = getattr(module, 'command', None)
            if isinstance(cmd, Command):
                found[cmd.name] = cmd
        # publish complete, readers outside the lock check emptiness only
        _registry.update(found)

    return _registry


def get(name: str) -> Command:
    """Get a command by name."""
    reg = discover()
    if name not in reg:
        raise NotFound(f'Unknown command: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_commands() -> dict[str, Command]:
    """Return all registered commands."""
    return discover()
