"""blinkin_table.core — Foundation layer.

Contains the Pattern enumeration, the colour table, the solid-colour palette,
settings and the report builder.
This module has NO dependencies on blinkin_table.commands or blinkin_table.registry.
Only stdlib and numpy are allowed here.
"""
