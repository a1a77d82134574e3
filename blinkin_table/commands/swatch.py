"""Render the solid colours to a PNG swatch chart.

Draws one cell per solid pattern, in table order, filled with the pattern's
approximate RGB and captioned with its label and duty value. Cells are laid
out in rows of six; the cell size comes from BLINKIN_SWATCH_CELL (96 px).

Example:
    blinkin-table swatch ./solid-colours.png
"""

import os

from PIL import Image, ImageDraw

from blinkin_table.core.env import Settings
from blinkin_table.core.palette import SOLID_HEX, hex_to_rgb
from blinkin_table.core.patterns import Category
from blinkin_table.core.table import get_table
from blinkin_table.core.types import Command, Report

command = Command(
    name='swatch',
    help='Render the solid colours with their labels to a PNG.',
)

COLUMNS = 6
CAPTION_HEIGHT = 28


def render(cell: int) -> Image.Image:
    """Draw the swatch chart and return it."""
    entries = get_table().entries_in(Category.SOLID)
    rows = -(-len(entries) // COLUMNS)
    image = Image.new('RGB', (COLUMNS * cell, rows * (cell + CAPTION_HEIGHT)), 'white')
    draw = ImageDraw.Draw(image)
    for i, entry in enumerate(entries):
        x = (i % COLUMNS) * cell
        y = (i // COLUMNS) * (cell + CAPTION_HEIGHT)
        draw.rectangle((x, y, x + cell - 1, y + cell - 1), fill=hex_to_rgb(SOLID_HEX[entry.pattern]), outline='gray')
        draw.text((x + 4, y + cell + 2), entry.name, fill='black')
        draw.text((x + 4, y + cell + 14), f'{entry.value:g}', fill='dimgray')
    return image


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('output', help='Path of the PNG to write')


@command.run
def run(args, report: Report) -> None:
    ext = os.path.splitext(args.output)[1].lower()
    if ext not in Image.registered_extensions():
        raise ValueError(f'Unknown image extension: {args.output!r}')
    image = render(Settings.from_env().swatch_cell)
    parent = os.path.dirname(args.output)
    if parent:
        os.makedirs(parent, exist_ok=True)
    image.save(args.output)
    report.set('file', args.output)
    report.set('width', image.width)
    report.set('height', image.height)
    report.set('count', len(get_table().entries_in(Category.SOLID)))
