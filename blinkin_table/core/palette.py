"""Approximate RGB for the Blinkin solid colours, and nearest-colour lookup.

The driver's manual names the solid colours but does not publish RGB values;
these are the usual web colours of the same name, close to what a strip
shows. Used to pick the solid pattern closest to an arbitrary colour and to
draw swatches.
"""

import string

import numpy as np

from blinkin_table.core.patterns import Pattern

SOLID_HEX: dict[Pattern, str] = {
    Pattern.HOT_PINK: '#ff69b4',
    Pattern.DARK_RED: '#8b0000',
    Pattern.RED: '#ff0000',
    Pattern.RED_ORANGE: '#ff4500',
    Pattern.ORANGE: '#ffa500',
    Pattern.GOLD: '#ffd700',
    Pattern.YELLOW: '#ffff00',
    Pattern.LAWN_GREEN: '#7cfc00',
    Pattern.LIME: '#00ff00',
    Pattern.DARK_GREEN: '#006400',
    Pattern.GREEN: '#008000',
    Pattern.BLUE_GREEN: '#0d98ba',
    Pattern.AQUA: '#00ffff',
    Pattern.SKY_BLUE: '#87ceeb',
    Pattern.DARK_BLUE: '#00008b',
    Pattern.BLUE: '#0000ff',
    Pattern.BLUE_VIOLET: '#8a2be2',
    Pattern.VIOLET: '#ee82ee',
    Pattern.WHITE: '#ffffff',
    Pattern.GRAY: '#808080',
    Pattern.DARK_GRAY: '#404040',
    Pattern.BLACK: '#000000',
}


def hex_to_rgb(hex_str: str) -> tuple[int, int, int]:
    """Convert '#rrggbb' or '#rgb' (hash optional) to an (r, g, b) tuple."""
    h = hex_str.strip()
    if h.startswith('#'):
        h = h[1:]
    if not all(c in string.hexdigits for c in h):
        raise ValueError(f'Not a hex colour: {hex_str!r}')
    if len(h) == 3:
        h = ''.join(c * 2 for c in h)
    if len(h) != 6:
        raise ValueError(f'Not a hex colour: {hex_str!r}')
    return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))


_SOLIDS = list(SOLID_HEX)
_SOLID_RGB = np.array([hex_to_rgb(SOLID_HEX[p]) for p in _SOLIDS], dtype=np.int32)


def nearest_pattern(rgb: tuple[int, int, int], threshold: float | None = None) -> tuple[Pattern | None, float]:
    """Find the solid pattern nearest to rgb.

    Returns (pattern, distance), or (None, distance) when the nearest one is
    further away than threshold.
    """
    target = np.array([int(c) for c in rgb], dtype=np.int32)
    distances = np.sqrt(((_SOLID_RGB - target) ** 2).sum(axis=1))
    idx = int(np.argmin(distances))
    dist = float(distances[idx])
    if threshold is not None and dist > threshold:
        return None, dist
    return _SOLIDS[idx], dist
