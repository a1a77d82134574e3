"""The REV Blinkin (REV-11-1105) output modes as a closed enumeration.

Each member carries the integer code from the driver's colour table, a
kebab-case label, the vendor's description and its table section. The code
is the member's enum value, so ``Pattern(161)`` is ``Pattern.RED``.

The duty value the driver expects is ``(code - 100) / 100``: every odd code
from 1 to 199 maps to one of -0.99, -0.97, ... 0.97, 0.99. Codes are kept as
integers so the table stays exact and only the conversions produce floats.
"""

from enum import Enum
from numbers import Integral

from blinkin_table.core.types import NotFound

# Pulse width decoded by the driver, in microseconds, for a value of 0.0
PULSE_CENTRE_US = 1500
PULSE_SPAN_US = 500


class Category(Enum):
    """Sections of the vendor colour table."""

    FIXED_PALETTE = 'fixed-palette'
    COLOR_1 = 'color-1'
    COLOR_2 = 'color-2'
    COLOR_1_AND_2 = 'color-1-and-2'
    SOLID = 'solid'


class Pattern(Enum):
    # Fixed palette patterns
    RAINBOW = (1, 'rainbow', 'Rainbow, Rainbow Palette', Category.FIXED_PALETTE)
    RAINBOW_PARTY = (3, 'rainbow-party', 'Rainbow, Party Palette', Category.FIXED_PALETTE)
    RAINBOW_OCEAN = (5, 'rainbow-ocean', 'Rainbow, Ocean Palette', Category.FIXED_PALETTE)
    RAINBOW_LAVA = (7, 'rainbow-lava', 'Rainbow, Lava Palette', Category.FIXED_PALETTE)
    RAINBOW_FOREST = (9, 'rainbow-forest', 'Rainbow, Forest Palette', Category.FIXED_PALETTE)
    RAINBOW_GLITTER = (11, 'rainbow-glitter', 'Rainbow with Glitter', Category.FIXED_PALETTE)
    CONFETTI = (13, 'confetti', 'Confetti', Category.FIXED_PALETTE)
    RED_SHOT = (15, 'red-shot', 'Shot, Red', Category.FIXED_PALETTE)
    BLUE_SHOT = (17, 'blue-shot', 'Shot, Blue', Category.FIXED_PALETTE)
    WHITE_SHOT = (19, 'white-shot', 'Shot, White', Category.FIXED_PALETTE)
    SINELON_RAINBOW = (21, 'sinelon-rainbow', 'Sinelon, Rainbow Palette', Category.FIXED_PALETTE)
    SINELON_PARTY = (23, 'sinelon-party', 'Sinelon, Party Palette', Category.FIXED_PALETTE)
    SINELON_OCEAN = (25, 'sinelon-ocean', 'Sinelon, Ocean Palette', Category.FIXED_PALETTE)
    SINELON_LAVA = (27, 'sinelon-lava', 'Sinelon, Lava Palette', Category.FIXED_PALETTE)
    SINELON_FOREST = (29, 'sinelon-forest', 'Sinelon, Forest Palette', Category.FIXED_PALETTE)
    BPM_RAINBOW = (31, 'bpm-rainbow', 'Beats per Minute, Rainbow Palette', Category.FIXED_PALETTE)
    BPM_PARTY = (33, 'bpm-party', 'Beats per Minute, Party Palette', Category.FIXED_PALETTE)
    BPM_OCEAN = (35, 'bpm-ocean', 'Beats per Minute, Ocean Palette', Category.FIXED_PALETTE)
    BPM_LAVA = (37, 'bpm-lava', 'Beats per Minute, Lava Palette', Category.FIXED_PALETTE)
    BPM_FOREST = (39, 'bpm-forest', 'Beats per Minute, Forest Palette', Category.FIXED_PALETTE)
    FIRE_MEDIUM = (41, 'fire-medium', 'Fire, Medium', Category.FIXED_PALETTE)
    FIRE_LARGE = (43, 'fire-large', 'Fire, Large', Category.FIXED_PALETTE)
    TWINKLES_RAINBOW = (45, 'twinkles-rainbow', 'Twinkles, Rainbow Palette', Category.FIXED_PALETTE)
    TWINKLES_PARTY = (47, 'twinkles-party', 'Twinkles, Party Palette', Category.FIXED_PALETTE)
    TWINKLES_OCEAN = (49, 'twinkles-ocean', 'Twinkles, Ocean Palette', Category.FIXED_PALETTE)
    TWINKLES_LAVA = (51, 'twinkles-lava', 'Twinkles, Lava Palette', Category.FIXED_PALETTE)
    TWINKLES_FOREST = (53, 'twinkles-forest', 'Twinkles, Forest Palette', Category.FIXED_PALETTE)
    WAVES_RAINBOW = (55, 'waves-rainbow', 'Color Waves, Rainbow Palette', Category.FIXED_PALETTE)
    WAVES_PARTY = (57, 'waves-party', 'Color Waves, Party Palette', Category.FIXED_PALETTE)
    WAVES_OCEAN = (59, 'waves-ocean', 'Color Waves, Ocean Palette', Category.FIXED_PALETTE)
    WAVES_LAVA = (61, 'waves-lava', 'Color Waves, Lava Palette', Category.FIXED_PALETTE)
    WAVES_FOREST = (63, 'waves-forest', 'Color Waves, Forest Palette', Category.FIXED_PALETTE)
    LARSON_RED = (65, 'larson-red', 'Larson Scanner, Red', Category.FIXED_PALETTE)
    LARSON_GRAY = (67, 'larson-gray', 'Larson Scanner, Gray', Category.FIXED_PALETTE)
    CHASE_RED = (69, 'chase-red', 'Light Chase, Red', Category.FIXED_PALETTE)
    CHASE_BLUE = (71, 'chase-blue', 'Light Chase, Blue', Category.FIXED_PALETTE)
    CHASE_GRAY = (73, 'chase-gray', 'Light Chase, Gray', Category.FIXED_PALETTE)
    HEARTBEAT_RED = (75, 'heartbeat-red', 'Heartbeat, Red', Category.FIXED_PALETTE)
    HEARTBEAT_BLUE = (77, 'heartbeat-blue', 'Heartbeat, Blue', Category.FIXED_PALETTE)
    HEARTBEAT_WHITE = (79, 'heartbeat-white', 'Heartbeat, White', Category.FIXED_PALETTE)
    HEARTBEAT_GRAY = (81, 'heartbeat-gray', 'Heartbeat, Gray', Category.FIXED_PALETTE)
    BREATH_RED = (83, 'breath-red', 'Breath, Red', Category.FIXED_PALETTE)
    BREATH_BLUE = (85, 'breath-blue', 'Breath, Blue', Category.FIXED_PALETTE)
    BREATH_GRAY = (87, 'breath-gray', 'Breath, Gray', Category.FIXED_PALETTE)
    STROBE_RED = (89, 'strobe-red', 'Strobe, Red', Category.FIXED_PALETTE)
    STROBE_BLUE = (91, 'strobe-blue', 'Strobe, Blue', Category.FIXED_PALETTE)
    STROBE_GOLD = (93, 'strobe-gold', 'Strobe, Gold', Category.FIXED_PALETTE)
    STROBE_WHITE = (95, 'strobe-white', 'Strobe, White', Category.FIXED_PALETTE)

    # Color 1 patterns (colour set by the driver's Color 1 potentiometer)
    COLOR1_BLEND_TO_BLACK = (97, 'color1-blend-to-black', 'End to End Blend to Black', Category.COLOR_1)
    COLOR1_LARSON = (99, 'color1-larson', 'Larson Scanner', Category.COLOR_1)
    COLOR1_CHASE = (101, 'color1-chase', 'Light Chase', Category.COLOR_1)
    COLOR1_HEARTBEAT_SLOW = (103, 'color1-heartbeat-slow', 'Heartbeat Slow', Category.COLOR_1)
    COLOR1_HEARTBEAT_MEDIUM = (105, 'color1-heartbeat-medium', 'Heartbeat Medium', Category.COLOR_1)
    COLOR1_HEARTBEAT_FAST = (107, 'color1-heartbeat-fast', 'Heartbeat Fast', Category.COLOR_1)
    COLOR1_BREATH_SLOW = (109, 'color1-breath-slow', 'Breath Slow', Category.COLOR_1)
    COLOR1_BREATH_FAST = (111, 'color1-breath-fast', 'Breath Fast', Category.COLOR_1)
    COLOR1_SHOT = (113, 'color1-shot', 'Shot', Category.COLOR_1)
    COLOR1_STROBE = (115, 'color1-strobe', 'Strobe', Category.COLOR_1)

    # Color 2 patterns
    COLOR2_BLEND_TO_BLACK = (117, 'color2-blend-to-black', 'End to End Blend to Black', Category.COLOR_2)
    COLOR2_LARSON = (119, 'color2-larson', 'Larson Scanner', Category.COLOR_2)
    COLOR2_CHASE = (121, 'color2-chase', 'Light Chase', Category.COLOR_2)
    COLOR2_HEARTBEAT_SLOW = (123, 'color2-heartbeat-slow', 'Heartbeat Slow', Category.COLOR_2)
    COLOR2_HEARTBEAT_MEDIUM = (125, 'color2-heartbeat-medium', 'Heartbeat Medium', Category.COLOR_2)
    COLOR2_HEARTBEAT_FAST = (127, 'color2-heartbeat-fast', 'Heartbeat Fast', Category.COLOR_2)
    COLOR2_BREATH_SLOW = (129, 'color2-breath-slow', 'Breath Slow', Category.COLOR_2)
    COLOR2_BREATH_FAST = (131, 'color2-breath-fast', 'Breath Fast', Category.COLOR_2)
    COLOR2_SHOT = (133, 'color2-shot', 'Shot', Category.COLOR_2)
    COLOR2_STROBE = (135, 'color2-strobe', 'Strobe', Category.COLOR_2)

    # Color 1 and 2 patterns
    SPARKLE_1_ON_2 = (137, 'sparkle-1-on-2', 'Sparkle, Color 1 on Color 2', Category.COLOR_1_AND_2)
    SPARKLE_2_ON_1 = (139, 'sparkle-2-on-1', 'Sparkle, Color 2 on Color 1', Category.COLOR_1_AND_2)
    GRADIENT_1_AND_2 = (141, 'gradient-1-and-2', 'Color Gradient, Color 1 and 2', Category.COLOR_1_AND_2)
    BPM_1_AND_2 = (143, 'bpm-1-and-2', 'Beats per Minute, Color 1 and 2', Category.COLOR_1_AND_2)
    END_BLEND_1_TO_2 = (145, 'end-blend-1-to-2', 'End to End Blend, Color 1 to 2', Category.COLOR_1_AND_2)
    END_BLEND = (147, 'end-blend', 'End to End Blend', Category.COLOR_1_AND_2)
    COLOR_1_AND_2_NO_BLEND = (149, 'color-1-and-2-no-blend', 'Color 1 and Color 2 no blending', Category.COLOR_1_AND_2)
    TWINKLES_1_AND_2 = (151, 'twinkles-1-and-2', 'Twinkles, Color 1 and 2', Category.COLOR_1_AND_2)
    WAVES_1_AND_2 = (153, 'waves-1-and-2', 'Color Waves, Color 1 and 2', Category.COLOR_1_AND_2)
    SINELON_1_AND_2 = (155, 'sinelon-1-and-2', 'Sinelon, Color 1 and 2', Category.COLOR_1_AND_2)

    # Solid colors
    HOT_PINK = (157, 'hot-pink', 'Hot Pink', Category.SOLID)
    DARK_RED = (159, 'dark-red', 'Dark Red', Category.SOLID)
    RED = (161, 'red', 'Red', Category.SOLID)
    RED_ORANGE = (163, 'red-orange', 'Red Orange', Category.SOLID)
    ORANGE = (165, 'orange', 'Orange', Category.SOLID)
    GOLD = (167, 'gold', 'Gold', Category.SOLID)
    YELLOW = (169, 'yellow', 'Yellow', Category.SOLID)
    LAWN_GREEN = (171, 'lawn-green', 'Lawn Green', Category.SOLID)
    LIME = (173, 'lime', 'Lime', Category.SOLID)
    DARK_GREEN = (175, 'dark-green', 'Dark Green', Category.SOLID)
    GREEN = (177, 'green', 'Green', Category.SOLID)
    BLUE_GREEN = (179, 'blue-green', 'Blue Green', Category.SOLID)
    AQUA = (181, 'aqua', 'Aqua', Category.SOLID)
    SKY_BLUE = (183, 'sky-blue', 'Sky Blue', Category.SOLID)
    DARK_BLUE = (185, 'dark-blue', 'Dark Blue', Category.SOLID)
    BLUE = (187, 'blue', 'Blue', Category.SOLID)
    BLUE_VIOLET = (189, 'blue-violet', 'Blue Violet', Category.SOLID)
    VIOLET = (191, 'violet', 'Violet', Category.SOLID)
    WHITE = (193, 'white', 'White', Category.SOLID)
    GRAY = (195, 'gray', 'Gray', Category.SOLID)
    DARK_GRAY = (197, 'dark-gray', 'Dark Gray', Category.SOLID)
    BLACK = (199, 'black', 'Black', Category.SOLID)

    def __new__(cls, code: int, label: str, title: str, category: Category):
        obj = object.__new__(cls)
        obj._value_ = code
        obj.label = label
        obj.title = title
        obj.category = category
        return obj

    @property
    def code(self) -> int:
        return self._value_

    def as_percentage(self) -> float:
        """Duty value from -0.99 to 0.99, as the driver's colour table lists it."""
        return (self.code - 100) / 100

    def as_abs_percentage(self) -> float:
        """Duty value rescaled to 0.0..1.0."""
        # (as_percentage() + 1) / 2, computed from the code to stay exact
        return self.code / 200

    def as_duty(self, max_duty: int | float) -> int | float:
        """Duty scaled to 0..max_duty, e.g. the maximum duty of a PWM channel.

        Integer maxima give a truncated integer duty; float maxima a float.
        """
        if max_duty <= 0:
            raise ValueError(f'max_duty must be positive, got {max_duty}')
        if isinstance(max_duty, Integral):
            return self.code * int(max_duty) // 200
        return self.as_abs_percentage() * max_duty

    def pulse_width_us(self) -> int:
        """Servo-style pulse width in microseconds the driver decodes as this pattern."""
        return PULSE_CENTRE_US + PULSE_SPAN_US * (self.code - 100) // 100

    @classmethod
    def from_label(cls, label: str) -> 'Pattern':
        try:
            return _BY_LABEL[label]
        except (KeyError, TypeError):
            raise NotFound(f'Unknown pattern: {label!r}') from None

    @classmethod
    def from_code(cls, code: int) -> 'Pattern':
        try:
            return cls(code)
        except ValueError:
            raise NotFound(f'No pattern with code {code}') from None


_BY_LABEL: dict[str, Pattern] = {p.label: p for p in Pattern}
