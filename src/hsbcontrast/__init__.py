"""HSB contrast - Adjust a color's brightness to contrast with a background"""

__version__ = "0.1.0"

from .color_utils import format_color_output, parse_color
from .colors import NAMED_COLORS, ColorSpaceError, HSBColor
from .contrast import (
    MIN_CONTRAST_RATIO,
    adjusted_color,
    adjusted_color_for_best_contrast,
    brightness_to_meet_min_contrast,
    brightness_value,
    contrast_ratio,
)

__all__ = [
    "HSBColor",
    "ColorSpaceError",
    "NAMED_COLORS",
    "MIN_CONTRAST_RATIO",
    "brightness_value",
    "contrast_ratio",
    "brightness_to_meet_min_contrast",
    "adjusted_color_for_best_contrast",
    "adjusted_color",
    "parse_color",
    "format_color_output",
]
