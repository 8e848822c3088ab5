"""HSBA color value type and decomposition helpers for hsbcontrast.

Colors are handled in the hue/saturation/brightness/alpha model, where every
component nominally lies in [0.0, 1.0]. Components are not validated or
clamped; out-of-range values flow through the contrast math unchanged.

Example:
    >>> from hsbcontrast.colors import HSBColor, hsba_components
    >>> hsba_components(HSBColor(0.8, 1.0, 0.15))
    (0.8, 1.0, 0.15, 1.0)
    >>> hsba_components([0.5, 0.5, 0.5, 1.0])
    (0.5, 0.5, 0.5, 1.0)
"""

from dataclasses import astuple, dataclass
from typing import Any

import colour
import numpy as np

__all__ = [
    "HSBColor",
    "ColorSpaceError",
    "NAMED_COLORS",
    "hsba_components",
    "to_rgb",
]


class ColorSpaceError(ValueError):
    """Raised when a color cannot be expressed as hue/saturation/brightness/alpha."""


@dataclass(frozen=True)
class HSBColor:
    """Immutable hue/saturation/brightness/alpha color."""

    hue: float
    saturation: float
    brightness: float
    alpha: float = 1.0

    def components(self) -> tuple[float, float, float, float]:
        return astuple(self)


# Presets follow the usual platform system colors, expressed in HSB.
NAMED_COLORS: dict[str, HSBColor] = {
    "black": HSBColor(0.0, 0.0, 0.0),
    "darkgray": HSBColor(0.0, 0.0, 1.0 / 3.0),
    "gray": HSBColor(0.0, 0.0, 0.5),
    "lightgray": HSBColor(0.0, 0.0, 2.0 / 3.0),
    "white": HSBColor(0.0, 0.0, 1.0),
    "red": HSBColor(0.0, 1.0, 1.0),
    "green": HSBColor(1.0 / 3.0, 1.0, 1.0),
    "blue": HSBColor(2.0 / 3.0, 1.0, 1.0),
    "cyan": HSBColor(0.5, 1.0, 1.0),
    "yellow": HSBColor(1.0 / 6.0, 1.0, 1.0),
    "magenta": HSBColor(5.0 / 6.0, 1.0, 1.0),
    "orange": HSBColor(1.0 / 12.0, 1.0, 1.0),
    "purple": HSBColor(5.0 / 6.0, 1.0, 0.5),
    "brown": HSBColor(1.0 / 12.0, 2.0 / 3.0, 0.6),
    "clear": HSBColor(0.0, 0.0, 0.0, 0.0),
}


def hsba_components(color: Any) -> tuple[float, float, float, float]:
    """Decompose a color-like value into (hue, saturation, brightness, alpha).

    Args:
        color: An ``HSBColor``, or a sequence/array of exactly four numbers
            ordered as hue, saturation, brightness, alpha.

    Returns:
        tuple: The four components as Python floats.

    Raises:
        ColorSpaceError: If ``color`` is a string, is not numeric, or does not
            have exactly four components.
    """
    if isinstance(color, HSBColor):
        return color.components()
    if color is None or isinstance(color, (str, bytes)):
        raise ColorSpaceError(f"Cannot decompose {color!r} into HSBA components")

    try:
        values = np.asarray(color, dtype=float)
    except (TypeError, ValueError) as e:
        raise ColorSpaceError(
            f"Cannot decompose {color!r} into HSBA components"
        ) from e

    if values.shape != (4,):
        raise ColorSpaceError(
            f"Expected 4 HSBA components, got shape {values.shape}"
        )

    h, s, b, a = (float(v) for v in values)
    return (h, s, b, a)


def to_rgb(color: Any) -> tuple[float, float, float]:
    """Convert a color to clipped sRGB for display; alpha is dropped."""
    h, s, b, _ = hsba_components(color)
    hsv = np.clip(np.array([h, s, b]), 0.0, 1.0)
    rgb = colour.models.rgb.cylindrical.HSV_to_RGB(hsv)
    r, g, bl = (float(c) for c in rgb)
    return (r, g, bl)
