"""Brightness-based contrast ratios and contrast-driven color adjustment.

The contrast ratio between two colors is computed from their HSB brightness
components:

    ratio = (high + 0.05) / (low + 0.05)

where ``high`` and ``low`` are the larger and smaller brightness values. The
ratio is order-independent and at least 1.0 for brightness values in [0, 1];
black against white yields 21.0.

A foreground color that falls short of ``MIN_CONTRAST_RATIO`` against a
background can be adjusted by replacing its brightness, keeping hue,
saturation and alpha intact.

Example:
    >>> from hsbcontrast.colors import NAMED_COLORS
    >>> from hsbcontrast.contrast import (
    ...     adjusted_color_for_best_contrast, contrast_ratio)
    >>> yellow, white = NAMED_COLORS["yellow"], NAMED_COLORS["white"]
    >>> contrast_ratio(yellow, white)
    1.0
    >>> darker = adjusted_color_for_best_contrast(yellow, white)
    >>> round(contrast_ratio(darker, white), 6)
    7.0

All functions are pure and safe to call from multiple threads.
"""

from typing import Any

from .colors import ColorSpaceError, HSBColor, hsba_components

__all__ = [
    "MIN_CONTRAST_RATIO",
    "brightness_value",
    "contrast_ratio",
    "brightness_to_meet_min_contrast",
    "adjusted_color_for_best_contrast",
    "adjusted_color",
]

MIN_CONTRAST_RATIO = 7.0

_OFFSET = 0.05


def brightness_value(color: Any) -> float:
    """Return the brightness component of ``color``.

    Raises:
        ColorSpaceError: If the color cannot be decomposed into HSBA.
    """
    return hsba_components(color)[2]


def contrast_ratio(color_a: Any, color_b: Any) -> float:
    """Calculate the contrast ratio between two colors.

    Args:
        color_a: First color.
        color_b: Second color.

    Returns:
        float: ``(high + 0.05) / (low + 0.05)`` where ``high`` and ``low`` are
            the larger and smaller of the two brightness values.

    Raises:
        ColorSpaceError: If either color cannot be decomposed into HSBA.
    """
    b1 = brightness_value(color_a)
    b2 = brightness_value(color_b)

    if b1 > b2:
        return (b1 + _OFFSET) / (b2 + _OFFSET)
    return (b2 + _OFFSET) / (b1 + _OFFSET)


def brightness_to_meet_min_contrast(
    color_a: Any, color_b: Any, min_ratio: float = MIN_CONTRAST_RATIO
) -> float:
    """Return the brightness ``color_a`` needs to reach ``min_ratio`` against ``color_b``.

    When ``color_a`` is the brighter of the two its brightness is pushed
    further up; otherwise it is pulled down below ``color_b``. In both cases
    the target is derived from ``color_b``'s brightness only.

    The result is not clamped to [0, 1]; targets outside that range mean the
    ratio cannot be met with a displayable brightness.

    Raises:
        ColorSpaceError: If either color cannot be decomposed into HSBA.
    """
    b1 = brightness_value(color_a)
    b2 = brightness_value(color_b)

    if b1 > b2:
        return min_ratio * (b2 + _OFFSET) - _OFFSET
    return (b2 + _OFFSET) / min_ratio - _OFFSET


def adjusted_color_for_best_contrast(
    color_a: Any, color_b: Any, min_ratio: float = MIN_CONTRAST_RATIO
) -> Any:
    """Adjust the brightness of ``color_a`` so it contrasts with ``color_b``.

    ``color_b`` is only read. If the pair already meets ``min_ratio``, or
    either color cannot be decomposed, ``color_a`` itself is returned.
    """
    try:
        ratio = contrast_ratio(color_a, color_b)
    except ColorSpaceError:
        return color_a
    if ratio >= min_ratio:
        return color_a

    try:
        target = brightness_to_meet_min_contrast(color_a, color_b, min_ratio)
    except ColorSpaceError:
        return color_a

    return adjusted_color(color_a, target)


def adjusted_color(base_color: Any, new_brightness: float) -> Any:
    """Return ``base_color`` with its brightness replaced by ``new_brightness``.

    Hue, saturation and alpha are preserved. A color that cannot be decomposed
    is returned unchanged.
    """
    try:
        h, s, _, a = hsba_components(base_color)
    except ColorSpaceError:
        return base_color
    return HSBColor(h, s, float(new_brightness), a)
