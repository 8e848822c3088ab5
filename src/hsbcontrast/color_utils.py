"""Color parsing and formatting utilities for hsbcontrast."""

import re

from .colors import NAMED_COLORS, HSBColor, hsba_components, to_rgb

_NUMBER = r"(\d+(?:\.\d+)?)"


def parse_hsb_color(color_str: str) -> HSBColor | None:
    """Parse HSB color format hsb(H, S%, B%), also spelled hsv(...)."""
    pattern = (
        rf"hs[bv]\s*\(\s*{_NUMBER}\s*,\s*"
        rf"{_NUMBER}\s*%\s*,\s*{_NUMBER}\s*%\s*\)$"
    )
    match = re.match(pattern, color_str.strip(), re.IGNORECASE)

    if not match:
        return None

    try:
        h = float(match.group(1))
        s = float(match.group(2))
        b = float(match.group(3))
    except ValueError:
        return None

    if not (0 <= h <= 360 and 0 <= s <= 100 and 0 <= b <= 100):
        return None

    return HSBColor(h / 360, s / 100, b / 100)


def parse_hsba_color(color_str: str) -> HSBColor | None:
    """Parse HSBA color format hsba(H, S%, B%, A)."""
    pattern = (
        rf"hsba\s*\(\s*{_NUMBER}\s*,\s*{_NUMBER}\s*%\s*,\s*"
        rf"{_NUMBER}\s*%\s*,\s*{_NUMBER}\s*\)$"
    )
    match = re.match(pattern, color_str.strip(), re.IGNORECASE)

    if not match:
        return None

    try:
        h = float(match.group(1))
        s = float(match.group(2))
        b = float(match.group(3))
        a = float(match.group(4))
    except ValueError:
        return None

    if not (0 <= h <= 360 and 0 <= s <= 100 and 0 <= b <= 100 and 0 <= a <= 1):
        return None

    return HSBColor(h / 360, s / 100, b / 100, a)


def parse_named_color(color_str: str) -> HSBColor | None:
    """Look up a named color such as 'yellow' or 'white'."""
    key = re.sub(r"[\s_-]", "", color_str.strip().lower())
    return NAMED_COLORS.get(key)


def parse_color(color_str: str) -> HSBColor:
    """Parse color string in various formats."""
    color_str = color_str.strip()

    parsers = [parse_hsba_color, parse_hsb_color, parse_named_color]

    for parser in parsers:
        result = parser(color_str)
        if result is not None:
            return result

    raise ValueError(
        f"Invalid color format: '{color_str}'. "
        "Supported formats: hsb(H,S%,B%), hsv(H,S%,V%), hsba(H,S%,B%,A), "
        f"or a color name ({', '.join(sorted(NAMED_COLORS))})"
    )


def format_color_output(colors: list[HSBColor], format_type: str = "hsb") -> list[str]:
    """Format colors for output."""
    formatted: list[str] = []

    for color in colors:
        if format_type == "hsb":
            h, s, b, a = hsba_components(color)
            formatted.append(
                f"hsba({h * 360:.1f}, {s * 100:.1f}%, {b * 100:.1f}%, {a:.2f})"
            )
        elif format_type in ("hex", "rgb"):
            r, g, b = to_rgb(color)
            r_int = int(round(r * 255))
            g_int = int(round(g * 255))
            b_int = int(round(b * 255))
            if format_type == "hex":
                formatted.append(f"#{r_int:02X}{g_int:02X}{b_int:02X}")
            else:
                formatted.append(f"rgb({r_int}, {g_int}, {b_int})")
        else:  # raw
            h, s, b, a = hsba_components(color)
            formatted.append(f"({h:.4f}, {s:.4f}, {b:.4f}, {a:.4f})")

    return formatted
