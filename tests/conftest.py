"""Test configuration and fixtures for hsbcontrast tests."""

import pytest

from hsbcontrast.colors import HSBColor


@pytest.fixture
def black() -> HSBColor:
    return HSBColor(0.0, 0.0, 0.0, 1.0)


@pytest.fixture
def white() -> HSBColor:
    return HSBColor(0.0, 0.0, 1.0, 1.0)


@pytest.fixture
def yellow() -> HSBColor:
    return HSBColor(1.0 / 6.0, 1.0, 1.0, 1.0)


@pytest.fixture
def dark_purple() -> HSBColor:
    return HSBColor(0.8, 1.0, 0.15, 1.0)


@pytest.fixture
def brightness_levels() -> list[float]:
    """Provide brightness values spread across [0, 1]."""
    return [0.0, 0.05, 0.15, 0.25, 0.5, 0.75, 0.9, 1.0]


@pytest.fixture
def undecomposable_colors() -> list[object]:
    """Provide values that cannot be read as HSBA colors."""
    return [
        None,
        "yellow",           # Strings are not decomposed
        b"\x00\x00\x00\x00",
        (0.5, 0.5, 0.5),    # Too few components
        (0.1, 0.2, 0.3, 0.4, 0.5),  # Too many components
        ("a", "b", "c", "d"),       # Not numeric
        object(),
    ]
