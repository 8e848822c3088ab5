"""Command-line interface for hsbcontrast."""

import json
import sys

import click

from . import __version__
from .color_utils import format_color_output, parse_color
from .contrast import (
    MIN_CONTRAST_RATIO,
    adjusted_color_for_best_contrast,
    brightness_value,
    contrast_ratio,
)


@click.command()
@click.version_option(version=__version__, prog_name="hsbcontrast")
@click.option(
    "-f",
    "--foreground-color",
    required=True,
    help=(
        "Foreground color to adjust, in format: hsb(H,S%,B%), hsv(H,S%,V%), "
        "hsba(H,S%,B%,A) or a color name"
    ),
)
@click.option(
    "-b",
    "--background-color",
    required=True,
    help="Background color to compare against (same formats as --foreground-color)",
)
@click.option(
    "--contrast-ratio",
    "min_ratio",
    type=click.FloatRange(1.0, 21.0),
    default=MIN_CONTRAST_RATIO,
    help=f"Minimum contrast ratio to reach (default: {MIN_CONTRAST_RATIO})",
)
@click.option(
    "--format",
    type=click.Choice(["hsb", "hex", "rgb", "raw"], case_sensitive=False),
    default="hsb",
    help="Output format for colors (default: hsb)",
)
@click.option(
    "-F",
    "--output-format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format (default: text)",
)
def main(
    foreground_color: str,
    background_color: str,
    min_ratio: float,
    format: str,
    output_format: str,
) -> None:
    """Adjust a foreground color's brightness to contrast with a background.

    The contrast ratio of two colors is (B1 + 0.05) / (B2 + 0.05), where B1
    and B2 are the higher and lower HSB brightness values. If the foreground
    falls short of the minimum ratio, its brightness is replaced while hue,
    saturation and alpha are kept.

    Examples:

        hsbcontrast -f yellow -b white

        hsbcontrast -f "hsb(288, 100%, 15%)" -b black --format hex

        hsbcontrast -f white -b "hsb(0, 0%, 90%)" --contrast-ratio 4.5 -F json
    """
    try:
        fg = parse_color(foreground_color)
        bg = parse_color(background_color)

        ratio = contrast_ratio(fg, bg)
        adjusted = adjusted_color_for_best_contrast(fg, bg, min_ratio)
        new_ratio = contrast_ratio(adjusted, bg)
        fmt = format.lower()
        original_text, adjusted_text, background_text = format_color_output(
            [fg, adjusted, bg], fmt
        )

        if output_format.lower() == "json":
            click.echo(
                json.dumps(
                    {
                        "foreground": original_text,
                        "background": background_text,
                        "contrast_ratio": ratio,
                        "min_contrast_ratio": min_ratio,
                        "adjusted": adjusted is not fg,
                        "adjusted_color": adjusted_text,
                        "adjusted_contrast_ratio": new_ratio,
                    },
                    indent=2,
                )
            )
        else:
            click.echo(
                f"Contrast of {original_text} against {background_text}: "
                f"{ratio:.2f}:1"
            )
            if adjusted is fg:
                click.echo(f"No adjustment needed (minimum {min_ratio:.2f}:1)")
            else:
                click.echo(f"Adjusted color: {adjusted_text}")
                click.echo(f"Adjusted contrast: {new_ratio:.2f}:1")

        new_brightness = brightness_value(adjusted)
        if not 0.0 <= new_brightness <= 1.0:
            click.echo(
                f"Warning: brightness {new_brightness:.4f} is outside [0, 1]; "
                f"a {min_ratio:.2f}:1 contrast cannot be displayed against "
                f"{background_text}",
                err=True,
            )

    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Unexpected error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
