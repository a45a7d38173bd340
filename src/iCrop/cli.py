"""Typer-based CLI entry point."""

from __future__ import annotations

import functools
import logging
import math
from pathlib import Path
from typing import List, Optional

import typer
from rich import print
from rich.table import Table

from .crop.controller import CropController
from .crop.geometry import Point, Rect, Size
from .crop.rotation import CropRotation
from .errors import CropError
from .imaging import crop_file
from .utils.console_logger import ensure_console_logger
from .settings import CropOptions

app = typer.Typer(help="Crop-rectangle geometry tools")


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except CropError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


def _parse_size(text: str) -> Size:
    try:
        width, height = (float(part) for part in text.lower().split("x"))
    except ValueError:
        raise typer.BadParameter(f"expected WIDTHxHEIGHT, got {text!r}") from None
    return Size(width, height)


def _parse_floats(text: str, count: int) -> list[float]:
    try:
        values = [float(part) for part in text.split(",")]
    except ValueError:
        raise typer.BadParameter(f"expected {count} comma-separated numbers, got {text!r}") from None
    if len(values) != count:
        raise typer.BadParameter(f"expected {count} comma-separated numbers, got {text!r}")
    return values


def _parse_rotation(text: str) -> CropRotation:
    try:
        return CropRotation.from_name(text)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from None


def _run_step(controller: CropController, step: str) -> str:
    """Replay one ``down:x,y`` / ``move:x,y`` / ``up`` step; describe what happened."""
    kind, _, args = step.partition(":")
    kind = kind.strip().lower()
    if kind == "up":
        controller.on_pointer_up()
        return "released"
    if kind not in ("down", "move"):
        raise typer.BadParameter(f"unknown step {step!r}")
    x, y = _parse_floats(args, 2)
    if kind == "down":
        return f"grabbed {controller.on_pointer_down(Point(x, y)).name}"
    return "moved" if controller.on_pointer_move(Point(x, y)) else "ignored"


def _format_rect(rect: Rect) -> str:
    return ", ".join(f"{value:.4f}" for value in rect.as_tuple())


@app.command()
@_handle_errors
def simulate(
    steps: List[str] = typer.Argument(..., help="Gesture steps: down:x,y move:x,y up"),
    image_size: str = typer.Option("1000x1000", help="Source image size WIDTHxHEIGHT"),
    display_size: Optional[str] = typer.Option(
        None, help="Displayed size WIDTHxHEIGHT (defaults to the image size)"
    ),
    ratio: Optional[float] = typer.Option(None, help="Aspect ratio lock (width / height)"),
    minimum: float = typer.Option(100.0, "--min", help="Minimum crop size in displayed pixels"),
    maximum: Optional[float] = typer.Option(None, "--max", help="Maximum crop size"),
    rotation: str = typer.Option("up", help="Rotation: up, right, down or left"),
    touch_size: float = typer.Option(50.0, help="Touch area size"),
    always_move: bool = typer.Option(False, help="Move when pressing outside the crop"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log gesture details"),
) -> None:
    """Replay pointer gestures against a crop controller and print the result."""

    logger = logging.getLogger("iCrop")
    ensure_console_logger(logger, "icrop-cli", level=logging.DEBUG if verbose else logging.WARNING)

    options = CropOptions(
        touch_size=touch_size,
        minimum_image_size=minimum,
        maximum_image_size=math.inf if maximum is None else maximum,
        always_move=always_move,
    )
    controller = CropController(options=options, rotation=_parse_rotation(rotation))
    image = _parse_size(image_size)
    controller.set_image_size(image)
    if ratio is not None:
        controller.set_aspect_ratio(ratio)
    if display_size is None:
        controller.layout(image)
    else:
        controller.set_display_size(_parse_size(display_size))

    table = Table(title="Crop gesture replay")
    table.add_column("Step")
    table.add_column("Result")
    table.add_column("Crop (l, t, r, b)")
    for step in steps:
        outcome = _run_step(controller, step)
        table.add_row(step, outcome, _format_rect(controller.crop))
    print(table)

    pixels = controller.crop_size()
    print(f"[green]Final crop[/green] {_format_rect(controller.crop)}")
    print(f"[green]Image pixels[/green] {_format_rect(pixels)}")


@app.command()
@_handle_errors
def apply(
    source: Path = typer.Argument(..., exists=True, dir_okay=False),
    target: Path = typer.Argument(...),
    rect: str = typer.Option("0,0,1,1", help="Normalised crop left,top,right,bottom"),
    rotation: str = typer.Option("up", help="Rotation: up, right, down or left"),
) -> None:
    """Crop an image file with a normalised rectangle and rotation."""

    crop = Rect(*_parse_floats(rect, 4))
    # Same validation the controller applies to external rectangles
    controller = CropController(default_crop=crop, rotation=_parse_rotation(rotation))
    width, height = crop_file(source, target, controller.crop, controller.rotation)
    print(f"[green]Saved {target} ({width}x{height})")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
