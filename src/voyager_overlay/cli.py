"""Typer-based command line interface for the overlay generator.

Exactly one output type (``--cut``, ``--print``, ``--all``) is required and
at most one device (``--hp``, ``--sm``). The PDF is written to
``<model>-overlay-<type>.pdf`` unless ``--output`` is given.

Exit codes
----------
0 success
1 conflicting or missing options, or the file could not be written
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional, Sequence

import typer

from voyager_overlay.core.models.render_options import RenderMode, RenderOptions
from voyager_overlay.utils.errors import ConflictingOptionsError
from voyager_overlay.utils.pdf.core.layout_common import (
    CAMEO4_NO_MAT_REG_GEOMETRY,
    DEFAULT_DEVICE,
    DEVICES,
    default_output_path,
)
from voyager_overlay.utils.pdf.core.legends import legend_table
from voyager_overlay.utils.pdf.renderers.pdf_renderer import render_pdf

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="voyager-overlay",
    help="Generate printable and cuttable keyboard overlays for Voyager-style calculators.",
    add_completion=False,
)


def conflicting_options(selected: Mapping[str, bool], group: Sequence[str], required: bool = False) -> str | None:
    """Return the single option set in ``group`` (or None), rejecting combinations."""

    chosen = [name for name in group if selected.get(name)]
    if len(chosen) > 1:
        raise ConflictingOptionsError(f"Conflicting options `{chosen[0]}' and '{chosen[1]}'.")
    if required and not chosen:
        raise ConflictingOptionsError("No option in group set: " + ", ".join(f"--{name}" for name in group))
    return chosen[0] if chosen else None


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


@app.command()
def main(  # noqa: PLR0913
    cut: bool = typer.Option(False, "--cut", "-c", help="cut marks"),
    print_: bool = typer.Option(False, "--print", "-p", help="print (registration and legends)"),
    all_: bool = typer.Option(False, "--all", "-a", help="all (registration, legends, and cut marks)"),
    hp: bool = typer.Option(False, "--hp", help="HP calculator"),
    sm: bool = typer.Option(False, "--sm", help="Swiss Micros calculator"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="output PDF file"),  # noqa: B008
    shift_legends: bool = typer.Option(
        False, "--shift-legends", help="Use the bit-shift legends on the top row"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log layout details to stderr"),
) -> None:
    """Write one letter-size page of overlays."""

    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(name)s: %(message)s")

    try:
        mode_name = conflicting_options({"cut": cut, "print": print_, "all": all_}, ["cut", "print", "all"], required=True)
        device_name = conflicting_options({"hp": hp, "sm": sm}, ["hp", "sm"]) or DEFAULT_DEVICE
    except ConflictingOptionsError as exc:
        _safe_exit(1, f"error: {exc}")

    mode = RenderMode(mode_name)
    device = DEVICES[device_name]
    options = RenderOptions.for_mode(mode)
    path = output or default_output_path(device.model, mode.value)
    logger.debug("device=%s mode=%s options=%s", device.model, mode.value, options)

    try:
        render_pdf(path, CAMEO4_NO_MAT_REG_GEOMETRY, device.geometry, options, legend_table(shift_legends))
    except OSError as exc:
        _safe_exit(1, f"error: {exc}")
    typer.echo(str(path))
