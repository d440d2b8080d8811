#!/usr/bin/env python3
"""
audio_pack.cli.cli

Typer-based CLI for bundling audio files into a resource pack zip.

Examples
--------
Convert every mp3 in a folder with ffmpeg:

    audio-pack build --input-dir ./sounds -o pack.zip -n "My Pack" --pack-format 15

Use a custom converter registered by a local module:

    audio-pack build a.mp3 b.mp3 -o pack.zip -n sfx --pack-format 15 \\
        --converter-module ./my_converter.py --converter mine
"""

from __future__ import annotations

import sys
import traceback
from pathlib import Path
from typing import Any

import typer

from audio_pack.errors import ConverterError, PackError

app = typer.Typer(
    name="audio-pack",
    help="Bundle converted audio files into a resource pack zip.",
    no_args_is_help=True,
)


def _print_pack_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error and return the process exit code.

    Parameters
    ----------
    exc : Exception
        Exception raised while building the pack.
    debug : bool
        Whether to include traceback details.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _resolve_converter(name: str, modules: list[str] | None) -> Any:
    """Look up a converter by name, loading extra converter modules first."""
    from audio_pack.converters.registry import create_default_registry

    try:
        registry = create_default_registry(extra_modules=modules)
        converter = registry.get(name)
        check = getattr(converter, "resolve_executable", None)
        if callable(check):
            check()
    except ConverterError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return converter


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Log level (DEBUG, INFO, WARNING). Defaults to $LOG_LEVEL or INFO."
    ),
) -> None:
    """Initialize shared CLI state and logging."""
    from audio_pack.logging_utils import setup_logging

    setup_logging("DEBUG" if debug and log_level is None else log_level)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("build")
def build_cmd(
    ctx: typer.Context,
    sources: list[Path] | None = typer.Argument(
        None, help="Source audio files. Non-matching entries are ignored."
    ),
    output_path: Path = typer.Option(..., "--output", "-o", help="Where to write the pack zip."),
    namespace: str = typer.Option(
        ..., "--namespace", "-n", help="Pack name; reduced to a-z, 0-9, _, ., -."
    ),
    pack_format: int = typer.Option(
        ..., "--pack-format", min=1, help="pack_format value for pack.mcmeta."
    ),
    description: str = typer.Option("", "--description", help="Pack description."),
    input_dir: Path | None = typer.Option(
        None, "--input-dir", help="Directory scanned for additional source files."
    ),
    converter_name: str = typer.Option(
        "ffmpeg", "--converter", help="Name of the registered converter to use."
    ),
    converter_module: list[str] | None = typer.Option(
        None,
        "--converter-module",
        help="Converter module import path or file path (repeatable).",
    ),
    source_ext: str = typer.Option(".mp3", "--source-ext", help="Accepted source extension."),
    target_ext: str = typer.Option(".ogg", "--target-ext", help="Converted file extension."),
) -> None:
    """Convert source audio and write the resource pack zip.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    sources : list[Path] | None
        Explicit source files.
    output_path : Path
        Destination zip path.
    namespace : str
        Pack namespace before sanitization.
    pack_format : int
        Positive pack format number.

    Notes
    -----
    - The default ``ffmpeg`` converter needs the ffmpeg binary on ``PATH``.
    - Exits with 1 when no file converted and no zip was written.
    """
    debug: bool = bool(ctx.obj.get("debug", False))
    converter = _resolve_converter(converter_name, converter_module)

    try:
        from audio_pack.api import build_resource_pack

        kwargs: dict[str, Any] = {
            "output_path": output_path,
            "namespace": namespace,
            "pack_format": pack_format,
            "converter": converter,
            "files": sources or [],
            "description": description,
            "source_extension": source_ext,
            "target_extension": target_ext,
        }
        if input_dir is not None:
            kwargs["input_directory"] = input_dir

        result = build_resource_pack(**kwargs)
    except PackError as exc:
        raise typer.Exit(code=_print_pack_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_pack_error(exc, debug))

    for skipped in result.skipped:
        typer.echo(f"! Skipped {skipped.source_path}: {skipped.reason}", err=True)
    if not result.created:
        typer.echo("✗ No sounds were converted; resource pack not created.", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"✓ Saved: {result.output_path} ({len(result.sounds)} sounds)")


@app.command("doctor")
def doctor_cmd(
    converter_module: list[str] | None = typer.Option(
        None,
        "--converter-module",
        help="Converter module import path or file path (repeatable).",
    ),
) -> None:
    """Print toolchain availability and registered converters."""
    from audio_pack.converters.ffmpeg import FfmpegConverter

    typer.echo(f"Python: {sys.version.split()[0]}")
    ffmpeg = FfmpegConverter()
    version = ffmpeg.version()
    typer.echo(f"ffmpeg: {version or '<not installed>'}")

    try:
        from audio_pack.converters.registry import create_default_registry

        registry = create_default_registry(extra_modules=converter_module)
        typer.echo(f"converters: {', '.join(registry.names())}")
    except ConverterError as exc:
        typer.echo(f"converters: <unavailable> ({exc})")


if __name__ == "__main__":
    app()
