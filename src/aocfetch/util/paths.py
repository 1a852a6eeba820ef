"""Path utilities centralising where inputs and settings live."""

from __future__ import annotations

from pathlib import Path

import typer

from aocfetch.errors import WorkingDirectoryError

APP_NAME = "aoc"


def default_config_dir() -> Path:
    """Return the per-user configuration directory (``~/.config/aoc`` on Linux)."""
    return Path(typer.get_app_dir(APP_NAME))


def input_filename(year: int, day: int) -> str:
    return f"{year}-{day}.txt"


def output_path_for(output_dir: str | Path, *, year: int, day: int, cwd: Path | None = None) -> Path:
    """Return the destination file for a puzzle input.

    ``output_dir`` is resolved against ``cwd`` when given; an absolute
    ``output_dir`` ignores ``cwd``.
    """
    base = Path(output_dir).expanduser()
    if cwd is not None:
        base = cwd / base
    return base / input_filename(year, day)


def working_directory() -> Path:
    """Return the current working directory or raise `WorkingDirectoryError`."""
    try:
        return Path.cwd()
    except OSError as exc:
        raise WorkingDirectoryError("Unable to determine current working directory") from exc


__all__ = [
    "APP_NAME",
    "default_config_dir",
    "input_filename",
    "output_path_for",
    "working_directory",
]
