"""Command-line entry point for aoc-fetch."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional

import typer

from aocfetch import __version__
from aocfetch.config import load_config
from aocfetch.errors import AocFetchError, ExitCode, InvalidArgumentError
from aocfetch.io.credentials import CredentialStore
from aocfetch.io.fetcher import InputRequest, fetch_input
from aocfetch.services.calendar import default_day_year
from aocfetch.services.validation import validate_day, validate_year
from aocfetch.util.logging import configure_logging
from aocfetch.util.paths import default_config_dir, output_path_for, working_directory

# click reports bad arguments with its own usage status
USAGE_ERROR_EXIT_CODE = typer.BadParameter.exit_code

EXIT_CODES_HELP = "\n\n".join(
    [
        "Process exit codes:",
        f"{ExitCode.OK.value} - Normal exit",
        f"{ExitCode.COOKIE_NOT_SET.value} - Cookie not set",
        f"{ExitCode.DESTINATION_EXISTS.value} - Destination file already exists",
        f"{USAGE_ERROR_EXIT_CODE} - Invalid DAY or YEAR (usage error, reported before any download)",
        f"{ExitCode.FETCH_FAILED.value} - Error connecting to the server or server error",
        f"{ExitCode.WRITE_FAILED.value} - Unable to write to output file",
        f"{ExitCode.CONFIG_INVALID.value} - Invalid configuration file",
        f"{ExitCode.NO_WORKING_DIRECTORY.value} - Unable to determine working directory",
    ]
)

app = typer.Typer(add_completion=False, help="Advent of Code input retriever")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"aoc-fetch {__version__}")
        raise typer.Exit()


def _checked(validator: Callable[[Any], int], value: Optional[str], param_hint: str) -> Optional[int]:
    if value is None:
        return None
    try:
        return validator(value)
    except InvalidArgumentError as exc:
        raise typer.BadParameter(str(exc), param_hint=param_hint) from exc


@app.command(epilog=EXIT_CODES_HELP)
def fetch(
    day: Optional[str] = typer.Argument(None, help="Which day to retrieve [1-25]", show_default="today"),
    year: Optional[str] = typer.Argument(None, help="Which year to retrieve [2015+]", show_default="this year"),
    cookie: Optional[str] = typer.Option(
        None, "--cookie", "-c", help=f"Set the session cookie stored in {default_config_dir()}"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Relative directory to store retrieved input", show_default="input/"
    ),
    config_dir: Path = typer.Option(
        default_config_dir(),
        "--config-dir",
        envvar="AOC_CONFIG_DIR",
        help="Directory holding the session cookie and optional config file",
    ),
    config_file: Optional[Path] = typer.Option(None, "--config", help="Explicit YAML/TOML/JSON config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    """Download one day's puzzle input using the stored session cookie."""

    day_value = _checked(validate_day, day, "'[DAY]'")
    year_value = _checked(validate_year, year, "'[YEAR]'")

    overrides: dict[str, dict[str, Any]] = {}
    if output is not None:
        overrides["storage"] = {"output_dir": output}
    if verbose:
        overrides["logging"] = {"level": "INFO"}

    try:
        cfg = load_config(config_file, config_dir=config_dir, overrides=overrides)
        logger = configure_logging(level=cfg.logging.level, log_path=cfg.logging.log_file)
        store = CredentialStore.in_dir(config_dir, cfg.storage.cookie_filename)

        if cookie is not None:
            store.save(cookie)
            typer.echo("Cookie stored.")
            return

        if day_value is None or year_value is None:
            today, this_year = default_day_year(utc_offset_hours=cfg.service.utc_offset_hours)
            if day_value is None:
                # outside December the current day can exceed the last puzzle day
                day_value = _checked(validate_day, str(today), "'[DAY]' (defaulted to today)")
            if year_value is None:
                year_value = this_year

        session = store.load()
        request = InputRequest(
            day=day_value,
            year=year_value,
            cookie=session,
            output=output_path_for(cfg.storage.output_dir, year=year_value, day=day_value, cwd=working_directory()),
        )
        logger.info("Fetching %s day %s", request.year, request.day)

        if not request.output.exists():
            typer.echo(f"Downloading to: {request.output}")
        fetch_input(
            request,
            base_url=cfg.service.base_url,
            timeout_seconds=cfg.service.timeout_seconds,
            user_agent=cfg.service.user_agent,
        )
    except AocFetchError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=int(exc.exit_code)) from exc

    typer.echo("Success.")


def main() -> None:
    app()


__all__ = ["EXIT_CODES_HELP", "USAGE_ERROR_EXIT_CODE", "app", "fetch", "main"]
