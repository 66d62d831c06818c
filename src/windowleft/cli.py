"""Command line interface for windowleft using Typer."""

from __future__ import annotations

import json
import logging
import re
import sys
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, TextIO

import typer
from pydantic import ValidationError

from ._typer import bad_parameter
from .config import Settings, load_settings
from .core import InvalidArgumentError, window_left, window_left_while_item
from .export import windows_to_array
from .utils.logging import get_logger

app = typer.Typer(help="Left-aligned sliding windows over whitespace separated tokens")
logger = logging.getLogger(__name__)


def _parse_override_value(raw: str) -> object:
    lower = raw.lower()
    if lower in {"true", "false"}:
        return lower == "true"
    if lower in {"null", "none"}:
        return None
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        pass
    if raw.startswith("[") or raw.startswith("{"):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            raise typer.BadParameter(f"invalid JSON override value: {raw}") from None
    return raw


def _ensure_path(settings: Settings, keys: List[str]) -> None:
    current: object = settings
    for key in keys[:-1]:
        if not hasattr(current, key):
            raise typer.BadParameter(f"unknown configuration key: {'.'.join(keys)}")
        current = getattr(current, key)
    if not hasattr(current, keys[-1]):
        raise typer.BadParameter(f"unknown configuration key: {'.'.join(keys)}")


def _apply_override(data: Dict[str, object], keys: List[str], value: object) -> None:
    target = data
    for key in keys[:-1]:
        existing = target.get(key)
        if not isinstance(existing, dict):
            existing = {}
            target[key] = existing
        target = existing
    target[keys[-1]] = value


def _iter_tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _to_float(tokens: Iterable[str]) -> Iterator[float]:
    for token in tokens:
        try:
            yield float(token)
        except ValueError:
            bad_parameter(f"non-numeric token {token!r}", param_hint="'--output'")


@app.callback()
def init(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        dir_okay=False,
        file_okay=True,
        exists=False,
        help="Path to a YAML or JSON configuration file.",
    ),
    set_overrides: List[str] = typer.Option(
        [],
        "--set",
        help="Override configuration values using dotted paths, e.g. window.size=3",
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level, overrides logging.level"
    ),
) -> None:
    """Initialise the Typer context with validated settings."""

    if config is not None and not config.exists():
        raise typer.BadParameter(f"configuration file not found: {config}")

    try:
        settings = load_settings(config) if config else Settings()
    except (RuntimeError, TypeError, json.JSONDecodeError, ValidationError) as exc:
        raise typer.BadParameter(f"failed to load configuration: {exc}") from exc

    if set_overrides:
        data = settings.model_dump()
        for override in set_overrides:
            if "=" not in override:
                raise typer.BadParameter(
                    "overrides must be of the form --set section.key=value"
                )
            key, raw_value = override.split("=", 1)
            if not key:
                raise typer.BadParameter("override key cannot be empty")
            keys = key.split(".")
            _ensure_path(settings, keys)
            value = _parse_override_value(raw_value)
            _apply_override(data, keys, value)
        try:
            settings = Settings.model_validate(data)
        except ValidationError as exc:
            raise typer.BadParameter(f"invalid configuration override: {exc}") from exc

    level = log_level or settings.logging.level
    try:
        get_logger("windowleft", level=level)
    except ValueError as exc:
        bad_parameter(str(exc), param_hint="'--log-level'", cause=exc)

    ctx.obj = settings


@app.command()
def window(
    ctx: typer.Context,
    input: Optional[Path] = typer.Argument(
        None, help="Token file to read; stdin when omitted or '-'"
    ),
    size: Optional[int] = typer.Option(None, "--size", "-n", help="Window size"),
    stop_at: Optional[str] = typer.Option(
        None,
        "--stop-at",
        help="Regular expression; a window closes on the first matching token",
    ),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help="text or json"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write a padded numeric array to this .npy file"
    ),
) -> None:
    """Print the left-aligned windows of the tokens in ``input``.

    Windows are sized by ``--size`` (or ``window.size`` from the settings).
    With ``--stop-at`` a window keeps extending until a token matching the
    pattern enters it instead.  The trailing windows shrink one token at a
    time as the input runs out.  Text output joins each window with the
    configured separator; JSON output writes one array per line.
    """

    cfg: Settings = ctx.obj

    if size is not None and stop_at is not None:
        bad_parameter("--size and --stop-at are mutually exclusive", param_hint="'--stop-at'")

    fmt = fmt or cfg.output.format
    if fmt not in {"text", "json"}:
        bad_parameter(f"unknown format {fmt!r}, expected 'text' or 'json'", param_hint="'--format'")

    pattern = stop_at if size is None else None
    if pattern is None and size is None:
        pattern = cfg.window.stop_pattern

    from_stdin = input is None or str(input) == "-"
    if from_stdin:
        stream: TextIO = sys.stdin
    else:
        if not input.is_file():
            bad_parameter(f"input file not found: {input}", param_hint="'INPUT'")
        stream = open(input, "r", encoding="utf8")

    try:
        tokens: Iterable = _iter_tokens(stream)
        if output is not None:
            tokens = _to_float(tokens)

        if pattern is not None:
            try:
                regex = re.compile(pattern)
            except re.error as exc:
                bad_parameter(f"invalid pattern: {exc}", param_hint="'--stop-at'", cause=exc)
            logger.info("windowing tokens until %r", pattern)
            windows = window_left_while_item(
                tokens, lambda token: not regex.search(str(token))
            )
        else:
            effective = cfg.window.size if size is None else size
            logger.info("windowing tokens with size=%d", effective)
            try:
                windows = window_left(tokens, effective)
            except InvalidArgumentError as exc:
                bad_parameter(str(exc), param_hint="'--size'", cause=exc)

        if output is not None:
            arr = windows_to_array(windows, save_npy=output)
            typer.echo(f"saved {arr.shape[0]} windows to {output}")
            return

        for win in windows:
            if fmt == "json":
                typer.echo(json.dumps(list(win)))
            else:
                typer.echo(cfg.output.separator.join(str(item) for item in win))
    finally:
        if not from_stdin:
            stream.close()


def main() -> None:
    """Execute the Typer application."""

    app()


if __name__ == "__main__":
    main()
