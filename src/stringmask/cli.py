"""Command-line interface for stringmask."""

from __future__ import annotations

import json
from typing import Optional

import typer

from stringmask.config import get_settings
from stringmask.logging_utils import configure_logging
from stringmask.masker import StringMasker
from stringmask.models.mask import MaskOptions
from stringmask.tokens import DEFAULT_TOKENS

app = typer.Typer(help="Format and validate values against string masks.")

_REVERSE_OPTION = typer.Option(
    None,
    "--reverse/--forward",
    help="Scan right to left (defaults to STRINGMASK_REVERSE).",
)
_DEFAULTS_OPTION = typer.Option(
    None,
    "--defaults/--no-defaults",
    help="Backfill unmet required tokens with their default value.",
)


def _build_masker(pattern: str, reverse: Optional[bool], use_defaults: Optional[bool]) -> StringMasker:
    settings = get_settings()
    options = MaskOptions(
        reverse=settings.reverse if reverse is None else reverse,
        use_defaults=settings.use_defaults if use_defaults is None else use_defaults,
    )
    return StringMasker(pattern, options)


@app.callback()
def setup() -> None:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)


@app.command("apply")
def apply_mask(
    pattern: str = typer.Argument(..., help="Mask pattern, e.g. '000-0000'."),
    value: str = typer.Argument(..., help="Raw value to format."),
    reverse: Optional[bool] = _REVERSE_OPTION,
    use_defaults: Optional[bool] = _DEFAULTS_OPTION,
) -> None:
    """Print the value formatted with the mask."""

    typer.echo(_build_masker(pattern, reverse, use_defaults).apply(value))


@app.command("validate")
def validate_mask(
    pattern: str = typer.Argument(..., help="Mask pattern."),
    value: str = typer.Argument(..., help="Raw value to check."),
    reverse: Optional[bool] = _REVERSE_OPTION,
    use_defaults: Optional[bool] = _DEFAULTS_OPTION,
) -> None:
    """Report whether the value satisfies the mask; exits with status 1 when it does not."""

    if _build_masker(pattern, reverse, use_defaults).validate(value):
        typer.echo("valid")
        return
    typer.secho("invalid", fg=typer.colors.RED)
    raise typer.Exit(code=1)


@app.command("process")
def process_mask(
    pattern: str = typer.Argument(..., help="Mask pattern."),
    value: str = typer.Argument(..., help="Raw value to format."),
    reverse: Optional[bool] = _REVERSE_OPTION,
    use_defaults: Optional[bool] = _DEFAULTS_OPTION,
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print output JSON."),
) -> None:
    """Print the formatted value and validity flag as JSON."""

    outcome = _build_masker(pattern, reverse, use_defaults).process(value)
    typer.echo(json.dumps(outcome.model_dump(), indent=2 if pretty else None, sort_keys=pretty))


@app.command("tokens")
def list_tokens() -> None:
    """List the characters recognised by the default token registry."""

    for character, token in DEFAULT_TOKENS.items():
        if token.escape:
            typer.echo(f"{character}  escape")
            continue
        flags = [name for name in ("optional", "recursive") if getattr(token, name)]
        if token.default_value is not None:
            flags.append(f"default={token.default_value}")
        if token.transform is not None:
            flags.append("transform")
        pattern = token.pattern.pattern if token.pattern is not None else ""
        typer.echo(f"{character}  {pattern}  {' '.join(flags)}".rstrip())


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the ``stringmask`` console script."""
    app(prog_name="stringmask", args=argv)


if __name__ == "__main__":
    main()
