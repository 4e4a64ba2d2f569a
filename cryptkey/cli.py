"""Command line interface for inspecting key configuration."""

from __future__ import annotations

from typing import Optional

import typer

from cryptkey.classifier import classify
from cryptkey.config import load_config
from cryptkey.errors import CryptKeyError
from cryptkey.resolver import resolve_key

app = typer.Typer(help="Inspect PEM key configuration values")


@app.callback()
def main() -> None:
    """cryptkey CLI entry point."""
    pass


@app.command("inspect")
def inspect_key(
    key: Optional[str] = typer.Argument(
        None, help="PEM text or key file path (default: from configuration)"
    ),
    pass_phrase: Optional[str] = typer.Option(None, help="Pass phrase for the key file"),
    check_permissions: Optional[bool] = typer.Option(
        None, help="Audit key file permissions (default: from configuration)"
    ),
    config: Optional[str] = typer.Option(None, help="Path to a cryptkey YAML file"),
) -> None:
    """
    Resolve a key value and report what it resolved to.

    Prints whether the key is held in memory or read from a file, the
    normalized file path and any permission advisory.

    Example:
        cryptkey inspect /etc/keys/private.pem
        cryptkey inspect --no-check-permissions file:///etc/keys/public.pem
    """
    settings = load_config(config)
    key = key or settings.key
    if not key:
        typer.secho("No key given and none configured", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    if pass_phrase is None:
        pass_phrase = settings.pass_phrase
    if check_permissions is None:
        check_permissions = settings.check_permissions

    try:
        resolution = resolve_key(
            key,
            pass_phrase=pass_phrase,
            check_permissions=check_permissions,
            pattern=settings.key_pattern,
        )
    except CryptKeyError as exc:
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=1)

    handle = resolution.handle
    if handle.is_in_memory:
        typer.echo("source: memory")
        return

    typer.echo("source: file")
    typer.echo(f"path: {handle.key_path}")
    typer.echo(f"pass phrase: {'set' if handle.pass_phrase is not None else 'none'}")
    if resolution.advisory is not None:
        typer.secho(f"advisory: {resolution.advisory.message}", fg=typer.colors.YELLOW)


@app.command("classify")
def classify_value(value: str) -> None:
    """Print whether VALUE is literal key text or a path."""
    try:
        typer.echo(classify(value).value)
    except CryptKeyError as exc:
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
