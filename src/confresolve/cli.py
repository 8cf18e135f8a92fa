"""Command-line entry points for inspecting interceptor resolution."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from confresolve.config import ConfigError, load_settings
from confresolve.errors import InterceptorError
from confresolve.interceptor import DefaultConfigurationReaderInterceptor
from confresolve.util.logging import configure_logging

app = typer.Typer(add_completion=False, help="Inspect how configuration values are resolved")


@app.callback()
def main_options(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Settings file (YAML/TOML/JSON)"),
    home: Optional[Path] = typer.Option(None, "--home", help="Home folder overriding settings and environment"),
) -> None:
    """Load settings and build the interceptor shared by all commands."""

    overrides = {"home_folder": str(home)} if home else None
    try:
        settings = load_settings(config, overrides=overrides)
    except ConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    logger = configure_logging(level=settings.log_level)
    logger.debug("Using settings %s", settings.model_dump())
    ctx.obj = DefaultConfigurationReaderInterceptor.from_settings(settings)


def _interceptor(ctx: typer.Context) -> DefaultConfigurationReaderInterceptor:
    return ctx.obj


@app.command()
def filename(ctx: typer.Context, name: str = typer.Argument(..., help="File name to resolve")) -> None:
    """Print the normalized absolute path for a file name."""

    typer.echo(_interceptor(ctx).create_filename(name))


@app.command("property")
def property_(ctx: typer.Context, key: str = typer.Argument(..., help="Property key")) -> None:
    """Print the override for a property key; exit 1 when it has none."""

    value = _interceptor(ctx).get_property_override(key)
    if value is None:
        typer.echo(f"No override for {key}", err=True)
        raise typer.Exit(code=1)
    typer.echo(value)


@app.command()
def resource(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Resource identifier, e.g. file://conf/app.yaml"),
    show: bool = typer.Option(False, "--show", help="Print the resource contents"),
) -> None:
    """Describe the resource an identifier converts to."""

    try:
        handle = _interceptor(ctx).create_resource(url, None)
    except InterceptorError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{type(handle).__name__} {handle.qualified_path} exists={handle.exists}")
    if show:
        typer.echo(handle.read_text())


@app.command("load-class")
def load_class(ctx: typer.Context, name: str = typer.Argument(..., help="Fully-qualified class name")) -> None:
    """Resolve a class by name and print its qualified name."""

    try:
        cls = _interceptor(ctx).load_class(name)
    except InterceptorError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{cls.__module__}.{cls.__qualname__}")


@app.command()
def tempdir(ctx: typer.Context) -> None:
    """Print the temporary storage directory."""

    typer.echo(_interceptor(ctx).get_temporary_storage_directory())


@app.command()
def home(ctx: typer.Context) -> None:
    """Print the home folder."""

    typer.echo(_interceptor(ctx).get_home_folder().to_file())


def main() -> None:
    app()


__all__ = ["main", "app"]
