"""Command line entry point."""

import logging
import subprocess
from enum import StrEnum

import typer
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from .config import Settings
from .db import create_db_engine
from .exceptions import ConfigError, StorageError
from .formatting import format_packages, format_release
from .gateway import StorageGateway
from .models import FeaturedBanner, PackageInfo, ReleaseInfo

logger = logging.getLogger(__name__)

cli = typer.Typer(help="Cydia/Sileo repository index server.", no_args_is_help=True)


class RunEnv(StrEnum):
    DEV = "dev"
    PROD = "prod"


def _load_settings() -> Settings:
    try:
        return Settings.from_env()
    except ConfigError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=1) from e


def _gateway(settings: Settings) -> StorageGateway:
    return StorageGateway(create_db_engine(settings))


@cli.command()
def serve(
    env: RunEnv = typer.Option(RunEnv.PROD, help="Reflex run environment"),
    port: int | None = typer.Option(None, help="Backend port"),
):
    """Start the index server (Reflex backend only)."""
    _load_settings()
    args = ["reflex", "run", "--backend-only", "--env", str(env), "--loglevel", "info"]
    if port is not None:
        args += ["--backend-port", str(port)]
    typer.echo("Starting vapas backend")
    raise typer.Exit(code=subprocess.run(args).returncode)


@cli.command()
def release():
    """Print the Release file built from the database."""
    gateway = _gateway(_load_settings())
    try:
        typer.echo(format_release(gateway.fetch_releases()), nl=False)
    except StorageError as e:
        typer.echo(f"Storage error: {e}", err=True)
        raise typer.Exit(code=1) from e


@cli.command()
def packages():
    """Print the uncompressed Packages file built from the database."""
    settings = _load_settings()
    try:
        base_url = settings.require_base_url()
        typer.echo(format_packages(_gateway(settings).fetch_visible_packages(), base_url), nl=False)
    except (ConfigError, StorageError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


@cli.command()
def check():
    """Check configuration and database connectivity, and report row counts."""
    settings = _load_settings()
    engine = create_db_engine(settings)
    typer.echo(f"URL: {settings.base_url or '(unset, /Packages will fail)'}")
    typer.echo(f"Assets: {settings.assets_dir.resolve()}")
    try:
        with Session(engine) as session:
            for label, model in (
                ("releases", ReleaseInfo),
                ("packages", PackageInfo),
                ("featured banners", FeaturedBanner),
            ):
                count = session.scalar(select(func.count()).select_from(model))
                typer.echo(f"{label}: {count or 0}")
            visible = session.scalar(
                select(func.count()).select_from(PackageInfo).where(PackageInfo.package_visible == True)  # noqa: E712
            )
            typer.echo(f"visible packages: {visible or 0}")
    except SQLAlchemyError as e:
        logger.error(f"Database check failed: {e}")
        raise typer.Exit(code=1) from e


def main() -> None:
    """Main entry point for the vapas CLI."""
    cli()


if __name__ == "__main__":
    main()
