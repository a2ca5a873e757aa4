"""Command line entry point for previewing slugs.

Usage:
    sluggable preview "Hello, World!"
    sluggable preview "Hello, World!" --max-length 5 --reserved admin
    sluggable preview "Hello, World!" --database-url sqlite:///app.db --table posts --column slug
"""

import os
from pathlib import Path
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from sqlalchemy import create_engine, inspect
from sqlalchemy.ext.automap import automap_base
from sqlalchemy.orm import Session

from sluggable.constants import DATABASE_URL_ENV
from sluggable.models.capabilities import Sluggable
from sluggable.services.config_resolver import ConfigResolver
from sluggable.services.slug_service import SlugService
from sluggable.stores.sqlalchemy_store import SQLAlchemyRecordStore
from sluggable.utils.config_loader import load_settings
from sluggable.utils.logging import setup_logging

app = typer.Typer(help="Generate URL slugs the way sluggable records get them.")


@app.callback()
def main() -> None:
    """Slug tooling."""


def _reflect_record_type(session: Session, table: str, column: str) -> type[Sluggable]:
    """Map an existing table to a Sluggable class declaring ``column``."""
    bind = session.get_bind()
    inspector = inspect(bind)

    if not inspector.has_table(table):
        raise typer.BadParameter(f"Table not found: {table}")
    if not inspector.get_pk_constraint(table).get("constrained_columns"):
        raise typer.BadParameter(f"Table has no primary key: {table}")
    if column not in {info["name"] for info in inspector.get_columns(table)}:
        raise typer.BadParameter(f"Column not found: {table}.{column}")

    base = automap_base(cls=Sluggable)

    class ReflectedRecord(base):
        __tablename__ = table

        @classmethod
        def sluggable(cls) -> list[str]:
            return [column]

    base.prepare(autoload_with=bind)
    return ReflectedRecord


@app.command()
def preview(
    text: Annotated[str, typer.Argument(help="Text to turn into a slug")],
    config_path: Annotated[
        Path | None, typer.Option("--config", "-c", help="Settings YAML file")
    ] = None,
    separator: Annotated[str | None, typer.Option(help="Word separator")] = None,
    max_length: Annotated[int | None, typer.Option(help="Truncate before suffixing")] = None,
    reserved: Annotated[
        list[str] | None, typer.Option("--reserved", "-r", help="Reserved slug (repeatable)")
    ] = None,
    database_url: Annotated[
        str | None, typer.Option(help=f"Database to check uniqueness against (${DATABASE_URL_ENV})")
    ] = None,
    table: Annotated[str | None, typer.Option(help="Table holding existing slugs")] = None,
    column: Annotated[str, typer.Option(help="Slug column")] = "slug",
) -> None:
    """Print the slug generated for TEXT."""
    load_dotenv()

    settings = load_settings(config_path) if config_path else None
    if settings is not None:
        setup_logging(settings.logging)

    resolver = ConfigResolver(defaults=settings.defaults if settings else None)

    overrides: dict[str, Any] = {}
    if separator is not None:
        overrides["separator"] = separator
    if max_length is not None:
        overrides["maxLength"] = max_length
    if reserved:
        overrides["reserved"] = reserved

    database_url = database_url or os.getenv(DATABASE_URL_ENV)

    if database_url and table:
        with Session(create_engine(database_url)) as session:
            record_type = _reflect_record_type(session, table, column)
            service = SlugService(SQLAlchemyRecordStore(session), resolver=resolver)
            slug = service.create_slug(record_type, column, text, overrides)
    else:
        overrides["unique"] = False
        service = SlugService(SQLAlchemyRecordStore(Session()), resolver=resolver)
        slug = service.create_slug(_PreviewRecord, column, text, overrides)

    typer.echo(slug)


class _PreviewRecord(Sluggable):
    """Stand-in record for previews without a database."""

    @classmethod
    def sluggable(cls) -> list[str]:
        return ["slug"]


if __name__ == "__main__":
    app()
