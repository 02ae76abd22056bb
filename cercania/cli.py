"""Main CLI interface for Cercanía."""

import json
import logging

import click
import uvicorn
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .affirmations import list_affirmations
from .database import get_engine
from .errors import InvalidArgument
from .logging import setup_logging
from .models import (
    VALID_TEST_TYPES,
    Affirmation,
    Base,
    Party,
    PartyPosition,
    PartyProfile,
)
from .schemas import AffirmationFilters
from .store import Store

logger = logging.getLogger(__name__)

COLLECTIONS = {
    "affirmations": Affirmation,
    "parties": Party,
    "profiles": PartyProfile,
    "positions": PartyPosition,
}


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def main(verbose):
    """Cercanía CLI - Parties, their positions and the closeness test."""
    setup_logging()
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@main.group()
def db():
    """Commands for managing the database schema."""
    pass


@main.group()
def affirmations():
    """Commands for closeness test affirmations."""
    pass


@db.command("create")
def db_create():
    """Create all tables that do not exist yet."""
    Base.metadata.create_all(get_engine())
    click.echo("✅ Tables created")


@main.command("load")
@click.argument("collection", type=click.Choice(sorted(COLLECTIONS)))
@click.option(
    "--file",
    "file_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="JSON file holding an array of records",
)
def load(collection, file_path):
    """Bulk-load records of a collection from a JSON file."""
    model = COLLECTIONS[collection]

    with open(file_path, encoding="utf-8") as f:
        records = json.load(f)

    if not isinstance(records, list):
        click.echo("❌ The file must contain a JSON array of records")
        raise SystemExit(1)

    if not all(isinstance(record, dict) for record in records):
        click.echo("❌ Every record must be a JSON object")
        raise SystemExit(1)

    if model is Affirmation:
        invalid = [r for r in records if r.get("test_type") not in VALID_TEST_TYPES]
        if invalid:
            click.echo(f"❌ {len(invalid)} records have an unsupported test_type")
            raise SystemExit(1)

    try:
        with Session(get_engine()) as session:
            session.add_all(model(**record) for record in records)
            session.commit()
    except TypeError as e:
        click.echo(f"❌ Invalid record for {collection}: {e}")
        raise SystemExit(1)
    except IntegrityError as e:
        click.echo(f"❌ Invalid record for {collection}: {e.orig}")
        raise SystemExit(1)

    logger.info(f"Loaded {len(records)} {collection} from {file_path}")
    click.echo(f"✅ Loaded {len(records)} {collection}")


@affirmations.command("list")
@click.option("--test-type", type=int, help="Test tier: 1 (short) or 2 (long)")
@click.option("--axis", help="Only affirmations on this axis")
@click.option("--criterion", help="Only affirmations with this criterion")
def affirmations_list(test_type, axis, criterion):
    """Print affirmations in test order."""
    filters = AffirmationFilters(test_type=test_type, axis=axis, criterion=criterion)

    with Session(get_engine()) as session:
        try:
            rows = list_affirmations(Store(session), filters)
        except InvalidArgument as e:
            click.echo(f"❌ {e.message}")
            raise SystemExit(1)

    for row in rows:
        click.echo(f"[{row.test_type}] {row.axis} / {row.criterion}: {row.question_text}")
    click.echo(f"{len(rows)} affirmations")


@main.command("serve")
@click.option("--host", default="0.0.0.0", help="Host to bind the server to")
@click.option("--port", default=8000, help="Port to bind the server to")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
def serve(host, port, reload):
    """Start the FastAPI web server."""

    click.echo(f"Starting Cercanía API server on http://{host}:{port}")
    if reload:
        click.echo("Auto-reload enabled for development")

    uvicorn.run("cercania.api:app", host=host, port=port, reload=reload, log_level="info")


if __name__ == "__main__":
    main()
