"""Management commands for the salon backend."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from salon.core import config
from salon.core.exceptions import UnknownCollectionError
from salon.core.logging_config import get_logger, setup_logging
from salon.db.record_store import SqlRecordStore
from salon.services.data_store import COLLECTION_NAMES, DataStore
from salon.services.finance_service import (
    PeriodKind,
    export_filename,
    export_period_csv,
    parse_period,
)
from salon.services.stats_service import (
    get_dashboard_stats,
    get_inactive_clients,
    get_upcoming_appointments,
)
from salon.utils.references import client_name, index_by_id

load_dotenv()

logger = get_logger(__name__)


def _open_store() -> DataStore:
    return DataStore.open(SqlRecordStore())


@click.group()
def cli() -> None:
    """Entry point for management commands."""
    setup_logging(
        log_level=config.get_log_level(),
        log_to_file=config.get_log_to_file(),
        use_json_format=config.get_log_json(),
    )


@cli.command("seed")
def seed() -> None:
    """Initialize every missing or corrupted collection with its seed data."""
    store = _open_store()
    for name in COLLECTION_NAMES:
        click.echo(f"{name}: {store.sources[name]} ({len(store.repository(name))} records)")


@cli.command("reset")
@click.argument("collection")
def reset(collection: str) -> None:
    """Drop the stored copy of COLLECTION and reseed it."""
    if collection not in COLLECTION_NAMES:
        raise click.ClickException(str(UnknownCollectionError(collection)))

    record_store = SqlRecordStore()
    record_store.delete(collection)
    store = DataStore.open(record_store)
    logger.info(
        "Collection reset to seed data",
        extra={
            "context": {
                "collection": collection,
                "records": len(store.repository(collection)),
            }
        },
    )
    click.echo(f"{collection} reset to seed data")


@cli.command("dashboard")
def dashboard() -> None:
    """Print dashboard statistics for today."""
    store = _open_store()
    now = store.now()
    stats = get_dashboard_stats(store, now.date())

    click.echo(f"Clients: {stats.total_clients}")
    click.echo(f"Today: {stats.appointments_today} appointments, {stats.revenue_today}")
    click.echo(
        f"This week: {stats.appointments_this_week} appointments, {stats.revenue_this_week}"
    )
    click.echo(
        f"This month: {stats.appointments_this_month} appointments, {stats.revenue_this_month}"
    )

    inactive = get_inactive_clients(store.clients.list(), now)
    click.echo(f"Inactive clients: {', '.join(c.name for c in inactive) or '-'}")
    clients_by_id = index_by_id(store.clients.list())
    upcoming = get_upcoming_appointments(store.appointments.list(), now.date())
    for appointment in upcoming:
        name = client_name(clients_by_id, appointment.client_id)
        click.echo(f"  {appointment.date} {appointment.start_time} {name}")


@cli.command("export-report")
@click.option(
    "--period",
    type=click.Choice(PeriodKind.ALL),
    default=PeriodKind.DAILY,
    show_default=True,
)
@click.option("--date", "pivot", default=None, help="Pivot date (YYYY-MM-DD). Defaults to today.")
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Target file. Defaults to financial-report-<date>.csv in the current directory.",
)
def export_report(period: str, pivot: Optional[str], output: Optional[Path]) -> None:
    """Write the financial report of a period as CSV."""
    store = _open_store()
    try:
        report_period = parse_period(period, pivot, store.today())
    except ValueError as e:
        raise click.ClickException(str(e))

    target = output or Path(export_filename(report_period))
    target.write_text(export_period_csv(store, report_period), encoding="utf-8")
    click.echo(f"Report written to {target}")


if __name__ == "__main__":
    cli()
