"""Command-line maintenance tools.

Usage:
    python -m mgnrega.cli cache-stats
    python -m mgnrega.cli clear-expired
    python -m mgnrega.cli clear-all
    python -m mgnrega.cli refresh
    python -m mgnrega.cli backfill --months 12
    python -m mgnrega.cli db-stats
    python -m mgnrega.cli seed
"""

import sys

import click

from mgnrega import __version__
from mgnrega.app_context import AppContext
from mgnrega.config.logging_config import setup_logging
from mgnrega.core.exceptions import AppError
from mgnrega.services.maintenance_service import MAX_BACKFILL_MONTHS


@click.group()
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx: click.Context):
    """MGNREGA district performance maintenance."""
    setup_logging()
    if ctx.obj is None:
        context = AppContext()
        ctx.obj = context
        ctx.call_on_close(context.close)


# -------------------------------------------------------------------------
# Cache Commands
# -------------------------------------------------------------------------


@cli.command("cache-stats")
@click.pass_obj
def cache_stats(context: AppContext):
    """Show total, active and expired cache entries."""
    stats = context.cache.stats()
    click.echo("Cache statistics:")
    click.echo(f"  Total entries:   {stats.total}")
    click.echo(f"  Active entries:  {stats.active}")
    click.echo(f"  Expired entries: {stats.expired}")


@cli.command("clear-expired")
@click.pass_obj
def clear_expired(context: AppContext):
    """Delete expired cache entries."""
    removed = context.cache.clear_expired()
    click.echo(f"Cleared {removed} expired cache entries.")


@cli.command("clear-all")
@click.pass_obj
def clear_all(context: AppContext):
    """Delete every cache entry."""
    removed = context.cache.clear_all()
    click.echo(f"Cleared all {removed} cache entries.")


# -------------------------------------------------------------------------
# Data Commands
# -------------------------------------------------------------------------


@cli.command("seed")
@click.pass_obj
def seed(context: AppContext):
    """Load the default district reference set."""
    count = context.maintenance.seed_regions()
    click.echo(f"Seeded {count} regions.")


@cli.command("refresh")
@click.pass_obj
def refresh(context: AppContext):
    """Resolve every region for the current month."""
    summary = context.maintenance.refresh_current_month()
    click.echo(f"Refresh for {summary.month:%Y-%m}:")
    click.echo(f"  Expired cache cleared: {summary.expired_cleared}")
    click.echo(f"  Succeeded: {summary.succeeded}/{summary.total}")
    click.echo(f"  Failed:    {summary.failed}")
    for region_key in summary.failures:
        click.echo(f"    - {region_key}")
    if summary.failed:
        sys.exit(1)


@cli.command("backfill")
@click.option(
    "--months",
    "-m",
    type=click.IntRange(1, MAX_BACKFILL_MONTHS),
    default=12,
    show_default=True,
    help="Months to backfill, ending with the current month",
)
@click.pass_obj
def backfill(context: AppContext, months: int):
    """Store synthetic history for every region, keeping existing rows."""
    try:
        summary = context.maintenance.backfill(months)
    except AppError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    click.echo(f"Backfill of {summary.months} months for {summary.regions} regions:")
    click.echo(f"  Inserted: {summary.inserted}")
    click.echo(f"  Skipped:  {summary.skipped}")
    click.echo(f"  Failed:   {summary.failed}")


@cli.command("db-stats")
@click.pass_obj
def db_stats(context: AppContext):
    """Show row counts, month range and cache statistics."""
    stats = context.maintenance.database_stats()
    click.echo("Database statistics:")
    click.echo(f"  Regions:             {stats.region_count}")
    click.echo(f"  Performance records: {stats.record_count}")
    if stats.earliest_month is not None:
        click.echo(f"  Date range:          {stats.earliest_month:%Y-%m} to {stats.latest_month:%Y-%m}")
    click.echo(f"  Cache entries:       {stats.cache.total} ({stats.cache.active} active, {stats.cache.expired} expired)")


if __name__ == "__main__":
    cli()
