import logging
import typer

from seedmerge.clock import SystemClock
from seedmerge.config import Config
from seedmerge.errors import SeedMergeError
from seedmerge.modules import MergeAction, run_merge
from seedmerge.storage import LocalFileStorage

logger = logging.getLogger(__name__)

def merge_seed(
    seed: str = typer.Option(Config.SEED_FILE, "--seed", "-s", help="Seed file (JSON array of servers)"),
    registry: str = typer.Option(Config.REGISTRY_FILE, "--registry", "-r", help="Registry file to update in place"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Report what would change without writing"),
):
    """Merge seed servers into the registry, skipping names already present."""
    typer.echo(f"🔄 Merging {seed} into {registry}...\n")

    try:
        result = run_merge(seed, registry, LocalFileStorage(), SystemClock(), dry_run=dry_run)
    except SeedMergeError as e:
        logger.error(f"Merge failed: {e}", exc_info=logger.isEnabledFor(logging.DEBUG))
        typer.echo(f"❌ Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"📄 Loaded {len(result.outcomes)} servers from {seed}")
    typer.echo(f"📦 Registry had {result.total - result.added} servers\n")

    for outcome in result.outcomes:
        if outcome.action == MergeAction.ADDED:
            typer.echo(f"✓ added: {outcome.name} (v{outcome.version})")
        else:
            typer.echo(f"⚠️  skipped: {outcome.name} (already registered)")

    typer.echo("\n✅ Done" + (" (dry run, nothing written)" if dry_run else "") + ":")
    typer.echo(f"   added:   {result.added}")
    typer.echo(f"   skipped: {result.skipped}")
    typer.echo(f"   total:   {result.total} servers registered")
