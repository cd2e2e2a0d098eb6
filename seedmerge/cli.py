import typer
import logging
import sys
from seedmerge.commands import merge
from seedmerge.config import Config
from seedmerge.logging import setup_logger

app = typer.Typer()

logger = logging.getLogger(__name__)

# Set by the global --debug option
debug_mode = False

def setup_logging(debug_mode: bool = False) -> logging.Logger:
    """Configure the package logger based on debug mode."""
    log_level = logging.DEBUG if debug_mode else logging.getLevelName(Config.LOG_LEVEL)
    return setup_logger("seedmerge", log_level, force=True)

app.command("merge")(merge.merge_seed)

# Global options callback
@app.callback()
def callback(
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
):
    """seedmerge - merge seed servers into an MCP registry file."""
    global debug_mode
    debug_mode = debug
    try:
        Config.validate()
    except ValueError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1)
    setup_logging(debug)
    logger.debug("Debug mode enabled")

def main():
    """Console entry point: unexpected errors exit with status 1."""
    try:
        app()
    except Exception as e:
        if debug_mode:
            logger.exception(f"Unhandled exception: {e}")
        else:
            logger.error(f"Error: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
