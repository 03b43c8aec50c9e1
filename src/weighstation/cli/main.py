"""Main CLI entry point."""

from pathlib import Path
from typing import Optional

import click

from weighstation.config import Config
from weighstation.database.factories import create_memory_database
from weighstation.utils.logger import setup_logger, LEVELS

# Import and register all commands at module level
from weighstation.cli.commands import print_cmd, shell


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(list(LEVELS), case_sensitive=False),
    default=Config.LOG_LEVEL,
    help="Logging level (overrides WEIGHSTATION_LOG_LEVEL environment variable)",
    envvar="WEIGHSTATION_LOG_LEVEL",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write log messages to this file (overrides WEIGHSTATION_LOG_FILE)",
    envvar="WEIGHSTATION_LOG_FILE",
)
@click.version_option(Config.VERSION, prog_name="weighstation")
@click.pass_context
def cli(ctx, log_level: str, log_file: Optional[Path]):
    """Caravan Freight Control - weigh station log.

    Record loaded and empty weights of vehicles, with the net weight worked
    out for you, and search the log by any field.
    """
    ctx.ensure_object(dict)
    setup_logger(level=LEVELS[log_level.upper()], log_file=log_file)

    # Create the session database only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_memory_database()
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db


# Register all commands
shell.register_commands(cli)
print_cmd.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
