"""Print command."""

import click

from weighstation.cli.formatting import render_manifest
from weighstation.station import WeighStation


@click.command("print")
@click.option("--query", "-q", default="", help="Only print entries matching this search text")
@click.pass_context
def print_manifest(ctx, query: str):
    """Print the manifest of the sample log.

    Examples:
        weighstation print
        weighstation print --query chk-0092
    """
    station = WeighStation(ctx.obj["db"])
    try:
        station.set_query(query)
        for line in render_manifest(station):
            click.echo(line)
    finally:
        station.close()


def register_commands(cli):
    """Register print command with main CLI."""
    cli.add_command(print_manifest)
