"""Interactive operator session."""

import shlex

import click

from weighstation.cli.error_handling import echo_domain_error
from weighstation.cli.formatting import render_draft, render_manifest, render_table
from weighstation.domain.errors import DomainError
from weighstation.station import WeighStation

FIELD_ALIASES = {
    "plate": "plate_number",
    "gross": "gross_weight_kg",
    "loaded": "gross_weight_kg",
    "empty": "empty_weight_kg",
    "date": "date",
    "charge": "charge",
    "check": "check_number",
}

HELP_TEXT = """Commands:
  list                 Show the log (filtered by the current search)
  set FIELD VALUE      Type into the form; FIELD is one of
                       plate, gross, empty, date, charge, check
  draft                Show the form
  submit               Save the form as a new entry or over the edited one
  add                  Clear the form to start a new entry
  edit                 Load the selected entry into the form
  delete               Delete the selected entry
  select ID            Select an entry (a unique ID prefix is enough)
  clear-selection      Clear the selection
  search [TEXT]        Filter the log; no text clears the search
  reload               Restore the initial log and clear everything
  print                Print the displayed entries
  help                 Show this help
  quit                 Leave the session"""


def _resolve_entry_id(station: WeighStation, text: str) -> str:
    """Expand a unique ID prefix to the full entry ID.

    Anything that is not a unique prefix is returned unchanged.
    """
    ids = [entry.id for entry in station.entries]
    if text in ids:
        return text
    matches = [entry_id for entry_id in ids if entry_id.startswith(text)]
    return matches[0] if len(matches) == 1 else text


def run_command(station: WeighStation, command: str, args: list[str]) -> bool:
    """Run one shell command. Returns False when the session should end."""
    if command in ("quit", "exit"):
        return False

    if command == "help":
        click.echo(HELP_TEXT)
    elif command == "list":
        for line in render_table(station):
            click.echo(line)
    elif command == "draft":
        click.echo(render_draft(station.draft, station.net_weight_preview))
    elif command == "set":
        if not args:
            click.echo("Usage: set FIELD VALUE", err=True)
            return True
        field = FIELD_ALIASES.get(args[0].lower(), args[0])
        station.set_field(field, " ".join(args[1:]))
    elif command == "submit":
        entry = station.submit()
        if entry is None:
            if not station.draft.plate_number.strip():
                click.echo("Error: Plate number is required", err=True)
            else:
                click.echo("Error: Entry was not saved", err=True)
        else:
            click.echo(f"Saved entry {entry.id} ({entry.plate_number})")
    elif command == "add":
        station.create_mode()
    elif command == "edit":
        entry = station.edit_selected()
        if entry is None:
            click.echo("No entry selected.")
        else:
            click.echo(f"Editing entry {entry.id} ({entry.plate_number})")
    elif command == "delete":
        entry_id = station.selected_id
        if station.delete_selected():
            click.echo(f"Deleted entry {entry_id}")
        else:
            click.echo("No entry selected.")
    elif command == "select":
        if not args:
            click.echo("Usage: select ID", err=True)
            return True
        station.row_clicked(_resolve_entry_id(station, args[0]))
    elif command == "clear-selection":
        station.clear_selection()
    elif command == "search":
        station.set_query(" ".join(args))
    elif command == "reload":
        station.reload()
    elif command == "print":
        for line in render_manifest(station):
            click.echo(line)
    else:
        click.echo(f"Unknown command '{command}'. Type 'help' for a list.", err=True)
    return True


@click.command("shell")
@click.pass_context
def shell(ctx):
    """Start an interactive weighing session.

    The log starts with the sample entries and lives only as long as the
    session.
    """
    station = WeighStation(ctx.obj["db"])
    changed = []
    unsubscribe = station.subscribe(lambda _station: changed.append(True))

    click.echo("Type 'help' for commands.")
    for line in render_table(station):
        click.echo(line)

    try:
        while True:
            try:
                line = click.prompt("weigh", default="", show_default=False, prompt_suffix="> ")
            except click.Abort:
                break

            try:
                words = shlex.split(line)
            except ValueError as e:
                click.echo(f"Error: {e}", err=True)
                continue
            if not words:
                continue

            command, args = words[0].lower(), words[1:]
            changed.clear()
            try:
                if not run_command(station, command, args):
                    break
            except DomainError as e:
                echo_domain_error(e)
                continue

            # Redraw whatever the store now shows.
            if changed and command == "set":
                click.echo(render_draft(station.draft, station.net_weight_preview))
            elif changed:
                for table_line in render_table(station):
                    click.echo(table_line)
    finally:
        unsubscribe()
        station.close()


def register_commands(cli):
    """Register shell command with main CLI."""
    cli.add_command(shell)
