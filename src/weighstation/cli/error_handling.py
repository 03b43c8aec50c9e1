"""CLI error handling helpers."""

import click

from weighstation.domain.errors import DomainError


def echo_domain_error(error: DomainError | ValueError) -> None:
    """Render a domain error without leaving the interactive session."""
    click.echo(f"Error: {error}", err=True)
