# cli/utils.py
import click
from typing import Iterable, Any, Callable

def print_page(
    items: Iterable[Any],
    total: int,
    page: int,
    size: int,
    format_item: Callable[[Any], str],
    item_type: str = 'items'
) -> None:
    """Print one page of a listing followed by a summary line"""
    items = list(items)
    if not items:
        click.echo(click.style(f"No {item_type} on page {page}", fg='yellow'))
    for item in items:
        click.echo(format_item(item))

    total_pages = (total + size - 1) // size
    click.echo("\n" + click.style("Page ", fg='blue') +
               click.style(f"{page}/{max(total_pages, 1)}", fg='cyan') +
               click.style(f" ({total} {item_type})", fg='blue'))

def fail(message: str) -> None:
    """Print an error in red and exit with status 1"""
    click.echo(click.style(message, fg='red'), err=True)
    raise click.exceptions.Exit(1)

def get_database(ctx: click.Context):
    return ctx.find_root().obj['db']
