# cli/commands/library.py
import click
from core.config import settings
from core.exceptions import InvalidPageRequestError
from core.validators import clean_name
from core.sa.repositories.library import LibraryRepository
from ..utils import print_page, fail, get_database

@click.group()
def library():
    """Library management commands"""
    pass

@library.command()
@click.argument('name')
@click.pass_context
def add(ctx, name: str):
    """Create a library

    Example:
        catalog library add "Central"
    """
    try:
        name = clean_name(name)
    except ValueError as e:
        fail(f"Library name {e}")

    with get_database(ctx).session_scope() as session:
        created = LibraryRepository(session).create(name)
        click.echo(click.style("Created library ", fg='green') +
                   click.style(f"{created.id}", fg='cyan') +
                   click.style(f": {created.name}", fg='green'))

@library.command(name='list')
@click.option('--page', default=1, type=click.IntRange(min=1), help='Page number')
@click.option('--size', default=settings.default_page_size, type=click.IntRange(min=1, max=settings.max_page_size), help='Items per page')
@click.option('--sort', default='id', help='Sort field (id, name, created_at)')
@click.option('--order', default='asc', type=click.Choice(['asc', 'desc']), help='Sort order')
@click.pass_context
def list_libraries(ctx, page: int, size: int, sort: str, order: str):
    """List libraries one page at a time"""
    with get_database(ctx).session_scope() as session:
        try:
            libraries, total = LibraryRepository(session).find_page(
                page=page, size=size, sort_field=sort, sort_order=order
            )
        except InvalidPageRequestError as e:
            fail(e.message)
        print_page(
            libraries, total, page, size,
            format_item=lambda lib: f"{lib.id:>5}  {lib.name}",
            item_type='libraries'
        )
