# cli/commands/book.py
import click
from core.config import settings
from core.exceptions import InvalidPageRequestError
from core.validators import clean_name
from core.sa.repositories.book import BookRepository
from core.sa.repositories.library import LibraryRepository
from ..utils import print_page, fail, get_database

@click.group()
def book():
    """Book management commands"""
    pass

@book.command()
@click.argument('name')
@click.option('--library-id', required=True, type=int, help='ID of the owning library')
@click.pass_context
def add(ctx, name: str, library_id: int):
    """Create a book in an existing library

    Example:
        catalog book add "Dune" --library-id 1
    """
    try:
        name = clean_name(name)
    except ValueError as e:
        fail(f"Book name {e}")

    with get_database(ctx).session_scope() as session:
        owner = LibraryRepository(session).get_by_id(library_id)
        if owner is None:
            fail(f"Library {library_id} does not exist")
        created = BookRepository(session).create(name, library=owner)
        click.echo(click.style("Created book ", fg='green') +
                   click.style(f"{created.id}", fg='cyan') +
                   click.style(f": {created.name} (library {owner.id})", fg='green'))

@book.command(name='list')
@click.option('--page', default=1, type=click.IntRange(min=1), help='Page number')
@click.option('--size', default=settings.default_page_size, type=click.IntRange(min=1, max=settings.max_page_size), help='Items per page')
@click.option('--sort', default='id', help='Sort field (id, name, library_id, created_at)')
@click.option('--order', default='asc', type=click.Choice(['asc', 'desc']), help='Sort order')
@click.pass_context
def list_books(ctx, page: int, size: int, sort: str, order: str):
    """List books one page at a time"""
    with get_database(ctx).session_scope() as session:
        try:
            books, total = BookRepository(session).find_page(
                page=page, size=size, sort_field=sort, sort_order=order
            )
        except InvalidPageRequestError as e:
            fail(e.message)
        print_page(
            books, total, page, size,
            format_item=lambda b: f"{b.id:>5}  {b.name}  [{b.library.name}]",
            item_type='books'
        )
