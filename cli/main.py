# cli/main.py
import logging
import click
from core.config import settings
from core.sa.database import Database
from .commands import db, library, book, serve

@click.group()
@click.option('--database-url', envvar='DATABASE_URL', default=None,
              help='Database connection string (defaults to DATABASE_URL)')
@click.option('--verbose/--no-verbose', default=False, help='Log SQL and debug output')
@click.pass_context
def cli(ctx, database_url, verbose):
    """Library catalog CLI"""
    logging.basicConfig(level=logging.DEBUG if verbose else settings.log_level)
    ctx.ensure_object(dict)
    ctx.obj['db'] = Database(database_url)

cli.add_command(db)
cli.add_command(library)
cli.add_command(book)
cli.add_command(serve)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
