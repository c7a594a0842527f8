# cli/commands/db.py
import click
from ..utils import get_database

@click.group()
def db():
    """Database schema commands"""
    pass

@db.command()
@click.pass_context
def init(ctx):
    """Create the libraries and books tables"""
    get_database(ctx).init_db()
    click.echo(click.style("Database initialized", fg='green'))

@db.command()
@click.confirmation_option(prompt='This deletes every library and book. Continue?')
@click.pass_context
def drop(ctx):
    """Drop the libraries and books tables"""
    get_database(ctx).drop_db()
    click.echo(click.style("Database dropped", fg='yellow'))
