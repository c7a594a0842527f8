# cli/commands/serve.py
import click
import uvicorn
from core.config import settings

@click.command()
@click.option('--host', default=settings.api_host, help='Interface to bind')
@click.option('--port', default=settings.api_port, type=int, help='Port to listen on')
@click.option('--reload/--no-reload', default=False, help='Restart on code changes')
def serve(host: str, port: int, reload: bool):
    """Run the REST API"""
    click.echo(click.style(f"Serving on http://{host}:{port}", fg='blue'))
    uvicorn.run("api.main:app", host=host, port=port, reload=reload, log_level=settings.log_level.lower())
