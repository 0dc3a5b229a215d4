import click
import importlib.metadata
from ..cli_logger import logger

@click.command()
def version():
    """Print the version of conanbuild."""
    try:
        ver = importlib.metadata.version("conanbuild")
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of conanbuild. Is it installed correctly?")
        return
    click.echo(f"conanbuild {ver}")
