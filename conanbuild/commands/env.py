import click
from ..cli_logger import logger
from ..decorators import handle_exceptions
from .common import load_conan

@click.command()
@click.option("--output-dir", "-o", default=None, type=click.Path(file_okay=False),
              help="Directory for env.sh and env.ps1 (default: project directory).")
@click.pass_context
@handle_exceptions
def env(ctx, output_dir):
    """Write env.sh and env.ps1 exposing the build info of every target."""
    conan = load_conan(ctx)
    sh_path, ps1_path = conan.generate_env_source(output_dir)
    logger.success(f"Wrote {sh_path} and {ps1_path}")
