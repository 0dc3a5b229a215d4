import click
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..target import supported_targets
from .common import load_conan

@click.command()
@click.option("--supported", is_flag=True, help="List every os/arch combination conanbuild knows instead.")
@click.pass_context
@handle_exceptions
def targets(ctx, supported):
    """List the targets conan build info was found for."""
    if supported:
        for os_name, arch, triple in supported_targets():
            click.echo(f"{os_name:<8} {arch:<7} {triple}")
        return

    conan = load_conan(ctx)
    if not len(conan.build_info_set):
        logger.warning("No conanbuildinfo.json found. Did you run 'conan install'?")
        return
    for is_host, info in conan.build_info_set.all_targets(conan.host):
        marker = "*" if is_host else " "
        click.echo(f"{marker} {info.target()}: {info.path}")
