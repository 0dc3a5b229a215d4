import click
from ..decorators import handle_exceptions
from .common import load_conan

@click.command()
@click.argument("package", required=False)
@click.pass_context
@handle_exceptions
def libs(ctx, package):
    """Show how each library of the host target will be linked."""
    info = load_conan(ctx).build_info()
    packages = [package] if package else sorted(info.all_deps())
    for name in packages:
        click.echo(f"{name}:")
        for lib in info.libs_for(name):
            source = "found" if lib in info.libs else "not found, default"
            click.echo(f"  {lib}: {info.link_kind(lib).value} ({source})")
