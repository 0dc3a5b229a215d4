import click
from ..cli_logger import logger
from ..decorators import handle_exceptions
from .common import load_conan

@click.command()
@click.argument("packages", nargs=-1)
@click.option("--optional", "-o", "optional_packages", multiple=True,
              help="Package to link only if conan installed it. Can be repeated.")
@click.option("--libcxx", is_flag=True, help="Also link the C++ standard library from the compiler settings.")
@click.pass_context
@handle_exceptions
def link(ctx, packages, optional_packages, libcxx):
    """Print cargo link directives for PACKAGES of the host target."""
    conan = load_conan(ctx)
    conan.mark_rerun_if_changed()
    if packages:
        conan.depends_on(packages)
    if optional_packages:
        depends_on = conan.depends_on_optional(optional_packages)
        if depends_on.is_empty():
            logger.debug(f"None of {', '.join(optional_packages)} installed for {conan.host}")
    if libcxx:
        if conan.depends_on_libcxx().is_empty():
            logger.warning(f"No compiler.libcxx setting for {conan.host}, not linking a C++ runtime.")
