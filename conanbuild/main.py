import click
from .commands import config, env, libs, link, log, targets, version


@click.group()
@click.option("--path", "-p", default=".", help="Project directory; conanbuildinfo.json discovery starts here.")
@click.option("--target", "-t", default=None, help="Host target triple (default: $TARGET).")
@click.pass_context
def cli(ctx, path, target):
    """Link cargo builds against conan-installed native libraries."""
    ctx.obj = {"path": path, "target": target}

cli.add_command(link)
cli.add_command(env)
cli.add_command(targets)
cli.add_command(libs)
cli.add_command(config)
cli.add_command(version)
cli.add_command(log)

if __name__ == '__main__':
    cli()
