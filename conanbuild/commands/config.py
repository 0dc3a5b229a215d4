import click
import os
import json
from .. import config as config_module
from ..cli_logger import logger

@click.group()
@click.pass_context
def config(ctx):
    """View or edit the conanbuild.toml configuration file."""
    pass

@config.command()
@click.pass_context
def view(ctx):
    """Show the effective [conanbuild] settings."""
    conf = config_module.load_config(path=ctx.obj["path"])
    config_file_path = os.path.join(ctx.obj["path"], config_module.CONFIG_FILE)
    if not conf:
        logger.info(f"No {config_file_path}, using defaults.")
    click.echo(json.dumps(config_module.settings(conf), indent=4))

@config.command()
@click.argument('key')
@click.pass_context
def get(ctx, key):
    """Get a value from the conanbuild.toml file."""
    conf = config_module.load_config(path=ctx.obj["path"])

    keys = key.split('.')
    value = conf
    try:
        for k in keys:
            value = value[k]
        click.echo(value)
    except (KeyError, TypeError):
        logger.error(f"Error: Key '{key}' not found in conanbuild.toml")
        ctx.exit(1)

@config.command()
@click.argument('key')
@click.argument('value')
@click.pass_context
def set(ctx, key, value):
    """Set a value in the conanbuild.toml file, e.g. conanbuild.target."""
    conf = config_module.load_config(path=ctx.obj["path"])

    keys = key.split('.')
    d = conf
    for k in keys[:-1]:
        d = d.setdefault(k, {})
    d[keys[-1]] = value

    if config_module.save_config(conf, path=ctx.obj["path"]):
        logger.info(f"Set '{key}' to '{value}'")
    else:
        ctx.exit(1)
