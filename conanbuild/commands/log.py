import click
import os
from .. import cli_logger
from colorama import Fore, Style

LEVEL_COLORS = (
    ("[WARNING]", Fore.YELLOW),
    ("[ERROR]", Fore.RED),
    ("[TRACEBACK]", Fore.RED),
    ("[DEBUG]", Fore.WHITE + Style.DIM),
    ("[SUCCESS]", Fore.GREEN),
)

@click.command()
@click.option('--filename', default=None, help='The name of the log file to display.')
@click.option('--list', 'list_files', is_flag=True, help='List all log files.')
def log(filename, list_files):
    """Display a specific log file or the latest log file, or list all log files."""
    log_dir = cli_logger.LOG_DIR
    if list_files:
        if not os.path.isdir(log_dir):
            click.echo("Log directory does not exist.")
            return
        log_files = [f for f in os.listdir(log_dir) if f.endswith(".log")]
        if not log_files:
            click.echo("No log files found.")
            return
        click.echo("Available log files:")
        for f in sorted(log_files):
            click.echo(f"  {f}")
        return

    if filename:
        log_file = os.path.join(log_dir, filename)
    else:
        log_file = cli_logger.get_latest_log_file(log_dir)

    if not log_file or not os.path.exists(log_file):
        click.echo("No log files found.")
        return

    click.echo(f"Displaying log file: {log_file}")
    try:
        with open(log_file, 'r') as f:
            for line in f:
                color = Fore.CYAN
                for marker, level_color in LEVEL_COLORS:
                    if marker in line:
                        color = level_color
                        break
                click.echo(f"{color}{line.rstrip()}{Style.RESET_ALL}")
    except IOError as e:
        click.echo(f"Error reading log file {log_file}: {e}", err=True)
        raise click.exceptions.Exit(1)
