import functools
import click
import sys
from .cli_logger import logger
from .errors import ConanBuildError

def handle_exceptions(func):
    """Log errors raised by a CLI command and turn them into a failing exit status.

    A build script that keeps going after one of these would link the wrong
    libraries, so every error ends the process with status 1.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except click.Abort:
            logger.warning("\nCommand aborted by user.")
            sys.exit(1)
        except ConanBuildError as e:
            logger.error(f"Error: {e}")
            sys.exit(1)
        except click.ClickException:
            raise
        except Exception as e:
            logger.error(f"\nAn unexpected error occurred: {e}")
            logger.exception(*sys.exc_info())
            sys.exit(1)
    return wrapper
