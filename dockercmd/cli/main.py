"""Main CLI entry point for dockercmd."""

import logging
import sys

import click
from rich.console import Console

from .. import __version__
from ..core.constants import EXIT_UNANTICIPATED
from ..core.launcher import Launcher
from ..models.settings import LauncherSettings
from ..services.exceptions import DockerCmdError, InsufficientArgumentsError

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(
    help_option_names=['-h', '--help'],
    ignore_unknown_options=True,
    allow_interspersed_args=False,
)


def _print_error(message: str) -> None:
    """Print a one-line diagnostic on stderr."""
    message = " ".join(line.strip() for line in message.splitlines())
    Console(stderr=True).print(
        message, style="red", markup=False, highlight=False, soft_wrap=True
    )


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def _launch(command, arguments) -> int:
    """Run a command and map every failure onto an exit code."""
    try:
        if not command:
            raise InsufficientArgumentsError()

        settings = LauncherSettings.from_env()
        _configure_logging(settings.log_level)

        return Launcher(settings).launch(command, list(arguments))
    except DockerCmdError as e:
        _print_error(f"{e.message_prefix}: {e}")
        return e.exit_code
    except Exception as e:
        logger.debug("Unanticipated error", exc_info=True)
        _print_error(f"unanticipated error: {e}")
        return EXIT_UNANTICIPATED


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(
    __version__, '-v', '--version', prog_name='dockercmd', message='%(prog)s %(version)s'
)
@click.argument('command', required=False)
@click.argument('arguments', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx, command, arguments):
    """Run a command based upon a configuration in ~/.dockercmd

    COMMAND names the definition file ~/.dockercmd/COMMAND.json; ARGUMENTS
    are passed unchanged to the command inside the container, and the
    container's exit status becomes dockercmd's.
    """
    ctx.exit(_launch(command, arguments))


if __name__ == '__main__':
    cli()
