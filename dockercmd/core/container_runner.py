"""Container running functionality."""

import logging
from typing import Sequence

from ..models.definition import CommandDefinition
from ..services.runtime_service import RuntimeService
from .run_arguments import build_run_arguments

logger = logging.getLogger(__name__)


class ContainerRunner:
    """Runs a patched command definition through the container runtime."""

    def __init__(self, runtime: RuntimeService):
        """Initialize container runner."""
        self.runtime = runtime

    def run(self, definition: CommandDefinition, arguments: Sequence[str]) -> int:
        """Run the command and wait for it to finish.

        Returns:
            The container's exit status, unchanged
        """
        run_args = build_run_arguments(definition, arguments)
        returncode = self.runtime.run_container(run_args)
        logger.debug(f"Container '{definition.name}' exited with status {returncode}")
        return returncode
