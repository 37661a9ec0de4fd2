"""Launching a named command from its definition."""

import logging
from typing import Optional, Sequence

from rich.console import Console

from ..models.settings import LauncherSettings
from ..services.runtime_service import RuntimeService
from .container_runner import ContainerRunner
from .definition_loader import DefinitionLoader
from .definition_patcher import patch_definition
from .image_resolver import ImageResolver

logger = logging.getLogger(__name__)


class Launcher:
    """Loads, patches, resolves and runs a command definition."""

    def __init__(
        self,
        settings: LauncherSettings,
        runtime: Optional[RuntimeService] = None,
        loader: Optional[DefinitionLoader] = None,
        console: Optional[Console] = None,
    ):
        """Initialize launcher."""
        self.settings = settings
        self.runtime = runtime or RuntimeService(
            settings.runtime_executable,
            query_timeout=settings.image_query_timeout,
        )
        self.loader = loader or DefinitionLoader(settings.definitions_dir)
        self.resolver = ImageResolver(self.runtime, console=console)
        self.runner = ContainerRunner(self.runtime)

    def launch(self, command: str, arguments: Sequence[str]) -> int:
        """Run ``command`` with ``arguments`` and return the container's exit status.

        Raises:
            DefinitionNotFoundError: If the command has no definition file
            MalformedDefinitionError: If the definition cannot be parsed
            MissingImageError: If the definition names no image
            ImagePullFailedError: If the image is absent and cannot be pulled
            RuntimeInvocationError: If the runtime cannot be started
        """
        definition = self.loader.load(command)
        patch_definition(definition, image_prefix=self.settings.image_prefix)
        self.resolver.ensure_image(definition.image)
        return self.runner.run(definition, arguments)
