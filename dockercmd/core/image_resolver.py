"""Making sure the command image is available before running it."""

import logging
from typing import Optional

from rich.console import Console

from ..services.exceptions import ImagePullFailedError
from ..services.runtime_service import RuntimeService

logger = logging.getLogger(__name__)


class ImageResolver:
    """Checks for the command image locally and pulls it when absent."""

    def __init__(self, runtime: RuntimeService, console: Optional[Console] = None):
        """Initialize image resolver."""
        self.runtime = runtime
        self.console = console or Console(stderr=True)

    def ensure_image(self, image: str) -> None:
        """Pull ``image`` unless it is already present.

        Raises:
            ImagePullFailedError: If the pull exits with a non-zero status
        """
        if self.runtime.image_exists(image):
            logger.debug(f"Image '{image}' is present")
            return

        self.console.print(
            "command image is not present, attempting pull...",
            style="yellow",
            markup=False,
            highlight=False,
        )

        returncode = self.runtime.pull_image(image)
        if returncode != 0:
            logger.debug(f"Pull of '{image}' exited with status {returncode}")
            raise ImagePullFailedError(image, returncode)
