"""Runtime service for invoking the container runtime executable."""

import logging
import subprocess
from typing import Callable, List, NamedTuple, Optional, Sequence

from ..core.constants import DEFAULT_IMAGE_TAG, IMAGE_QUERY_TIMEOUT
from .exceptions import RuntimeInvocationError

logger = logging.getLogger(__name__)

IMAGE_LIST_FORMAT = "{{.Repository}}:{{.Tag}}"


class ProcessResult(NamedTuple):
    """Exit status and captured output of a runtime invocation."""

    returncode: int
    stdout: str = ""


def normalize_image_reference(image: str) -> str:
    """Give an untagged image reference the default tag.

    Digest references are returned unchanged.
    """
    if "@" in image:
        return image
    last_segment = image.rsplit("/", 1)[-1]
    if ":" in last_segment:
        return image
    return f"{image}:{DEFAULT_IMAGE_TAG}"


class RuntimeService:
    """Service for container runtime operations.

    All three runtime operations (image query, pull and run) go through
    :meth:`execute`, which delegates to an injectable ``runner`` with the
    ``subprocess.run`` signature.
    """

    def __init__(
        self,
        executable: str,
        query_timeout: float = IMAGE_QUERY_TIMEOUT,
        runner: Optional[Callable[..., subprocess.CompletedProcess]] = None,
    ):
        """Initialize runtime service.

        Args:
            executable: Name or path of the runtime executable
            query_timeout: Upper bound in seconds for the image query
            runner: Callable used to start processes, ``subprocess.run`` by default
        """
        self.executable = executable
        self.query_timeout = query_timeout
        self.runner = runner or subprocess.run

    def execute(
        self,
        args: Sequence[str],
        capture_output: bool = False,
        timeout: Optional[float] = None,
    ) -> ProcessResult:
        """Run the runtime executable with the given arguments.

        Args:
            args: Arguments following the executable name
            capture_output: Capture stdout instead of inheriting it
            timeout: Seconds to wait before giving up, or None to wait forever

        Returns:
            ProcessResult with the exit status and any captured output

        Raises:
            subprocess.TimeoutExpired: If the timeout elapses
            RuntimeInvocationError: If the executable cannot be started
        """
        command = [self.executable, *args]
        logger.debug(f"Executing: {' '.join(command)}")

        kwargs = {}
        if capture_output:
            kwargs.update(stdout=subprocess.PIPE, stderr=subprocess.DEVNULL, text=True)
        if timeout is not None:
            kwargs["timeout"] = timeout

        try:
            completed = self.runner(command, **kwargs)
        except OSError as e:
            raise RuntimeInvocationError(
                f"could not start '{self.executable}': {e}"
            ) from e

        return ProcessResult(completed.returncode, completed.stdout or "")

    def list_images(self, image: str) -> List[str]:
        """List local images matching a reference as repository:tag lines.

        Raises:
            subprocess.TimeoutExpired: If the query exceeds the query timeout
        """
        result = self.execute(
            ["images", "--format", IMAGE_LIST_FORMAT, image],
            capture_output=True,
            timeout=self.query_timeout,
        )
        if result.returncode != 0:
            logger.debug(f"Image query exited with status {result.returncode}")
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def image_exists(self, image: str) -> bool:
        """Check if an image is present locally.

        A query that does not finish within the query timeout counts as
        not present.
        """
        try:
            local_images = self.list_images(image)
        except subprocess.TimeoutExpired:
            logger.warning(
                f"Image query for '{image}' timed out after {self.query_timeout}s; assuming absent"
            )
            return False

        if "@" in image:
            # Digest references are listed by repository only
            repository = image.split("@", 1)[0]
            return any(entry.rsplit(":", 1)[0] == repository for entry in local_images)

        return normalize_image_reference(image) in local_images

    def pull_image(self, image: str) -> int:
        """Pull an image using whatever credentials the runtime already has.

        Returns:
            Exit status of the pull
        """
        return self.execute(["pull", image]).returncode

    def run_container(self, run_args: Sequence[str]) -> int:
        """Run a container, inheriting stdin, stdout and stderr.

        Returns:
            Exit status of the container
        """
        return self.execute(["run", *run_args]).returncode
