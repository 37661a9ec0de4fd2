"""Custom exceptions for dockercmd.

Every failure the launcher can report maps to one of these, and each carries
the process exit code the CLI returns for it.
"""

from ..core.constants import (
    EXIT_DEFINITION_NOT_FOUND,
    EXIT_IMAGE_PULL_FAILED,
    EXIT_INSUFFICIENT_ARGUMENTS,
    EXIT_MALFORMED_DEFINITION,
    EXIT_UNANTICIPATED,
)


class DockerCmdError(Exception):
    """Base exception for all launcher errors."""

    exit_code = EXIT_UNANTICIPATED
    message_prefix = "error"


class InsufficientArgumentsError(DockerCmdError):
    """Exception raised when no command name was given."""

    exit_code = EXIT_INSUFFICIENT_ARGUMENTS

    def __init__(self, message: str = "insufficient arguments specified"):
        super().__init__(message)


class DefinitionError(DockerCmdError):
    """Base exception for command definition problems."""

    exit_code = EXIT_MALFORMED_DEFINITION


class DefinitionNotFoundError(DefinitionError):
    """Exception raised when no definition file exists for a command."""

    exit_code = EXIT_DEFINITION_NOT_FOUND

    def __init__(self, path):
        self.path = path
        super().__init__("could not find command definition file")


class MalformedDefinitionError(DefinitionError):
    """Exception raised when a definition file cannot be parsed."""

    def __init__(self, path, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"malformed command definition file: {detail}")


class MissingImageError(DefinitionError):
    """Exception raised when a definition names no image."""

    def __init__(self, path):
        self.path = path
        super().__init__("no image specified in command definition file")


class RuntimeServiceError(DockerCmdError):
    """Base exception for container runtime operations."""

    pass


class ImagePullFailedError(RuntimeServiceError):
    """Exception raised when pulling the command image fails."""

    exit_code = EXIT_IMAGE_PULL_FAILED

    def __init__(self, image: str, returncode: int):
        self.image = image
        self.returncode = returncode
        super().__init__("unable to pull command image")


class RuntimeInvocationError(RuntimeServiceError):
    """Exception raised when the runtime executable cannot be started."""

    message_prefix = "unanticipated error"
