"""Service layer for invoking the container runtime."""

from .runtime_service import ProcessResult, RuntimeService
from .exceptions import (
    DockerCmdError,
    InsufficientArgumentsError,
    DefinitionError,
    DefinitionNotFoundError,
    MalformedDefinitionError,
    MissingImageError,
    RuntimeServiceError,
    ImagePullFailedError,
    RuntimeInvocationError,
)

__all__ = [
    "ProcessResult",
    "RuntimeService",
    "DockerCmdError",
    "InsufficientArgumentsError",
    "DefinitionError",
    "DefinitionNotFoundError",
    "MalformedDefinitionError",
    "MissingImageError",
    "RuntimeServiceError",
    "ImagePullFailedError",
    "RuntimeInvocationError",
]
