"""Constants used throughout dockercmd."""


# Definition files
DEFINITIONS_DIR_NAME = ".dockercmd"
DEFINITION_SUFFIX = ".json"

# Runtime executable
DEFAULT_RUNTIME_EXECUTABLE = "docker"
WINDOWS_RUNTIME_EXECUTABLE = "docker.exe"

# Timeout values
IMAGE_QUERY_TIMEOUT = 10.0  # seconds

# Container naming
DEFAULT_NAME_PREFIX = "command"
NAME_SEPARATOR = "_"
DEFAULT_IMAGE_TAG = "latest"

# Environment variables
ENV_IMAGE_PREFIX = "DOCKER_REPO_PREFIX"
ENV_DEFINITIONS_DIR = "DOCKERCMD_HOME"
ENV_RUNTIME_EXECUTABLE = "DOCKERCMD_RUNTIME"
ENV_IMAGE_QUERY_TIMEOUT = "DOCKERCMD_IMAGE_QUERY_TIMEOUT"
ENV_LOG_LEVEL = "DOCKERCMD_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"

# Exit codes (container exit statuses are passed through unchanged)
EXIT_INSUFFICIENT_ARGUMENTS = 129
EXIT_DEFINITION_NOT_FOUND = 130
EXIT_MALFORMED_DEFINITION = 131
EXIT_IMAGE_PULL_FAILED = 132
EXIT_UNANTICIPATED = 255
