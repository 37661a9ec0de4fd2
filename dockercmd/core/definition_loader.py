"""Locating and reading command definition files."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ..models.definition import CommandDefinition
from ..services.exceptions import (
    DefinitionNotFoundError,
    MalformedDefinitionError,
    MissingImageError,
)
from .constants import DEFINITION_SUFFIX

logger = logging.getLogger(__name__)


def _describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic validation error onto one line."""
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ())) or "definition"
        problems.append(f"{location}: {item.get('msg')}")
    return "; ".join(problems)


class DefinitionLoader:
    """Loads command definitions from a definitions directory."""

    def __init__(self, definitions_dir: Path):
        """Initialize definition loader."""
        self.definitions_dir = Path(definitions_dir)

    def definition_path(self, command: str) -> Path:
        """Get the definition file path for a command, whether or not it exists."""
        return self.definitions_dir / f"{command}{DEFINITION_SUFFIX}"

    def load(self, command: str) -> CommandDefinition:
        """Load and validate the definition for a command.

        Raises:
            DefinitionNotFoundError: If there is no definition file
            MalformedDefinitionError: If the file is not a valid definition
            MissingImageError: If the definition names no image
        """
        path = self.definition_path(command)
        logger.debug(f"Command definition file: {path}")

        if not path.is_file():
            raise DefinitionNotFoundError(path)

        # utf-8-sig accepts files saved with a byte-order mark
        text = path.read_text(encoding="utf-8-sig")

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedDefinitionError(path, str(e)) from e

        if not isinstance(data, dict):
            raise MalformedDefinitionError(
                path, f"expected a JSON object, found {type(data).__name__}"
            )

        try:
            definition = CommandDefinition.model_validate(data)
        except ValidationError as e:
            raise MalformedDefinitionError(path, _describe_validation_error(e)) from e

        if definition.image is None or not definition.image.strip():
            raise MissingImageError(path)

        return definition
