"""Filling in per-deployment and per-invocation definition values."""

import logging
import os
from typing import Optional, Union

from ..models.definition import CommandDefinition
from .constants import DEFAULT_NAME_PREFIX, NAME_SEPARATOR

logger = logging.getLogger(__name__)


def image_base_name(image: str) -> str:
    """Get the last path segment of an image reference, without tag or digest."""
    base = image.rsplit("/", 1)[-1]
    base = base.split("@", 1)[0]
    return base.split(":", 1)[0]


def patch_definition(
    definition: CommandDefinition,
    image_prefix: Optional[str] = None,
    token: Optional[Union[int, str]] = None,
) -> CommandDefinition:
    """Patch a loaded definition in place before running it.

    Prepends ``image_prefix`` to images given without a repository, and
    makes the container name unique to this invocation by suffixing
    ``token`` (the current process id unless given). Unnamed definitions are
    named ``command_<image base>_<token>``.

    Must be applied exactly once per definition.
    """
    if token is None:
        token = os.getpid()

    if "/" not in definition.image and image_prefix and image_prefix.strip():
        definition.image = f"{image_prefix.strip()}/{definition.image}"

    if definition.name is None or not definition.name.strip():
        base = NAME_SEPARATOR.join([DEFAULT_NAME_PREFIX, image_base_name(definition.image)])
    else:
        base = definition.name

    definition.name = f"{base}{NAME_SEPARATOR}{token}"

    logger.debug(f"Patched definition: image={definition.image} name={definition.name}")
    return definition
