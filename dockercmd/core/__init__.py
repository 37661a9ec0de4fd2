"""Core functionality for dockercmd."""

from .container_runner import ContainerRunner
from .definition_loader import DefinitionLoader
from .definition_patcher import patch_definition
from .image_resolver import ImageResolver
from .launcher import Launcher
from .run_arguments import build_run_arguments

__all__ = [
    'ContainerRunner',
    'DefinitionLoader',
    'patch_definition',
    'ImageResolver',
    'Launcher',
    'build_run_arguments'
]
