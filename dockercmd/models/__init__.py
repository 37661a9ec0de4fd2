"""Models for dockercmd."""

from .definition import CommandDefinition
from .settings import LauncherSettings

__all__ = [
    'CommandDefinition',
    'LauncherSettings'
]
