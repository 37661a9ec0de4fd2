"""Assembling the argument list for the runtime's run operation."""

import os
import sys
from typing import List, Optional, Sequence

from ..models.definition import CommandDefinition


def build_run_arguments(
    definition: CommandDefinition,
    arguments: Sequence[str],
    cwd: Optional[str] = None,
    windows: Optional[bool] = None,
) -> List[str]:
    """Build the arguments following ``run`` for a patched definition.

    Flags come first in a fixed order, then the image, then ``arguments``
    unchanged. ``cwd`` and ``windows`` default to the current process's
    working directory and platform.
    """
    args = ["--name", definition.name]

    # interactivity
    if definition.interactive:
        args.append("-it")
    else:
        args.extend(["-d", "--init"])

    # persistence
    if not definition.persist_container:
        args.append("--rm")

    # port mapping
    for port in definition.publish_tcp_ports:
        args.extend(["-p", f"{port}:{port}"])

    # volumes
    if definition.mount_cwd and definition.mount_cwd.strip():
        if cwd is None:
            cwd = os.getcwd()
        if windows is None:
            windows = sys.platform.startswith("win")
        if windows:
            cwd = cwd.replace("\\", "/")
        args.extend(["-v", f"{cwd}:{definition.mount_cwd}"])

    # pids
    if definition.share_host_pids:
        args.extend(["--pid", "host"])

    args.append(definition.image)
    args.extend(arguments)
    return args
