import json
import subprocess

import pytest
from click.testing import CliRunner
from unittest.mock import MagicMock

from dockercmd.models.definition import CommandDefinition


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def definitions_dir(tmp_path):
    """Creates an empty definitions directory."""
    path = tmp_path / ".dockercmd"
    path.mkdir()
    return path


@pytest.fixture
def write_definition(definitions_dir):
    """Writes a definition file and returns its path."""
    def _write(name, content):
        path = definitions_dir / f"{name}.json"
        if isinstance(content, str):
            path.write_text(content)
        else:
            path.write_text(json.dumps(content))
        return path

    return _write


@pytest.fixture
def mock_runner():
    """Provides a fake ``subprocess.run`` that succeeds with no output."""
    runner = MagicMock()
    runner.return_value = subprocess.CompletedProcess(args=[], returncode=0, stdout="")
    return runner


@pytest.fixture
def patched_definition():
    """Provides a definition that has already been patched."""
    return CommandDefinition(
        Image="library/alpine",
        Name="alpine_4242",
    )


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's environment out of the tests."""
    for var in (
        "DOCKER_REPO_PREFIX",
        "DOCKERCMD_HOME",
        "DOCKERCMD_RUNTIME",
        "DOCKERCMD_IMAGE_QUERY_TIMEOUT",
        "DOCKERCMD_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
