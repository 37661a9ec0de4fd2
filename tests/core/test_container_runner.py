from unittest.mock import MagicMock

from dockercmd.core.container_runner import ContainerRunner


class TestContainerRunner:
    """Smoke tests for ContainerRunner functionality."""

    def test_container_runner_initialization(self):
        """Test that ContainerRunner keeps its runtime."""
        runtime = MagicMock()

        runner = ContainerRunner(runtime)

        assert runner.runtime == runtime

    def test_run_passes_synthesized_arguments(self, patched_definition):
        """Test that the synthesized arguments reach the runtime."""
        runtime = MagicMock()
        runtime.run_container.return_value = 0

        result = ContainerRunner(runtime).run(patched_definition, ["ls", "-l"])

        assert result == 0
        runtime.run_container.assert_called_once_with(
            ["--name", "alpine_4242", "-it", "--rm", "library/alpine", "ls", "-l"]
        )

    def test_run_returns_container_status(self, patched_definition):
        """Test that a non-zero container status is returned unchanged."""
        runtime = MagicMock()
        runtime.run_container.return_value = 3

        assert ContainerRunner(runtime).run(patched_definition, []) == 3
