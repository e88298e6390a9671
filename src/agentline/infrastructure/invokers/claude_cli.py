"""
Claude CLI invoker.

The only module that knows about the ``claude`` command line. To swap agent
providers, register another InvokerInterface implementation.
"""

import logging
import os
import shlex
import subprocess
from pathlib import Path

from agentline.domain.exceptions import InvocationError, InvocationTimeout
from agentline.domain.interfaces import InvokerInterface
from agentline.domain.models import InvocationConfig

logger = logging.getLogger(__name__)

DEFAULT_CLAUDE_COMMAND = "claude"

# Set by an enclosing Claude session; the nested CLI refuses to start with it.
_NESTED_SESSION_ENV = "CLAUDECODE"


class ClaudeCliInvoker(InvokerInterface):
    """
    Runs one stage through ``claude -p``.

    Agent output streams straight to the terminal so the user can follow
    progress; only the exit code is returned.
    """

    def __init__(
        self,
        command: str = DEFAULT_CLAUDE_COMMAND,
        timeout: float | None = None,
    ):
        """
        Args:
            command: Executable to run (name on PATH or absolute path)
            timeout: Per-stage limit in seconds; None waits indefinitely
        """
        self._command = command
        self._timeout = timeout

    @property
    def timeout(self) -> float | None:
        return self._timeout

    def build_command(self, config: InvocationConfig) -> list[str]:
        """Build the argument vector. Pure: nothing is executed."""
        return [
            self._command,
            "-p",
            config.prompt,
            "--append-system-prompt",
            config.system_prompt,
            "--allowedTools",
            ",".join(config.allowed_tools),
            "--model",
            config.model,
            "--permission-mode",
            config.permission_mode,
            "--add-dir",
            str(config.run_dir),
        ]

    def describe(self, config: InvocationConfig) -> str:
        return shlex.join(self.build_command(config))

    def invoke(self, config: InvocationConfig) -> int:
        """
        Run the CLI in the configured working directory.

        Returns:
            The process exit code

        Raises:
            InvocationTimeout: If the process outlives the timeout (it is killed)
            InvocationError: If the process cannot be started
        """
        args = self.build_command(config)
        env = os.environ.copy()
        env.pop(_NESTED_SESSION_ENV, None)

        logger.debug(f"Running {self._command} in {config.working_dir}")
        try:
            completed = subprocess.run(
                args,
                cwd=Path(config.working_dir),
                env=env,
                timeout=self._timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise InvocationTimeout(
                f"{self._command} exceeded {self._timeout}s", timeout=e.timeout
            ) from e
        except OSError as e:
            raise InvocationError(f"Could not start {self._command}: {e}") from e

        return completed.returncode
