"""
Mock invoker for testing without an agent CLI.

Writes canned artifacts where the prompt asks and returns scripted exit codes.
"""

from collections.abc import Sequence
from pathlib import Path

from agentline.domain.artifacts import parse_cycle
from agentline.domain.interfaces import InvokerInterface
from agentline.domain.models import InvocationConfig
from agentline.domain.prompts import output_path_from_prompt
from agentline.domain.stages import REVIEW_VERDICT_ARTIFACT


class MockInvoker(InvokerInterface):
    """Plays the part of every agent with deterministic output."""

    def __init__(
        self,
        verdicts: Sequence[str] = ("APPROVE",),
        fail_on: str | None = None,
        fail_exit_code: int = 1,
        write_artifacts: bool = True,
    ):
        """
        Args:
            verdicts: Verdict texts for successive review stages; the last
                one repeats once the sequence is used up
            fail_on: Output base name (e.g. "04_test_summary") whose stage
                returns fail_exit_code instead of writing anything
            fail_exit_code: Exit code for the failing stage
            write_artifacts: When False, nothing is written (simulates an
                agent that exits cleanly but produces no file)
        """
        if not verdicts:
            raise ValueError("verdicts must not be empty")
        self._verdicts = list(verdicts)
        self._fail_on = fail_on
        self._fail_exit_code = fail_exit_code
        self._write_artifacts = write_artifacts
        self._verdict_count = 0
        self.calls: list[InvocationConfig] = []

    @property
    def call_count(self) -> int:
        """Number of times invoke() has been called."""
        return len(self.calls)

    def invoke(self, config: InvocationConfig) -> int:
        self.calls.append(config)

        output = output_path_from_prompt(config.prompt)
        if output is None:
            return 0
        path = Path(output)

        if self._fail_on and parse_cycle(path.name, self._fail_on) is not None:
            return self._fail_exit_code

        if not self._write_artifacts:
            return 0

        if parse_cycle(path.name, REVIEW_VERDICT_ARTIFACT) is not None:
            content = self._next_verdict()
        else:
            content = f"Mock artifact content for {path.name}"

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return 0

    def _next_verdict(self) -> str:
        index = min(self._verdict_count, len(self._verdicts) - 1)
        self._verdict_count += 1
        return self._verdicts[index]

    def reset(self) -> None:
        """Forget recorded calls and restart the verdict sequence."""
        self.calls.clear()
        self._verdict_count = 0
