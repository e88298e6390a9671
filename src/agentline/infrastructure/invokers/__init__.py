"""
Agent invocation adapters.
"""

from agentline.infrastructure.invokers.claude_cli import ClaudeCliInvoker
from agentline.infrastructure.invokers.mock import MockInvoker

__all__ = [
    "ClaudeCliInvoker",
    "MockInvoker",
]
