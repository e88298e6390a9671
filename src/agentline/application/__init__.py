"""
Application layer for the agent pipeline.

Contains the orchestration logic that coordinates domain objects through
their ports.
"""

from agentline.application.pipeline import Pipeline
from agentline.application.stage_executor import StageExecutor

__all__ = [
    "Pipeline",
    "StageExecutor",
]
