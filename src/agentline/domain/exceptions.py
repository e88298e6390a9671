"""
Domain exceptions for the agent pipeline.

Stage failures are fatal for a run: they carry the failing stage's name so
the caller knows which of the five roles broke and why.
"""


class AgentlineError(Exception):
    """Base class for all agentline errors."""


class ConfigurationError(AgentlineError):
    """Raised when configuration is missing or invalid."""


class InvocationError(AgentlineError):
    """
    Raised by an invoker when the agent process could not be run.

    A process that runs and exits non-zero is not an InvocationError;
    invokers report that through the returned exit code.
    """


class InvocationTimeout(InvocationError):
    """Raised when the agent process exceeds its time budget."""

    def __init__(self, message: str, timeout: float):
        """
        Args:
            message: Human-readable error message
            timeout: The budget in seconds that was exceeded
        """
        super().__init__(message)
        self.timeout = timeout


class PersonaNotFoundError(AgentlineError, LookupError):
    """Raised when no instruction text exists for a persona."""

    def __init__(self, persona: str):
        super().__init__(f"Persona not found: {persona}")
        self.persona = persona


class StageFailed(AgentlineError):
    """
    Raised when a stage does not complete successfully.

    Exactly one of exit_code (the agent ran and exited non-zero) or cause
    (the agent could not be run) is set.
    """

    def __init__(
        self,
        stage_name: str,
        exit_code: int | None = None,
        cause: BaseException | None = None,
    ):
        """
        Args:
            stage_name: Name of the failing stage
            exit_code: Non-zero exit code reported by the invoker
            cause: Underlying exception when the invocation itself failed
        """
        if exit_code is not None:
            message = f"Stage '{stage_name}' exited with code {exit_code}"
        else:
            message = f"Stage '{stage_name}' failed: {cause}"
        super().__init__(message)
        self.stage_name = stage_name
        self.exit_code = exit_code
        self.cause = cause


class StageTimedOut(StageFailed):
    """Raised when a stage's agent process ran past its timeout."""
