"""
The five-stage pipeline table.

Stages are configuration data: an ordered tuple of immutable records. The
orchestrator derives per-cycle variants with ``dataclasses.replace`` and
never branches on stage identity.
"""

from dataclasses import replace

from agentline.domain.artifacts import versioned_name
from agentline.domain.models import StageDefinition

FEATURE_ARTIFACT = "00_feature"
REQUIREMENTS_ARTIFACT = "01_requirements"
DESIGN_ARTIFACT = "02_design_spec"
IMPLEMENTATION_ARTIFACT = "03_implementation_summary"
TEST_ARTIFACT = "04_test_summary"
REVIEW_VERDICT_ARTIFACT = "05_review_verdict"

FAST_MODEL = "haiku"
MAX_REVIEW_CYCLES = 3

_READ_ONLY_TOOLS = ("Read", "Glob", "Grep", "Write")
_CODING_TOOLS = ("Read", "Glob", "Grep", "Write", "Edit", "Bash")

STAGES: tuple[StageDefinition, ...] = (
    StageDefinition(
        name="product_manager",
        persona="product_manager",
        reads=(),
        writes=REQUIREMENTS_ARTIFACT,
        tools=_READ_ONLY_TOOLS,
        model="sonnet",
        permission_mode="acceptEdits",
    ),
    StageDefinition(
        name="designer",
        persona="designer",
        reads=(REQUIREMENTS_ARTIFACT,),
        writes=DESIGN_ARTIFACT,
        tools=_READ_ONLY_TOOLS,
        model="sonnet",
        permission_mode="acceptEdits",
    ),
    StageDefinition(
        name="programmer",
        persona="programmer",
        reads=(REQUIREMENTS_ARTIFACT, DESIGN_ARTIFACT),
        writes=IMPLEMENTATION_ARTIFACT,
        tools=_CODING_TOOLS,
        model="opus",
        permission_mode="bypassPermissions",
    ),
    StageDefinition(
        name="test_writer",
        persona="test_writer",
        reads=(REQUIREMENTS_ARTIFACT, DESIGN_ARTIFACT, IMPLEMENTATION_ARTIFACT),
        writes=TEST_ARTIFACT,
        tools=_CODING_TOOLS,
        model="sonnet",
        permission_mode="bypassPermissions",
    ),
    StageDefinition(
        name="code_reviewer",
        persona="code_reviewer",
        reads=(
            REQUIREMENTS_ARTIFACT,
            DESIGN_ARTIFACT,
            IMPLEMENTATION_ARTIFACT,
            TEST_ARTIFACT,
        ),
        writes=REVIEW_VERDICT_ARTIFACT,
        tools=_READ_ONLY_TOOLS,
        model="opus",
        permission_mode="acceptEdits",
    ),
)


def stages() -> tuple[StageDefinition, ...]:
    """Return the pipeline stages in execution order."""
    return STAGES


def get_stage(name: str) -> StageDefinition:
    """
    Look up a stage by name.

    Raises:
        KeyError: If no stage has that name
    """
    for stage in STAGES:
        if stage.name == name:
            return stage
    raise KeyError(f"Unknown stage: {name}")


def linear_stages() -> tuple[StageDefinition, ...]:
    """Stages that run exactly once, before the review loop."""
    return STAGES[:2]


def review_cycle_stages(
    cycle: int,
) -> tuple[StageDefinition, StageDefinition, StageDefinition]:
    """
    Build the programmer, test writer and reviewer stages for a review cycle.

    Outputs are versioned for the cycle. From cycle 2 on, the programmer and
    test writer also read the previous cycle's verdict. The reviewer always
    reads this cycle's implementation and test summaries.

    Args:
        cycle: Review cycle, starting at 1

    Returns:
        Tuple of (programmer, test_writer, code_reviewer)
    """
    programmer, test_writer, reviewer = STAGES[2:]

    programmer = replace(programmer, writes=versioned_name(programmer.writes, cycle))
    test_writer = replace(
        test_writer, writes=versioned_name(test_writer.writes, cycle)
    )
    reviewer = replace(
        reviewer,
        writes=versioned_name(reviewer.writes, cycle),
        reads=(
            REQUIREMENTS_ARTIFACT,
            DESIGN_ARTIFACT,
            versioned_name(IMPLEMENTATION_ARTIFACT, cycle),
            versioned_name(TEST_ARTIFACT, cycle),
        ),
    )

    if cycle > 1:
        previous_verdict = versioned_name(REVIEW_VERDICT_ARTIFACT, cycle - 1)
        programmer = replace(programmer, reads=programmer.reads + (previous_verdict,))
        test_writer = replace(
            test_writer, reads=test_writer.reads + (previous_verdict,)
        )

    return programmer, test_writer, reviewer
