"""
Prompt construction for agent stages.

The prompt handed to an agent is assembled from plain strings only. Nothing
here touches the filesystem: the run directory is joined into the output
path as text.
"""

import re
from pathlib import PurePath

SECTION_SEPARATOR = "\n\n"

OUTPUT_DIRECTIVE = (
    "Use the Write tool to create this file. The file should be a Markdown "
    "document following the format specified in your persona instructions."
)

_OUTPUT_PATH_PATTERN = re.compile(r"Write your output to: `(.+?)`")


def build_prompt(
    feature_description: str,
    artifacts_content: str,
    run_dir: str | PurePath,
    artifact_filename: str,
) -> str:
    """
    Build the user prompt for an agent stage.

    Args:
        feature_description: The original feature request
        artifacts_content: Pre-assembled prior artifacts, or "" for none
        run_dir: Path of the current run directory
        artifact_filename: File the agent must write its output to

    Returns:
        Feature request, optional prior artifacts, and output instructions,
        separated by blank lines.
    """
    sections = [f"## Feature Request\n\n{feature_description}"]

    if artifacts_content != "":
        sections.append(f"## Prior Artifacts\n\n{artifacts_content}")

    output_path = PurePath(run_dir) / artifact_filename
    sections.append(
        "## Output Instructions\n\n"
        f"Write your output to: `{output_path}`\n\n"
        f"{OUTPUT_DIRECTIVE}"
    )

    return SECTION_SEPARATOR.join(sections)


def output_path_from_prompt(prompt: str) -> str | None:
    """Return the output path a built prompt asks the agent to write, if any."""
    match = _OUTPUT_PATH_PATTERN.search(prompt)
    return match.group(1) if match else None
