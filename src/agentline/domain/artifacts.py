"""
Artifact naming rules.

An artifact is identified by a base name (e.g. "03_implementation_summary")
and a review cycle. Cycle 1 keeps the bare base name; later cycles append
``_v<cycle>``. Every document carries the Markdown extension on disk.
"""

import re

DOCUMENT_EXTENSION = ".md"


def ensure_extension(name: str) -> str:
    """Append the document extension unless already present."""
    if name.endswith(DOCUMENT_EXTENSION):
        return name
    return f"{name}{DOCUMENT_EXTENSION}"


def strip_extension(name: str) -> str:
    """Remove a trailing document extension, if any."""
    if name.endswith(DOCUMENT_EXTENSION):
        return name[: -len(DOCUMENT_EXTENSION)]
    return name


def versioned_name(base_name: str, cycle: int) -> str:
    """
    Return the artifact name for a review cycle.

    Examples:
        >>> versioned_name("03_implementation_summary", 1)
        '03_implementation_summary'
        >>> versioned_name("03_implementation_summary", 2)
        '03_implementation_summary_v2'

    Raises:
        ValueError: If cycle is lower than 1
    """
    if cycle < 1:
        raise ValueError(f"cycle must be >= 1, got {cycle}")
    if cycle == 1:
        return base_name
    return f"{base_name}_v{cycle}"


def parse_cycle(filename: str, base_name: str) -> int | None:
    """
    Extract the cycle encoded in a filename belonging to a base name family.

    Args:
        filename: Candidate filename, e.g. "04_test_summary_v12.md"
        base_name: Family base name, with or without extension

    Returns:
        The cycle number (1 for the bare name), or None if the filename
        is not a member of the family.
    """
    base = re.escape(strip_extension(base_name))
    extension = re.escape(DOCUMENT_EXTENSION)
    match = re.fullmatch(rf"{base}(?:_v(\d+))?{extension}", filename)
    if match is None:
        return None
    suffix = match.group(1)
    return int(suffix) if suffix is not None else 1
