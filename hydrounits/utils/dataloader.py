"""Shared data file lookup utilities.

Reference tables ship as package data next to the module that uses them
(e.g. hydrounits/ranges/data/typical_ranges.yaml) and can be overridden
with an environment variable pointing at an alternative file.
"""

import os
from pathlib import Path
from typing import List, Optional, Tuple


def find_data_file(
    module_file: str,
    filenames: List[str],
    env_var: Optional[str] = None,
) -> Optional[Path]:
    """Find a data file by searching standard locations.

    Search priority:
    1. Environment override: path in ``env_var`` (if set and the file exists)
    2. Module-local data: {module_dir}/data/

    Args:
        module_file: __file__ from the calling module
        filenames: Candidate filenames to search for
        env_var: Optional environment variable holding an explicit path

    Returns:
        Path to found file, or None if not found

    Examples:
        >>> path = find_data_file(__file__, ["typical_ranges.yaml"],
        ...                       env_var="HYDROUNITS_RANGES_PATH")
    """
    if env_var:
        env_path = os.environ.get(env_var)
        if env_path and Path(env_path).exists():
            return Path(env_path)

    data_dir = Path(module_file).parent / "data"
    for filename in filenames:
        p = data_dir / filename
        if p.exists():
            return p

    return None


def format_not_found_error(
    subject: str,
    searched_locations: List[Tuple[str, Path]],
    fix_instructions: List[str],
) -> str:
    """Format a helpful FileNotFoundError message.

    Args:
        subject: What was being looked for (e.g., 'typical range')
        searched_locations: List of (description, path) tuples for locations searched
        fix_instructions: List of instructions to fix the issue

    Returns:
        Formatted error message string
    """
    lines = [f"No {subject} data found in standard locations.\n"]

    lines.append("Searched:")
    for i, (desc, path) in enumerate(searched_locations, 1):
        lines.append(f"  {i}. {desc}: {path}")

    lines.append("\nTo fix:")
    for instruction in fix_instructions:
        lines.append(f"  • {instruction}")

    return "\n".join(lines)


__all__ = [
    "find_data_file",
    "format_not_found_error",
]
