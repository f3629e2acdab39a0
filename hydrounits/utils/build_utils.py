"""
Table Build Utility Functions
-----------------------------

Helpers for turning YAML reference data and registry records into the
tabular forms the resolvers and loaders work with.

Functions:
  - load_yaml_file: Load and parse YAML file
  - expand_aliases: Expand alias list into alias1...aliasN columns
"""

from pathlib import Path
from typing import Dict, List, Optional


def load_yaml_file(path: Path) -> dict:
    """
    Load and parse YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML data as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If file does not exist
    """
    import yaml

    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def expand_aliases(aliases: Optional[List[str]], max_columns: int = 6) -> Dict[str, str]:
    """
    Expand aliases list into alias1...aliasN columns.

    Examples:
        >>> expand_aliases(['lead', 'plumbum'], max_columns=3)
        {'alias1': 'lead', 'alias2': 'plumbum', 'alias3': ''}
    """
    result = {}
    if not aliases:
        aliases = []

    for i in range(1, max_columns + 1):
        col_name = f"alias{i}"
        if i <= len(aliases):
            result[col_name] = str(aliases[i - 1])
        else:
            result[col_name] = ""

    return result


__all__ = [
    "load_yaml_file",
    "expand_aliases",
]
