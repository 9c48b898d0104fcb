# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Reading screening policy files.

A policy file (thresholds.yaml, messages.yaml) is a YAML mapping with one
top-level key naming its section:

    screening:
      adaptive:
        threshold: 8

load_policy_section() returns that section. A section that is absent or
written with an empty body reads as {}, so callers fall back to their
built-in defaults.

Example:
    >>> from pathlib import Path
    >>> section = load_policy_section(Path("thresholds.yaml"), "screening")
    >>> section.get("adaptive", {})
"""

from pathlib import Path
from typing import Any

import yaml


class YAMLLoadError(Exception):
    """A policy file is missing, unreadable or malformed.

    Attributes:
        path: Offending file.
        reason: What went wrong.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load YAML file '{path}': {reason}")


def load_yaml(path: Path) -> dict[str, Any]:
    """Parse a policy file into a dictionary.

    An empty file (or one holding only comments) yields {}.

    Raises:
        YAMLLoadError: If the path is not a readable file, the YAML does
            not parse or its root is not a mapping.
    """
    if not path.is_file():
        reason = "File does not exist" if not path.exists() else "Path is not a file"
        raise YAMLLoadError(path, reason)

    try:
        with path.open(encoding="utf-8") as f:
            parsed = yaml.safe_load(f)
    except OSError as e:
        raise YAMLLoadError(path, f"Cannot read file: {e}") from e
    except yaml.YAMLError as e:
        raise YAMLLoadError(path, f"Invalid YAML syntax: {e}") from e

    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise YAMLLoadError(path, f"YAML root must be a mapping, got {type(parsed).__name__}")
    return parsed


def load_policy_section(path: Path, section: str) -> dict[str, Any]:
    """Load a policy file and return its top-level section.

    Args:
        path: Policy file.
        section: Top-level key, e.g. "screening" or "messages".

    Returns:
        The section mapping; {} when the key is absent or has no body.

    Raises:
        YAMLLoadError: If the file cannot be loaded or the section is not
            a mapping.
    """
    value = load_yaml(path).get(section)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise YAMLLoadError(
            path, f"Section '{section}' must be a mapping, got {type(value).__name__}"
        )
    return value
