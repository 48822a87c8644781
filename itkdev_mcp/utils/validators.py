"""
Input validation utilities
Every failure maps to InvalidInputError or NotFoundError
"""

import os
from pathlib import Path
from typing import Optional

from ..errors import InvalidInputError, NotFoundError


def require_argument(value: Optional[str], message: str, argument: str = None) -> str:
    """
    Ensure a required string argument was supplied

    Args:
        value: Argument value (None and "" are both missing)
        message: Error message when missing
        argument: Argument name, attached to the error

    Returns:
        The value unchanged

    Raises:
        InvalidInputError: If the value is missing or empty
    """
    if not value:
        raise InvalidInputError(message, argument=argument)
    return value


def require_project_path(path: Optional[str]) -> Path:
    """
    Validate a project directory argument

    Raises:
        InvalidInputError: If path is empty
        NotFoundError: If path does not exist
    """
    require_argument(path, "Project path is required", argument="path")

    project = Path(path)
    if not project.exists():
        raise NotFoundError(f"Path does not exist: {path}", path=path)

    return project


def ensure_within(root: Path, candidate: Path, message: str) -> Path:
    """
    Reject a path that lexically resolves outside root

    Symlinks are not followed, so templates may link to shared files.

    Raises:
        InvalidInputError: If candidate escapes root
    """
    normalized_root = os.path.normpath(os.path.abspath(root))
    normalized = os.path.normpath(os.path.abspath(candidate))
    if os.path.commonpath([normalized_root, normalized]) != normalized_root:
        raise InvalidInputError(message)
    return candidate
