"""
File utilities for template and project trees

Everything here is read-only. Text is decoded as UTF-8 with replacement
characters for undecodable bytes.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from ..errors import InvalidInputError, NotFoundError
from .patterns import natural_sort_key

logger = logging.getLogger(__name__)


def read_text(path: str | Path) -> str:
    """Read a file as text"""
    return Path(path).read_text(encoding='utf-8', errors='replace')


def read_text_if_exists(path: str | Path) -> Optional[str]:
    """Read a file as text, or return None when it is not a regular file"""
    path = Path(path)
    if not path.is_file():
        return None
    logger.debug(f"Reading {path}")
    return read_text(path)


def list_files(root: str | Path) -> list[str]:
    """Collect all files below root

    Directories are descended, never listed. Symlinks are not followed and
    are listed as files. Paths are slash-joined, relative to root, and
    sorted lexicographically.

    Args:
        root: Directory to walk

    Returns:
        Sorted list of relative file paths
    """
    files = []

    def walk(directory: str, prefix: str) -> None:
        with os.scandir(directory) as entries:
            for entry in entries:
                relative_path = f"{prefix}/{entry.name}" if prefix else entry.name
                if entry.is_dir(follow_symlinks=False):
                    walk(entry.path, relative_path)
                else:
                    files.append(relative_path)

    walk(str(root), "")
    return sorted(files)


def list_template_names(templates_dir: str | Path) -> list[str]:
    """Names of the template directories, naturally sorted

    Returns an empty list when the templates directory does not exist.
    """
    templates_dir = Path(templates_dir)
    if not templates_dir.is_dir():
        return []
    return sorted(
        (entry.name for entry in templates_dir.iterdir() if entry.is_dir()),
        key=natural_sort_key
    )


def resolve_template_dir(templates_dir: str | Path, template: str,
                         not_found_message: Optional[str] = None) -> Path:
    """Resolve a template name to its directory

    Args:
        templates_dir: Templates root
        template: Template directory name
        not_found_message: Error message when the template is missing

    Returns:
        Path to the template directory

    Raises:
        InvalidInputError: If the name is not a single directory name
        NotFoundError: If the template directory does not exist
    """
    if template in (".", "..") or Path(template).name != template:
        raise InvalidInputError(f"Invalid template name: '{template}'", argument="template")

    template_dir = Path(templates_dir) / template
    if not template_dir.is_dir():
        raise NotFoundError(
            not_found_message or f"Template '{template}' not found",
            path=str(template_dir)
        )

    return template_dir
