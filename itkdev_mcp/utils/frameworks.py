"""
Framework detection from marker files

Rules are tried in order and the first marker that exists wins:

    1. web/core/lib/Drupal.php  -> drupal, version from the VERSION constant
    2. core/lib/Drupal.php      -> drupal, version "7.x"
    3. bin/console              -> symfony, version constraint from composer.json
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .file_utils import read_text, read_text_if_exists
from .patterns import extract_drupal_version

logger = logging.getLogger(__name__)

COMPOSER_MANIFEST = "composer.json"

# Preferred first
SYMFONY_PACKAGES = ("symfony/framework-bundle", "symfony/symfony")

LEGACY_DRUPAL_VERSION = "7.x"


@dataclass(frozen=True)
class FrameworkRule:
    """A marker file and what its presence means"""
    marker: str
    framework: str
    resolve_version: Callable[[Path, Path], Optional[str]]

    def matches(self, project: Path) -> bool:
        return (project / self.marker).exists()


@dataclass(frozen=True)
class FrameworkMatch:
    framework: Optional[str] = None
    version: Optional[str] = None


def _drupal_version(project: Path, marker: Path) -> Optional[str]:
    content = read_text_if_exists(marker)
    return extract_drupal_version(content) if content is not None else None


def _legacy_drupal_version(project: Path, marker: Path) -> Optional[str]:
    return LEGACY_DRUPAL_VERSION


def _symfony_version(project: Path, marker: Path) -> Optional[str]:
    """Declared constraint for the first known Symfony package

    An unreadable or malformed composer.json means "no version found".
    """
    manifest = project / COMPOSER_MANIFEST
    if not manifest.is_file():
        return None

    try:
        composer = json.loads(read_text(manifest))
    except (OSError, ValueError) as e:
        logger.debug(f"Ignoring unreadable {manifest}: {e}")
        return None

    require = composer.get("require") if isinstance(composer, dict) else None
    if not isinstance(require, dict):
        return None

    for package in SYMFONY_PACKAGES:
        version = require.get(package)
        if version and isinstance(version, str):
            return version

    return None


FRAMEWORK_RULES: tuple[FrameworkRule, ...] = (
    FrameworkRule("web/core/lib/Drupal.php", "drupal", _drupal_version),
    FrameworkRule("core/lib/Drupal.php", "drupal", _legacy_drupal_version),
    FrameworkRule("bin/console", "symfony", _symfony_version),
)


def detect_framework(project: str | Path,
                     rules: tuple[FrameworkRule, ...] = FRAMEWORK_RULES) -> FrameworkMatch:
    """Apply the rules in order and stop at the first matching marker

    Args:
        project: Project directory
        rules: Ordered rules (default: FRAMEWORK_RULES)

    Returns:
        FrameworkMatch; both fields are None when no marker exists
    """
    project = Path(project)
    for rule in rules:
        if rule.matches(project):
            version = rule.resolve_version(project, project / rule.marker)
            logger.debug(f"Detected {rule.framework} via {rule.marker} (version: {version})")
            return FrameworkMatch(framework=rule.framework, version=version)
    return FrameworkMatch()
