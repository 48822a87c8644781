"""
Project detection and template comparison tools
Inspect a project directory and diff its key files against a template
"""

from pathlib import Path
from typing import TYPE_CHECKING, Optional

from ..config import Config
from ..errors import InvalidInputError
from ..schemas import ComparisonReport, ComparisonSummary, OutdatedFile, ProjectProfile
from ..utils.context_managers import tool_error_context
from ..utils.file_utils import read_text, read_text_if_exists, resolve_template_dir
from ..utils.frameworks import detect_framework
from ..utils.logging import logger
from ..utils.patterns import (
    DOMAIN_ENV_KEY,
    PROJECT_NAME_ENV_KEY,
    TEMPLATE_ENV_KEY,
    extract_env_value,
    extract_itk_version,
    extract_php_version,
    extract_services,
    extract_web_root,
)
from ..utils.validators import require_project_path

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

COMPOSE_FILE = "docker-compose.yml"
ENV_FILE = ".env"
TASKFILE = "Taskfile.yml"
GITHUB_WORKFLOWS_DIR = ".github/workflows"

# Files compared between a project and its template
KEY_FILES: tuple[str, ...] = (
    "docker-compose.yml",
    "docker-compose.server.yml",
    "docker-compose.dev.yml",
    "docker-compose.redirect.yml",
    ".docker/nginx.conf",
    ".docker/templates/default.conf.template",
)

# Only these carry an itk-version comment worth comparing
VERSIONED_SUFFIXES: tuple[str, ...] = (".yml",)

UNKNOWN_VERSION = "unknown"
MISSING_VERSION_NOTE = "Project file missing itk-version comment"
UPDATE_RECOMMENDATION = "Run 'itkdev-docker-compose template:update' to update template files"


def detect_project(path: str) -> dict:
    """
    Inspect a project directory

    Reads docker-compose.yml, .env and framework marker files. The template
    name comes from .env only.

    Args:
        path: Absolute path to the project directory

    Returns:
        ProjectProfile as a camelCase dict

    Raises:
        InvalidInputError: If path is empty
        NotFoundError: If path does not exist
    """
    project = require_project_path(path)
    fields = {"path": path}

    compose = read_text_if_exists(project / COMPOSE_FILE)
    if compose is not None:
        itk_version = extract_itk_version(compose)
        fields.update(
            has_docker_compose=True,
            is_itkdev_project=bool(itk_version),
            itk_version=itk_version,
            php_version=extract_php_version(compose),
            web_root=extract_web_root(compose),
            services=extract_services(compose),
        )

    env = read_text_if_exists(project / ENV_FILE)
    if env is not None:
        fields.update(
            has_env=True,
            template=extract_env_value(env, TEMPLATE_ENV_KEY),
            project_name=extract_env_value(env, PROJECT_NAME_ENV_KEY),
            domain=extract_env_value(env, DOMAIN_ENV_KEY),
        )

    match = detect_framework(project)
    profile = ProjectProfile(
        **fields,
        framework=match.framework,
        framework_version=match.version,
        has_taskfile=(project / TASKFILE).exists(),
        has_github_actions=(project / GITHUB_WORKFLOWS_DIR).exists(),
    )
    return profile.model_dump(by_alias=True)


def detect_template_from_env(project: Path) -> Optional[str]:
    """ITKDEV_TEMPLATE from the project's .env, if any"""
    env = read_text_if_exists(project / ENV_FILE)
    return extract_env_value(env, TEMPLATE_ENV_KEY) if env is not None else None


def _compare_versions(file: str, template_file: Path, project_file: Path,
                      report: ComparisonReport) -> None:
    template_version = extract_itk_version(read_text(template_file))
    project_version = extract_itk_version(read_text(project_file))

    # Untagged on both sides: not tracked
    if not template_version:
        return

    if not project_version:
        report.outdated.append(OutdatedFile(
            file=file,
            project_version=UNKNOWN_VERSION,
            template_version=template_version,
            note=MISSING_VERSION_NOTE,
        ))
    elif project_version != template_version:
        report.outdated.append(OutdatedFile(
            file=file,
            project_version=project_version,
            template_version=template_version,
        ))
    else:
        report.matching.append(file)


def compare_project(path: str, template: Optional[str] = None,
                    templates_dir: Optional[str | Path] = None) -> dict:
    """
    Compare a project's key files against a template

    Key files the template lacks are skipped. A key file the project lacks
    is missing. For versioned files the itk-version comments decide between
    matching and outdated.

    Args:
        path: Absolute path to the project directory
        template: Template name (default: ITKDEV_TEMPLATE from the project's .env)
        templates_dir: Templates root (default: Config.TEMPLATES_DIR)

    Returns:
        ComparisonReport as a camelCase dict

    Raises:
        InvalidInputError: If path is empty or no template can be determined
        NotFoundError: If the path or the template does not exist
    """
    project = require_project_path(path)

    if not template:
        template = detect_template_from_env(project)
    if not template:
        raise InvalidInputError(
            "Could not detect template. Please specify the template parameter.",
            argument="template"
        )

    root = Path(templates_dir) if templates_dir else Config.TEMPLATES_DIR
    template_dir = resolve_template_dir(root, template)

    report = ComparisonReport(
        project_path=path,
        template=template,
        summary=ComparisonSummary(total=0, missing=0, outdated=0, matching=0, up_to_date=True),
    )

    for file in KEY_FILES:
        template_file = template_dir / file
        project_file = project / file

        if not template_file.exists():
            continue

        if not project_file.exists():
            report.missing.append(file)
            continue

        if file.endswith(VERSIONED_SUFFIXES):
            _compare_versions(file, template_file, project_file, report)

    up_to_date = not report.missing and not report.outdated
    report.summary = ComparisonSummary(
        total=len(KEY_FILES),
        missing=len(report.missing),
        outdated=len(report.outdated),
        matching=len(report.matching),
        up_to_date=up_to_date,
    )
    if not up_to_date:
        report.recommendation = UPDATE_RECOMMENDATION

    return report.model_dump(by_alias=True, exclude_none=True)


def register_project_tools(mcp: "FastMCP", templates_dir: Optional[str | Path] = None) -> None:
    """
    Register project detection and comparison tools

    Args:
        mcp: FastMCP server instance
        templates_dir: Templates root (default: Config.TEMPLATES_DIR at call time)
    """

    @mcp.tool()
    def itkdev_detect_project(path: str) -> dict:
        """
        Analyze a directory to detect ITK Dev project configuration, template type, PHP version, and framework

        Args:
            path: Absolute path to the project directory to analyze

        Returns:
            Dictionary with isItkDevProject, template, itkVersion, projectName,
            domain, framework, frameworkVersion, phpVersion, webRoot, services,
            hasTaskfile and hasGitHubActions

        Examples:
            itkdev_detect_project("/home/dev/sites/example")
        """
        with tool_error_context("itkdev_detect_project"):
            result = detect_project(path)
            logger.info(f"Detected project at {path}: template={result['template']}, "
                        f"framework={result['framework']}")
            return result

    @mcp.tool()
    def itkdev_compare_project(path: str, template: Optional[str] = None) -> dict:
        """
        Compare a project's Docker configuration against its template to find missing, outdated, or extra files

        Args:
            path: Absolute path to the project directory
            template: Template to compare against (auto-detected from .env if not provided)

        Returns:
            Dictionary with missing, outdated and matching key files, a summary
            and, when something is out of date, a recommendation

        Examples:
            itkdev_compare_project("/home/dev/sites/example")
            itkdev_compare_project("/home/dev/sites/example", template="drupal-11")
        """
        with tool_error_context("itkdev_compare_project"):
            result = compare_project(path, template, templates_dir)
            summary = result["summary"]
            logger.info(f"Compared {path} with {result['template']}: "
                        f"{summary['missing']} missing, {summary['outdated']} outdated, "
                        f"{summary['matching']} matching")
            return result
