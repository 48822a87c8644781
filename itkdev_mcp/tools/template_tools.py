"""
Template catalog and template file tools
Reads the templates directory of the itkdev-docker repository
"""

from pathlib import Path
from typing import TYPE_CHECKING, Optional

from ..config import Config
from ..errors import NotFoundError
from ..schemas import TemplateFileListing, TemplateInfo
from ..utils.context_managers import tool_error_context
from ..utils.file_utils import (
    list_files,
    list_template_names,
    read_text,
    read_text_if_exists,
    resolve_template_dir,
)
from ..utils.logging import logger
from ..utils.patterns import (
    extract_itk_version,
    extract_php_version,
    extract_web_root,
    has_drush,
    has_memcached,
    natural_sort_key,
)
from ..utils.validators import ensure_within, require_argument

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

COMPOSE_FILE = "docker-compose.yml"

TEMPLATES_DIR_NOT_FOUND = "Templates directory not found"
INSTALL_HINT = "Use 'itkdev-docker-compose template:install <name>' to install a template."


def _templates_root(templates_dir: Optional[str | Path]) -> Path:
    return Path(templates_dir) if templates_dir else Config.TEMPLATES_DIR


def read_template_info(template_dir: Path) -> Optional[TemplateInfo]:
    """Scrape catalog details from a template's docker-compose.yml

    Returns None when the template has no docker-compose.yml.
    """
    content = read_text_if_exists(template_dir / COMPOSE_FILE)
    if content is None:
        return None

    return TemplateInfo(
        name=template_dir.name,
        php_version=extract_php_version(content),
        web_root=extract_web_root(content),
        has_memcached=has_memcached(content),
        has_drush=has_drush(content),
        itk_version=extract_itk_version(content),
    )


def scan_templates(templates_dir: Optional[str | Path] = None) -> list[TemplateInfo]:
    """Catalog entries for every template with a docker-compose.yml, naturally sorted"""
    root = _templates_root(templates_dir)

    templates = []
    for entry in root.iterdir():
        if not entry.is_dir():
            continue
        info = read_template_info(entry)
        if info is not None:
            templates.append(info)

    return sorted(templates, key=lambda t: natural_sort_key(t.name))


def format_template_table(templates: list[TemplateInfo]) -> str:
    """Markdown table of catalog entries with a total and install hint"""
    output = "Available ITK Dev Docker Templates:\n\n"
    output += "| Template | PHP | Web Root | Memcached | Drush | ITK Version |\n"
    output += "|----------|-----|----------|-----------|-------|-------------|\n"

    for t in templates:
        output += (
            f"| {t.name} | {t.php_version or '-'} | {t.web_root or '-'} "
            f"| {'Yes' if t.has_memcached else 'No'} | {'Yes' if t.has_drush else 'No'} "
            f"| {t.itk_version or '-'} |\n"
        )

    output += f"\nTotal: {len(templates)} templates\n"
    output += f"\n{INSTALL_HINT}"

    return output


def list_templates(templates_dir: Optional[str | Path] = None) -> str:
    """
    Render the template catalog

    A missing templates directory is reported in the returned text rather
    than raised.

    Args:
        templates_dir: Templates root (default: Config.TEMPLATES_DIR)

    Returns:
        Formatted catalog report
    """
    root = _templates_root(templates_dir)
    if not root.is_dir():
        logger.warning(f"Templates directory not found: {root}")
        return TEMPLATES_DIR_NOT_FOUND

    templates = scan_templates(root)
    logger.info(f"Listed {len(templates)} templates")
    return format_template_table(templates)


def get_template_files(template: str, templates_dir: Optional[str | Path] = None) -> dict:
    """
    List every file in a template

    Args:
        template: Template name (e.g. "drupal-11")
        templates_dir: Templates root (default: Config.TEMPLATES_DIR)

    Returns:
        TemplateFileListing as a dict

    Raises:
        InvalidInputError: If template is empty
        NotFoundError: If the template does not exist; the message names
            the templates that do
    """
    require_argument(template, "Template name is required", argument="template")
    root = _templates_root(templates_dir)

    try:
        template_dir = resolve_template_dir(root, template)
    except NotFoundError as e:
        available = ", ".join(list_template_names(root))
        raise NotFoundError(
            f"Template '{template}' not found. Available: {available}",
            path=e.path
        ) from e

    files = list_files(template_dir)
    listing = TemplateFileListing(
        template=template,
        path=str(template_dir),
        files=files,
        count=len(files),
    )
    return listing.model_dump()


def get_template_content(template: str, file: str,
                         templates_dir: Optional[str | Path] = None) -> str:
    """
    Raw content of one template file

    Args:
        template: Template name
        file: Path relative to the template directory
        templates_dir: Templates root (default: Config.TEMPLATES_DIR)

    Raises:
        InvalidInputError: If an argument is empty or file escapes the template
        NotFoundError: If the file does not exist
    """
    require_argument(template, "Template name is required", argument="template")
    require_argument(file, "File path is required", argument="file")

    not_found = f"File '{file}' not found in template '{template}'"
    template_dir = resolve_template_dir(_templates_root(templates_dir), template,
                                        not_found_message=not_found)

    file_path = ensure_within(template_dir, template_dir / file,
                              f"File path '{file}' is outside template '{template}'")
    if not file_path.is_file():
        raise NotFoundError(not_found, path=str(file_path))

    return read_text(file_path)


def register_template_tools(mcp: "FastMCP", templates_dir: Optional[str | Path] = None) -> None:
    """
    Register template catalog and file tools

    Args:
        mcp: FastMCP server instance
        templates_dir: Templates root (default: Config.TEMPLATES_DIR at call time)
    """

    @mcp.tool()
    def itkdev_list_templates() -> str:
        """List all available ITK Dev Docker templates with their PHP versions and characteristics"""
        with tool_error_context("itkdev_list_templates"):
            return list_templates(templates_dir)

    @mcp.tool()
    def itkdev_get_template_files(template: str) -> dict:
        """
        List all files that would be installed by a specific template

        Args:
            template: Template name (e.g., drupal-11, symfony-6, drupal-module)
        """
        with tool_error_context("itkdev_get_template_files"):
            result = get_template_files(template, templates_dir)
            logger.info(f"Listed {result['count']} files in template {template}")
            return result

    @mcp.tool()
    def itkdev_get_template_content(template: str, file: str) -> str:
        """
        Get the content of a specific file from a template

        Args:
            template: Template name (e.g., drupal-11)
            file: Relative file path within the template (e.g., docker-compose.yml)
        """
        with tool_error_context("itkdev_get_template_content"):
            content = get_template_content(template, file, templates_dir)
            logger.info(f"Read {file} from template {template}")
            return content
