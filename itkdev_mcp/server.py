"""
ITK Dev Docker MCP Server

Gives AI assistants access to the ITK Dev Docker documentation and templates,
plus tools for detecting and comparing projects built from those templates.
"""

import signal
from pathlib import Path
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .config import Config
from .resources.documentation import register_doc_resources
from .tools.project_tools import register_project_tools
from .tools.template_tools import register_template_tools
from .utils.logging import logger


def create_server(templates_dir: Optional[str | Path] = None,
                  docs_dir: Optional[str | Path] = None) -> FastMCP:
    """
    Create and configure the MCP server

    Args:
        templates_dir: Templates root (default: Config.TEMPLATES_DIR)
        docs_dir: Documentation directory (default: Config.DOCS_DIR)

    Returns:
        Configured FastMCP server instance
    """
    if Config.DEBUG:
        logger.info(Config.display())

    resolved_templates = Path(templates_dir) if templates_dir else Config.TEMPLATES_DIR
    if not resolved_templates.is_dir():
        logger.warning(f"Templates directory not found: {resolved_templates}")

    mcp = FastMCP(Config.SERVER_NAME)

    logger.info("Registering tools...")
    register_template_tools(mcp, templates_dir)  # Catalog, file listing, file content
    register_project_tools(mcp, templates_dir)  # Detection and comparison
    register_doc_resources(mcp, docs_dir)

    # =========================================================================
    # PROMPTS - Workflows built from the tools above
    # =========================================================================

    @mcp.prompt()
    def update_project_from_template(path: str) -> str:
        """Bring a project's Docker setup in line with its ITK Dev template

        Args:
            path: Absolute path to the project directory

        Returns:
            A structured prompt for updating the project
        """
        return f"""# Update Project: {path}

## Your Task
Find where the project at "{path}" has drifted from its ITK Dev Docker template
and propose the changes needed to bring it up to date.

## Workflow

### Step 1: Detect
Use `itkdev_detect_project("{path}")` to find the template, framework and PHP version.
If no template is reported, ask which template the project was installed from.

### Step 2: Compare
Use `itkdev_compare_project("{path}")` to list missing and outdated key files.

### Step 3: Fetch Template Files
For each missing or outdated file, use
`itkdev_get_template_content(template, file)` to read the current template version.

### Step 4: Propose Changes
For every file:
- Show what differs between the project's copy and the template
- Keep project-specific settings (project name, domain, extra services)
- Update the `# itk-version` comment to the template's version

## Output Format
1. Summary (template, versions, number of files affected)
2. Per-file changes
3. Commands to run afterwards (e.g. `itkdev-docker-compose template:update`)
"""

    @mcp.prompt()
    def choose_template(framework: str, php_version: str = "") -> str:
        """Pick the ITK Dev Docker template for a new project

        Args:
            framework: Framework of the new project (e.g. "drupal", "symfony")
            php_version: Required PHP version, if any (e.g. "8.3")

        Returns:
            A structured prompt for choosing a template
        """
        php_requirement = f"PHP {php_version}" if php_version else "the newest PHP version available"

        return f"""# Choose Template

## Requirements
- **Framework**: {framework}
- **PHP**: {php_requirement}

## Workflow

### Step 1: List Templates
Use `itkdev_list_templates()` to see every template with its PHP version,
web root and services.

### Step 2: Narrow Down
Keep templates whose name matches "{framework}" and whose PHP version fits.
Read `{Config.RESOURCE_SCHEME}://docs/cli` for how templates are installed.

### Step 3: Inspect
Use `itkdev_get_template_files(template)` on the best candidate and
`itkdev_get_template_content(template, "docker-compose.yml")` to confirm
the services it provides.

## Output Format
- Recommended template and why
- Files it installs
- Install command: `itkdev-docker-compose template:install <name>`
"""

    logger.info(f"Server '{Config.SERVER_NAME}' v{Config.SERVER_VERSION} ready")
    return mcp


def _handle_shutdown(signum, frame):
    """Turn SIGTERM into a normal exit so the transport is closed"""
    logger.info(f"Received signal {signum}, shutting down")
    raise SystemExit(0)


def main():
    """Main entry point"""
    try:
        Config.validate()
        mcp = create_server()
    except Exception as e:
        logger.critical(f"Server failed to start: {e}")
        raise

    signal.signal(signal.SIGTERM, _handle_shutdown)

    try:
        mcp.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")


if __name__ == "__main__":
    main()
