"""
Configuration management for ITK Dev Docker MCP Server
Environment-based configuration with filesystem defaults
"""

import os
from pathlib import Path


class Config:
    """Server configuration with environment variable support"""

    # Server metadata
    SERVER_NAME: str = os.getenv("MCP_SERVER_NAME", "itkdev-docker")
    SERVER_VERSION: str = os.getenv("MCP_SERVER_VERSION", "1.0.0")

    # Environment
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    ENABLE_LOGGING: bool = os.getenv("ENABLE_LOGGING", "true").lower() == "true"

    # Paths - default to the itkdev-docker checkout this server lives in
    _DEFAULT_ROOT = str(Path(__file__).parent.parent.parent)

    REPO_ROOT: Path = Path(os.getenv("ITKDEV_DOCKER_ROOT", _DEFAULT_ROOT))
    TEMPLATES_DIR: Path = Path(os.getenv("ITKDEV_TEMPLATES_DIR", str(REPO_ROOT / "templates")))
    DOCS_DIR: Path = Path(os.getenv("ITKDEV_DOCS_DIR", str(REPO_ROOT / "docs")))

    # Resource URIs: <scheme>://docs/<key>
    RESOURCE_SCHEME: str = "itkdev"

    @classmethod
    def validate(cls) -> bool:
        """Validate configuration"""
        errors = []

        if not cls.REPO_ROOT.is_dir():
            errors.append(f"itkdev-docker repository not found: {cls.REPO_ROOT}")

        if errors:
            raise ValueError("Configuration errors:\n" + "\n".join(f"  - {e}" for e in errors))

        return True

    @classmethod
    def display(cls) -> str:
        """Display configuration (for debugging)"""
        return f"""
ITK Dev Docker MCP Server Configuration
=======================================
Server: {cls.SERVER_NAME} v{cls.SERVER_VERSION}
Debug: {cls.DEBUG}

Paths:
  Repository: {cls.REPO_ROOT}
  Templates: {cls.TEMPLATES_DIR}
  Docs: {cls.DOCS_DIR}

Resources:
  Scheme: {cls.RESOURCE_SCHEME}://docs/<key>
=======================================
"""
