"""
Documentation resources

Each key maps to a markdown file in the itkdev-docker docs directory and is
served at <scheme>://docs/<key>.
"""

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, Optional

from ..config import Config
from ..errors import NotFoundError
from ..utils.file_utils import read_text
from ..utils.logging import logger

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

MARKDOWN_MIME_TYPE = "text/markdown"


@dataclass(frozen=True)
class DocResource:
    filename: str
    name: str
    description: str


DOCS: Mapping[str, DocResource] = MappingProxyType({
    "cli": DocResource(
        filename="itkdev-docker-cli.md",
        name="ITK Dev Docker CLI",
        description="CLI tool commands, templates, Traefik setup, and complete setup procedures",
    ),
    "compose": DocResource(
        filename="itkdev-docker-compose.md",
        name="ITK Dev Docker Compose",
        description="Docker Compose patterns, service configurations, and server deployments",
    ),
    "taskfile": DocResource(
        filename="itkdev-task-files.md",
        name="ITK Dev Taskfile",
        description="Taskfile automation patterns for development workflows",
    ),
})


def doc_uri(key: str, scheme: Optional[str] = None) -> str:
    return f"{scheme or Config.RESOURCE_SCHEME}://docs/{key}"


def read_doc(key: str, docs_dir: Optional[str | Path] = None,
             docs: Mapping[str, DocResource] = DOCS) -> str:
    """
    Read a documentation file by resource key

    Args:
        key: Resource key (cli, compose, taskfile)
        docs_dir: Documentation directory (default: Config.DOCS_DIR)
        docs: Resource table (default: DOCS)

    Raises:
        NotFoundError: If the key is unknown or its file is missing
    """
    doc = docs.get(key)
    if doc is None:
        raise NotFoundError(f"Unknown resource: {doc_uri(key)}")

    path = (Path(docs_dir) if docs_dir else Config.DOCS_DIR) / doc.filename
    if not path.is_file():
        raise NotFoundError(f"Documentation file not found: {path}", path=str(path))

    return read_text(path)


def register_doc_resources(mcp: "FastMCP", docs_dir: Optional[str | Path] = None,
                           docs: Mapping[str, DocResource] = DOCS) -> None:
    """
    Register one static resource per documentation file

    Args:
        mcp: FastMCP server instance
        docs_dir: Documentation directory (default: Config.DOCS_DIR at read time)
        docs: Resource table (default: DOCS)
    """
    for key, doc in docs.items():
        _register_doc(mcp, key, doc, docs_dir, docs)


def _register_doc(mcp: "FastMCP", key: str, doc: DocResource,
                  docs_dir: Optional[str | Path], docs: Mapping[str, DocResource]) -> None:

    @mcp.resource(doc_uri(key), name=doc.name, description=doc.description,
                  mime_type=MARKDOWN_MIME_TYPE)
    def read_documentation() -> str:
        content = read_doc(key, docs_dir, docs)
        logger.info(f"Served documentation resource: {key}")
        return content
