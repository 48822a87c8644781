"""Context managers shared by the tool wrappers"""

from contextlib import contextmanager
from typing import Generator
import logging

from mcp.server.fastmcp.exceptions import ToolError

from ..errors import ItkDevError

logger = logging.getLogger(__name__)


@contextmanager
def tool_error_context(operation: str) -> Generator:
    """Translate tool failures for the MCP dispatcher

    ItkDevError becomes a ToolError carrying the same message; FastMCP
    returns any tool exception to the client as an isError result, so
    nothing escapes to the transport.

    Args:
        operation: Tool name for logging

    Example:
        with tool_error_context("itkdev_detect_project"):
            return detect_project(path)
    """
    try:
        yield
    except ItkDevError as e:
        logger.warning(f"{operation} rejected: {e}")
        raise ToolError(str(e)) from e
    except Exception as e:
        logger.error(f"Unexpected error in {operation}: {e}", exc_info=True)
        raise
