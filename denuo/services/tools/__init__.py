"""Agent tool surface over the stored content."""

from .container import ToolsContainer, build_tools_container
from .toolkit import ContentToolkit

__all__ = ["ContentToolkit", "ToolsContainer", "build_tools_container"]
