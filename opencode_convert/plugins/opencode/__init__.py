"""OpenCode plugin: converts a Claude Code configuration tree to OpenCode."""

from .mcp import McpRegistryConverter
from .orchestrator import OpenCodeOrchestrator
from .parser import FrontmatterParser
from .renderer import render_frontmatter

__all__ = [
    "FrontmatterParser",
    "McpRegistryConverter",
    "OpenCodeOrchestrator",
    "render_frontmatter",
]
