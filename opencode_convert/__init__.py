"""Convert a Claude Code configuration tree into an OpenCode config directory."""

__version__ = "0.1.0"
