"""capscope: scope resolution and comparison for MCP server and agent configuration."""

__version__ = "0.1.0"
