"""seedmerge - merge seed entries into an MCP server registry file."""

__version__ = "0.1.0"
