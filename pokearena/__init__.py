"""pokearena: one-on-one turn-based creature battles served as MCP tools."""
__version__ = "0.1.0"
