"""Bridge between the YApi interface-documentation platform and MCP tool-calling agents."""

__version__ = "1.0.0"
