"""
Brazilian ZIP code (CEP) lookup exposed as an MCP tool.
"""

__version__ = "1.0.0"
