"""
MCP Tools for the CRM Web API server
"""

from .registry import ToolRegistry

__all__ = ["ToolRegistry"]
