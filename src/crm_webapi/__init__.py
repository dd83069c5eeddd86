"""
CRM Web API Request Builder

Builds and sends Web API actions and functions for CRM organizations,
from a catalog of predefined requests or ad hoc request descriptors.
"""

__version__ = "0.1.0"

from .requests import Request, build_url, get_request

__all__ = ["Request", "build_url", "get_request"]
