"""
Requests module

Request descriptors, parameter encoding, URL construction and the catalog
of predefined Web API actions and functions.
"""

from .descriptor import Request
from .params import alias_parameters, encode_parameters
from .url_builder import build_url, CRM_NAMESPACE
from .catalog import REQUESTS, UnknownRequestError, get_request, search_requests

__all__ = [
    "Request",
    "alias_parameters",
    "encode_parameters",
    "build_url",
    "CRM_NAMESPACE",
    "REQUESTS",
    "UnknownRequestError",
    "get_request",
    "search_requests",
]
