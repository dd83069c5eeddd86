"""
URL Builder

Composes the base API URL, request fields and encoded parameters into the
URL that invokes a Web API action or function.
"""

import structlog

from ..metadata.interface import IEntitySetResolver
from .descriptor import Request
from .params import encode_parameters

logger = structlog.get_logger(__name__)


CRM_NAMESPACE = "Microsoft.Dynamics.CRM."
EMPTY_PARAMETERS = "()"


def normalize_entity_id(entity_id: str) -> str:
    """Strip enclosing braces from a record id"""
    return entity_id.strip("{}")


def build_url(request: Request, base_url: str, entity_set_resolver: IEntitySetResolver) -> str:
    """
    Build the invocation URL for a request.

    Bound requests with a record id get an "<entitySet>(<id>)/" segment and
    a namespace-qualified name. No validation happens here: an incomplete
    request yields a well-formed but wrong URL. Resolver errors propagate.

    Args:
        request: Request to invoke
        base_url: Web API base URL, ending with "/"
        entity_set_resolver: Maps entity logical names to entity set names

    Returns:
        Full request URL
    """
    url = base_url

    if request.bound and request.entity_id:
        entity_id = normalize_entity_id(request.entity_id)
        entity_set = entity_set_resolver.get_set_name(request.entity_name)
        url += f"{entity_set}({entity_id})/"

    # Containment, not prefix: names already carrying the namespace anywhere are left alone
    if request.bound and CRM_NAMESPACE not in request.name:
        url += CRM_NAMESPACE

    url += request.name

    if request.url_params:
        signature, values = encode_parameters(request.url_params)
        url += signature + values
    else:
        url += EMPTY_PARAMETERS

    logger.debug("Built request URL", request_name=request.name, url=url)
    return url
