"""
Parameter Encoder

Renders function parameters as aliased OData parameters:
signature "(Name=@p1,Other=@p2)" and values "?@p1=v1&@p2=v2".
"""

from typing import Any, Iterable, List, Tuple


AliasedParameter = Tuple[str, str, Any]


def alias_parameters(params: Iterable[Tuple[str, Any]]) -> List[AliasedParameter]:
    """
    Assign positional aliases to parameters in iteration order.

    Both encoders consume this list, so @pN names the same parameter
    in the signature and in the query string.

    Args:
        params: Ordered (name, value) pairs

    Returns:
        List of (name, alias, value) triples, aliases starting at @p1
    """
    return [
        (name, f"@p{position}", value)
        for position, (name, value) in enumerate(params, start=1)
    ]


def format_value(value: Any) -> str:
    """Render a parameter value as an OData literal"""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_signature(aliased: List[AliasedParameter]) -> str:
    if not aliased:
        return ""
    return "(" + ",".join(f"{name}={alias}" for name, alias, _ in aliased) + ")"


def encode_values(aliased: List[AliasedParameter]) -> str:
    if not aliased:
        return ""
    return "?" + "&".join(f"{alias}={format_value(value)}" for _, alias, value in aliased)


def encode_parameters(params: Iterable[Tuple[str, Any]]) -> Tuple[str, str]:
    """
    Encode parameters into signature and query string.

    Returns:
        (signature, values); both empty when there are no parameters
    """
    aliased = alias_parameters(params)
    return encode_signature(aliased), encode_values(aliased)
