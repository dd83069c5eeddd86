"""
Request Descriptor

Value template describing one Web API action or function.
"""

import dataclasses
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from ..endpoint.interface import IEndpointProvider
from ..metadata.interface import IEntitySetResolver


Pair = Tuple[str, Any]
PairsInput = Union[Mapping[str, Any], Iterable[Any], None]

# Vendor client spellings accepted in overrides
FIELD_ALIASES: Dict[str, str] = {
    "entityName": "entity_name",
    "entityId": "entity_id",
    "urlParams": "url_params",
    "async": "is_async",
}


def _to_pairs(value: PairsInput) -> Optional[Tuple[Pair, ...]]:
    """Normalize a mapping, a sequence of pairs or {"key", "value"} dicts into ordered pairs"""
    if value is None:
        return None
    if isinstance(value, Mapping):
        return tuple((str(k), v) for k, v in value.items())

    pairs = []
    for item in value:
        if isinstance(item, Mapping):
            pairs.append((str(item["key"]), item["value"]))
        else:
            key, item_value = item
            pairs.append((str(key), item_value))
    return tuple(pairs)


@dataclass(frozen=True)
class Request:
    """
    Describes how to invoke one Web API operation.

    Instances are values: derive specialized requests with with_(), never
    mutate them. Defaults match an empty, unbound, asynchronous request.
    """

    method: str = ""
    name: str = ""
    bound: bool = False
    entity_name: str = ""
    entity_id: str = ""
    payload: Any = None
    headers: Optional[Tuple[Pair, ...]] = None
    url_params: Optional[Tuple[Pair, ...]] = None
    is_async: bool = True
    extras: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", _to_pairs(self.headers))
        object.__setattr__(self, "url_params", _to_pairs(self.url_params))
        object.__setattr__(self, "extras", MappingProxyType(dict(self.extras)))

    def with_(self, overrides: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "Request":
        """
        Derive a new request with the given fields overridden.

        Fields absent from the overrides keep this request's values. Keys that
        are not request fields are kept in extras and play no part in URL
        construction. This request is left untouched.

        Args:
            overrides: Field values keyed by Python or vendor client name
            **kwargs: Additional field values, applied after overrides

        Returns:
            Derived request
        """
        merged: Dict[str, Any] = dict(overrides or {})
        merged.update(kwargs)

        changes: Dict[str, Any] = {}
        extras: Dict[str, Any] = dict(self.extras)
        for key, value in merged.items():
            key = FIELD_ALIASES.get(key, key)
            if key in _FIELD_NAMES:
                changes[key] = value
            else:
                extras[key] = value

        changes["extras"] = extras
        return dataclasses.replace(self, **changes)

    def get(self, key: str, default: Any = None) -> Any:
        """Read a field by Python name, vendor client name or extras key"""
        key = FIELD_ALIASES.get(key, key)
        if key in _FIELD_NAMES:
            return getattr(self, key)
        return self.extras.get(key, default)

    def build_url(
        self, endpoint_provider: IEndpointProvider, entity_set_resolver: IEntitySetResolver
    ) -> str:
        """Build the invocation URL against the provider's current base URL"""
        from .url_builder import build_url

        return build_url(self, endpoint_provider.get_api_url(), entity_set_resolver)

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation of the request fields"""
        return {
            "method": self.method,
            "name": self.name,
            "bound": self.bound,
            "entity_name": self.entity_name,
            "entity_id": self.entity_id,
            "payload": self.payload,
            "headers": [list(pair) for pair in self.headers] if self.headers is not None else None,
            "url_params": [list(pair) for pair in self.url_params] if self.url_params is not None else None,
            "is_async": self.is_async,
            "extras": dict(self.extras),
        }


_FIELD_NAMES = frozenset(f.name for f in dataclasses.fields(Request)) - {"extras"}
