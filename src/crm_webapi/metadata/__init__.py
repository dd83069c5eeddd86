"""
Metadata module

Maps entity logical names to the entity set names used in URLs.
"""

from .interface import IEntitySetResolver, EntitySetResolutionError
from .resolver import PluralizingEntitySetResolver, MetadataEntitySetResolver

__all__ = [
    "IEntitySetResolver",
    "EntitySetResolutionError",
    "PluralizingEntitySetResolver",
    "MetadataEntitySetResolver"
]
