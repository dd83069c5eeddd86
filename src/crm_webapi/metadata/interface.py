"""
Entity Set Resolver Interface

Defines contract for mapping entity logical names to entity set names
"""

from abc import ABC, abstractmethod
from typing import Dict, Any


class IEntitySetResolver(ABC):
    """Interface for entity set resolvers"""

    @abstractmethod
    def get_set_name(self, logical_name: str) -> str:
        """
        Get the entity set (collection) name for an entity.

        Args:
            logical_name: Entity logical name (e.g., 'account')

        Returns:
            Entity set name used in URLs (e.g., 'accounts')

        Raises:
            EntitySetResolutionError: If the name cannot be resolved
        """
        pass

    @abstractmethod
    def get_resolver_info(self) -> Dict[str, Any]:
        """
        Get resolver implementation information.

        Returns:
            Resolver metadata (type, cache size, etc.)
        """
        pass


class EntitySetResolutionError(LookupError):
    """Entity set name could not be resolved"""
    pass
