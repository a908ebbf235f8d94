"""Factory for creating vector indices with registry pattern."""

import logging
from typing import Any, Callable, Dict, Iterable, List, Type

logger = logging.getLogger(__name__)

# Registry to hold index classes
_INDEX_REGISTRY: Dict[str, Type] = {}


def register_index(name: str) -> Callable:
    """
    Decorator to register an index class.
    
    Usage:
        @register_index("string")
        class StringIndex(VectorIndex):
            ...
    """
    def decorator(cls: Type) -> Type:
        if name in _INDEX_REGISTRY:
            logger.warning(f"Overwriting existing index kind: {name}")
        _INDEX_REGISTRY[name] = cls
        logger.debug(f"Registered index kind: {name} -> {cls.__name__}")
        return cls
    return decorator


def get_registered_indices() -> List[str]:
    """Return list of registered index kinds."""
    return list(_INDEX_REGISTRY.keys())


class IndexFactory:
    """
    Factory that creates indices by kind name.
    
    Usage:
        index = IndexFactory.create("string", ["alice", "bob"])
    """

    @classmethod
    def create(cls, kind: str, keys: Iterable[Any] = ()):
        """
        Create an index instance.
        
        Args:
            kind: Index kind ('int', 'uint32', 'string')
            keys: Initial keys
            
        Returns:
            VectorIndex instance
            
        Raises:
            ValueError: If kind is unknown
        """
        if kind not in _INDEX_REGISTRY:
            available = get_registered_indices()
            raise ValueError(
                f"Unknown index kind: '{kind}'. "
                f"Available: {available}"
            )
        
        return _INDEX_REGISTRY[kind](keys)
