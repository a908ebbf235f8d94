"""Factory for creating sparse vectors with registry pattern."""

import logging
from typing import Any, Callable, Dict, Iterable, List, Sequence, Type

from sparsevec.core.config import VectorSettings

logger = logging.getLogger(__name__)

# Registry to hold vector classes
_VECTOR_REGISTRY: Dict[str, Type] = {}


def register_vector(name: str) -> Callable:
    """
    Decorator to register a vector class.
    
    Usage:
        @register_vector("uint32")
        class SparseVectorUint32(SortedArrayVector):
            ...
    """
    def decorator(cls: Type) -> Type:
        if name in _VECTOR_REGISTRY:
            logger.warning(f"Overwriting existing vector kind: {name}")
        _VECTOR_REGISTRY[name] = cls
        logger.debug(f"Registered vector kind: {name} -> {cls.__name__}")
        return cls
    return decorator


def get_registered_vectors() -> List[str]:
    """Return list of registered vector kinds."""
    return list(_VECTOR_REGISTRY.keys())


class VectorFactory:
    """
    Factory that creates vectors based on config.
    
    Usage:
        # From config
        vec = VectorFactory.from_config(Config.load(), indices, values)
        
        # Or directly
        vec = VectorFactory.create("map", indices, values)
    """

    @classmethod
    def create(cls, kind: str, indices: Iterable[Any], values: Sequence[float], **kwargs):
        """
        Create a vector instance.
        
        Args:
            kind: Vector kind ('generic', 'uint32', 'map')
            indices: Keys of present entries
            values: Value for each key
            **kwargs: Vector-specific options (check_duplicates, index_kind)
            
        Returns:
            Vector instance
            
        Raises:
            ValueError: If kind is unknown
        """
        if kind not in _VECTOR_REGISTRY:
            available = get_registered_vectors()
            raise ValueError(
                f"Unknown vector kind: '{kind}'. "
                f"Available: {available}"
            )
        
        return _VECTOR_REGISTRY[kind](indices, values, **kwargs)

    @classmethod
    def from_config(cls, config: Any, indices: Iterable[Any], values: Sequence[float]):
        """
        Create a vector using the 'vectors' settings.
        
        Args:
            config: Config instance or 'vectors' section dict
            indices: Keys of present entries
            values: Value for each key
            
        Returns:
            Vector instance
        """
        settings = VectorSettings.from_config(config)
        logger.debug(f"Creating vector from config: kind={settings.kind}")

        kwargs = {"check_duplicates": settings.check_duplicates}
        if settings.kind == "generic":
            kwargs["index_kind"] = settings.index_kind
        return cls.create(settings.kind, indices, values, **kwargs)
