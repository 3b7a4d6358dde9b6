"""Infrastructure providers."""

# Import bases
from .likeable import LikeableAggregatorProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "LikeableAggregatorProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
