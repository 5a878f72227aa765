"""Infrastructure providers."""

# Import bases
from .github import GitHubProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .github import ProdGitHubProvider  # noqa: F401
from .persistence import MemoryPersistenceProvider, ProdPersistenceProvider  # noqa: F401

__all__ = [
    "GitHubProvider",
    "MemoryPersistenceProvider",
    "PersistenceProvider",
    "ProdGitHubProvider",
    "ProdPersistenceProvider",
]
