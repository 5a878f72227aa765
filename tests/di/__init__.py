"""Mock providers for testing.

In-memory persistence is provided by
``pinwall.util.di.infrastructure.MemoryPersistenceProvider``.
"""

from .github import MockGitHubProvider
from .container import build_test_container

__all__ = [
    "MockGitHubProvider",
    "build_test_container",
]
