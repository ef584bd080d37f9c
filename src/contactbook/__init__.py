"""
Contact Book backend
GraphQL contact store backed by SQLite
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
