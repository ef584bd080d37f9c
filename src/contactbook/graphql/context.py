"""
Helpers for reading request-scoped dependencies from the GraphQL context
"""

from typing import Any

import strawberry

from ..database.gateway import StorageGateway


def get_gateway_from_info(info: strawberry.Info) -> StorageGateway:
    """Return the storage gateway injected into the execution context."""
    context: Any = info.context
    if isinstance(context, dict):
        gateway = context.get("gateway")
    else:
        gateway = getattr(context, "gateway", None)

    if gateway is None:
        raise RuntimeError("Storage gateway is not available in the GraphQL context")
    return gateway
