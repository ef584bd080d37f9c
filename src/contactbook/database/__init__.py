"""
Database module for the Contact Book backend
"""

from .connection import create_gateway, open_gateway
from .gateway import ExecuteResult, StorageGateway

__all__ = ["ExecuteResult", "StorageGateway", "create_gateway", "open_gateway"]
