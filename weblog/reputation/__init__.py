"""Comment reputation service clients and their lifecycle manager."""

from .akismet import AkismetClient
from .base import ReputationClient
from .factory import available_clients, create_client
from .manager import ClientHandle, ReputationClientManager

__all__ = [
    "AkismetClient",
    "ClientHandle",
    "ReputationClient",
    "ReputationClientManager",
    "available_clients",
    "create_client",
]
