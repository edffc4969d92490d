from app.client.api import ApiError, BoardApiClient
from app.client.auth import AuthGate, AuthPolicy, FileFlagStore, MemoryFlagStore
from app.client.board import BoardNotReady, BoardStatus, BoardViewModel

__all__ = [
    "ApiError",
    "AuthGate",
    "AuthPolicy",
    "BoardApiClient",
    "BoardNotReady",
    "BoardStatus",
    "BoardViewModel",
    "FileFlagStore",
    "MemoryFlagStore",
]
