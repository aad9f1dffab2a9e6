from .base import RevokedTokenStore, TodoStore, UserStore
from .memory import InMemoryRevokedTokenStore, InMemoryTodoStore, InMemoryUserStore
from .todos import SQLTodoStore
from .tokens import SQLRevokedTokenStore
from .users import SQLUserStore

__all__ = [
    "UserStore",
    "TodoStore",
    "RevokedTokenStore",
    "SQLUserStore",
    "SQLTodoStore",
    "SQLRevokedTokenStore",
    "InMemoryUserStore",
    "InMemoryTodoStore",
    "InMemoryRevokedTokenStore",
]
