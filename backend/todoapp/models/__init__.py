from .user import User
from .todo import Todo
from .revoked_token import RevokedToken

__all__ = ["User", "Todo", "RevokedToken"]
