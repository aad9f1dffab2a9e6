from .actions import router as actions_router
from .auth import router as auth_router
from .session import router as session_router
from .todos import router as todos_router

__all__ = ["actions_router", "auth_router", "session_router", "todos_router"]
