from functools import lru_cache
from typing import Any, Optional

from fastapi import Depends, Request, Response
from sqlmodel import Session

from todoapp.core.database import get_session
from todoapp.schemas.session import SessionUser
from todoapp.services.actions import TodoActions
from todoapp.services.auth_library import EmailPasswordAuth
from todoapp.services.identity import FirebaseIdentityVerifier
from todoapp.services.session import IdentityVerifier, SessionResolver
from todoapp.services.todos import MALFORMED_BODY, TodoService
from todoapp.services.views import HeaderViewRefresher
from todoapp.stores import SQLRevokedTokenStore, SQLTodoStore, SQLUserStore, UserStore


@lru_cache
def get_identity_verifier() -> IdentityVerifier:
    return FirebaseIdentityVerifier()


def get_user_store(session: Session = Depends(get_session)) -> UserStore:
    return SQLUserStore(session)


def get_todo_store(session: Session = Depends(get_session)) -> SQLTodoStore:
    return SQLTodoStore(session)


def get_auth_library(
    users: UserStore = Depends(get_user_store),
    session: Session = Depends(get_session),
) -> EmailPasswordAuth:
    return EmailPasswordAuth(users, SQLRevokedTokenStore(session))


def get_session_resolver(
    verifier: IdentityVerifier = Depends(get_identity_verifier),
    auth_library: EmailPasswordAuth = Depends(get_auth_library),
    users: UserStore = Depends(get_user_store),
) -> SessionResolver:
    return SessionResolver(verifier, auth_library, users)


def get_session_user(
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
) -> Optional[SessionUser]:
    return resolver.resolve(request)


def get_todo_service(
    store: SQLTodoStore = Depends(get_todo_store),
    user: Optional[SessionUser] = Depends(get_session_user),
) -> TodoService:
    return TodoService(store, user)


def get_todo_actions(
    response: Response,
    store: SQLTodoStore = Depends(get_todo_store),
    user: Optional[SessionUser] = Depends(get_session_user),
) -> TodoActions:
    return TodoActions(store, user, HeaderViewRefresher(response))


async def json_body(request: Request) -> Any:
    """Parsed JSON body, or ``MALFORMED_BODY`` when it does not parse."""
    try:
        return await request.json()
    except ValueError:
        return MALFORMED_BODY
