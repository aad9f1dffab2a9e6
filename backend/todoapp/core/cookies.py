from datetime import datetime, timezone

from fastapi import Response

from .config import settings

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        httponly=True,
        secure=settings.is_production,
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value="",
        httponly=True,
        secure=settings.is_production,
        path="/",
        expires=EPOCH,
        max_age=0,
    )
