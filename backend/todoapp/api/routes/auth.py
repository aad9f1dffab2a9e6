from typing import Any, Optional

from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from todoapp.api.deps import get_auth_library, get_identity_verifier, get_user_store, json_body
from todoapp.api.responses import error_response
from todoapp.core.config import settings
from todoapp.core.cookies import clear_session_cookie, set_session_cookie
from todoapp.core.security import parse_bearer
from todoapp.schemas.auth import LoginIn, SignupIn, UserOut
from todoapp.services.auth_library import EmailPasswordAuth, IssuedSession
from todoapp.services.session import IdentityVerifier
from todoapp.services.sign_in import sync_from_bearer_token
from todoapp.stores import UserStore

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _invalid_payload(exc: ValidationError) -> JSONResponse:
    first = exc.errors()[0]
    field = ".".join(str(part) for part in first["loc"]) or "body"
    return JSONResponse({"error": f"Invalid {field}: {first['msg']}"}, status_code=400)


def _parse(model: type[BaseModel], payload: Any):
    if not isinstance(payload, dict):
        return None, JSONResponse({"error": "Invalid JSON body."}, status_code=400)
    try:
        return model.model_validate(payload), None
    except ValidationError as exc:
        return None, _invalid_payload(exc)


def _session_response(issued: IssuedSession) -> JSONResponse:
    response = JSONResponse({"user": UserOut.from_model(issued.user).to_json()})
    set_session_cookie(response, issued.token)
    return response


@router.post("/firebase")
def firebase_sign_in(
    authorization: Optional[str] = Header(default=None),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
    users: UserStore = Depends(get_user_store),
):
    result = sync_from_bearer_token(authorization, verifier, users)
    if not result.ok:
        return error_response(result.error)

    response = JSONResponse({"status": "success", "userId": result.value.user_id})
    set_session_cookie(response, result.value.token)
    return response


@router.post("/sign-up/email")
def sign_up(payload: Any = Depends(json_body), auth: EmailPasswordAuth = Depends(get_auth_library)):
    data, invalid = _parse(SignupIn, payload)
    if invalid:
        return invalid

    result = auth.sign_up(data)
    if not result.ok:
        return error_response(result.error)
    return _session_response(result.value)


@router.post("/sign-in/email")
def sign_in(payload: Any = Depends(json_body), auth: EmailPasswordAuth = Depends(get_auth_library)):
    data, invalid = _parse(LoginIn, payload)
    if invalid:
        return invalid

    result = auth.sign_in(data)
    if not result.ok:
        return error_response(result.error)
    return _session_response(result.value)


@router.post("/sign-out")
def sign_out(request: Request, auth: EmailPasswordAuth = Depends(get_auth_library)):
    token = request.cookies.get(settings.session_cookie_name) or parse_bearer(
        request.headers.get("authorization")
    )
    auth.sign_out(token)

    response = JSONResponse({"success": True})
    clear_session_cookie(response)
    return response


@router.get("/get-session")
def current_session(
    request: Request,
    auth: EmailPasswordAuth = Depends(get_auth_library),
    users: UserStore = Depends(get_user_store),
):
    session = auth.get_session(request.cookies, request.headers)
    user = users.find_by_id(session.user_id) if session else None
    if user is None:
        return JSONResponse({"error": "Unauthorized"}, status_code=401)

    return {"session": {"userId": user.id}, "user": UserOut.from_model(user).to_json()}


@router.api_route("/{path:path}", methods=["GET", "POST"], include_in_schema=False)
def unknown_auth_route(path: str):
    return JSONResponse({"error": "Not found"}, status_code=404)
