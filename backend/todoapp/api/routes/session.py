from typing import Optional

from fastapi import APIRouter, Depends, Header
from fastapi.responses import JSONResponse

from todoapp.api.deps import get_identity_verifier
from todoapp.api.responses import error_response
from todoapp.core.cookies import clear_session_cookie, set_session_cookie
from todoapp.services.session import IdentityVerifier
from todoapp.services.sign_in import create_session_from_bearer_token

router = APIRouter(prefix="/api", tags=["session"])


@router.post("/session")
def create_session(
    authorization: Optional[str] = Header(default=None),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
):
    result = create_session_from_bearer_token(authorization, verifier)
    if not result.ok:
        return error_response(result.error)

    response = JSONResponse({"status": "success"})
    set_session_cookie(response, result.value)
    return response


@router.post("/logout")
def logout():
    response = JSONResponse({"message": "Logged out"})
    clear_session_cookie(response)
    return response
