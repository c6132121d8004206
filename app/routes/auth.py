import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from ..utils.database import get_db
from ..utils.auth_error_messages import get_auth_error_message, get_auth_error_suggestion
from ..controllers.auth_controller import AuthController
from ..schemas.auth import LoginIn, TokenOut, AuthErrorOut

router = APIRouter()
ctrl = AuthController()

_LOGIN_ERRORS = {
    "invalid_credentials": (401, "Invalid login credentials"),
    "inactive_member": (403, "Member inactive"),
}


def _auth_error(status_code: int, message: str) -> JSONResponse:
    body = AuthErrorOut(
        detail=get_auth_error_message(message),
        suggestion=get_auth_error_suggestion(message),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


@router.post(
    "/login",
    response_model=TokenOut,
    responses={401: {"model": AuthErrorOut}, 403: {"model": AuthErrorOut}},
)
def login(payload: LoginIn, db: Session = Depends(get_db)):
    try:
        m, access = ctrl.login(db, payload.account_id, payload.password)
    except ValueError as e:
        code = str(e)
        if code not in _LOGIN_ERRORS:
            raise
        logging.info("Connexion refusée pour %s: %s", payload.account_id, code)
        return _auth_error(*_LOGIN_ERRORS[code])
    return TokenOut(access_token=access, member_id=m.member_id, is_admin=m.is_admin)
