from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session
from .security import decode_token, is_access
from .database import get_db
from ..models.member import Member


bearer_scheme = HTTPBearer(auto_error=False)


def get_current_payload(
    creds: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> dict:
    if not creds:
        raise HTTPException(status_code=401, detail="Invalid token")
    try:
        payload = decode_token(creds.credentials)
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid token")
    if not is_access(payload):
        raise HTTPException(status_code=401, detail="Invalid token")
    return payload


def get_current_member_id(payload: dict = Depends(get_current_payload)) -> int:
    sub = payload.get("sub")
    # Le sub JWT est une chaîne; les ids membres sont des entiers
    if not isinstance(sub, str) or not sub.isdigit():
        raise HTTPException(status_code=401, detail="Invalid token")
    return int(sub)


def get_current_member(
    member_id: int = Depends(get_current_member_id), db: Session = Depends(get_db)
) -> Member:
    m = db.query(Member).filter(Member.member_id == member_id).first()
    if not m:
        raise HTTPException(status_code=401, detail="Invalid token")
    if not m.is_active:
        raise HTTPException(status_code=403, detail="Inactive member")
    return m


def require_admin(member: Member = Depends(get_current_member)) -> Member:
    """Retourne le membre courant seulement si son rôle est administrateur (403 sinon)."""
    if not member.is_admin:
        raise HTTPException(status_code=403, detail="Forbidden")
    return member
