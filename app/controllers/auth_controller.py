from datetime import datetime
from sqlalchemy.orm import Session
from ..models.member import Member
from ..utils.security import create_access_token, verify_password


class AuthController:
    def login(self, db: Session, account_id: str, password: str) -> tuple[Member, str]:
        """Vérifie les identifiants et émet un access token.

        Lève ValueError("invalid_credentials") ou ValueError("inactive_member").
        """
        m = db.query(Member).filter(Member.account_id == account_id).first()
        if not m or not verify_password(password, m.password_hash):
            raise ValueError("invalid_credentials")
        if not m.is_active:
            raise ValueError("inactive_member")
        access = create_access_token(
            str(m.member_id), {"account_id": m.account_id, "is_admin": m.is_admin}
        )
        m.last_login_at = datetime.utcnow()
        db.add(m)
        db.commit()
        return m, access
