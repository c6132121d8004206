from typing import Optional
from sqlalchemy.orm import Session
from ..models.member import Member
from ..utils.avatar_color import get_avatar_colors
from ..utils.mask_data import mask_user_info, should_mask_data


class MemberController:
    def get(self, db: Session, member_id: int) -> Optional[Member]:
        return db.query(Member).filter(Member.member_id == member_id).first()

    def list(
        self,
        db: Session,
        page: int,
        page_size: int,
        search: str | None = None,
        include_inactive: bool = False,
    ) -> tuple[list[Member], int]:
        q = db.query(Member)
        if not include_inactive:
            q = q.filter(Member.is_active.is_(True))
        if search:
            like = f"%{search}%"
            q = q.filter((Member.name.like(like)) | (Member.account_id.like(like)))
        total = q.count()
        items = (
            q.order_by(Member.name, Member.member_id)
            .offset((page - 1) * page_size)
            .limit(page_size)
            .all()
        )
        return items, total

    def view(self, member: Member, viewer: Member) -> dict:
        """Représentation d'un membre pour `viewer`, masquée si nécessaire.

        La couleur d'avatar est toujours dérivée de l'account_id réel.
        """
        data = {
            "member_id": member.member_id,
            "account_id": member.account_id,
            "name": member.name,
            "email": member.email,
            "mobile": member.mobile,
            "dept_path": member.dept_path,
            "role": member.role.name if member.role else None,
            "is_active": member.is_active,
            "created_at": member.created_at,
        }
        avatar = get_avatar_colors(member.account_id)
        # Ids comparés en int des deux côtés
        viewer_id, target_id = int(viewer.member_id), int(member.member_id)
        data = dict(mask_user_info(data, viewer_id, target_id, viewer.is_admin))
        data["masked"] = should_mask_data(viewer_id, target_id, viewer.is_admin)
        data["avatar"] = avatar
        return data
