from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from ..utils.database import get_db
from ..utils.auth_dep import get_current_member
from ..utils.avatar_color import get_avatar_colors
from ..controllers.member_controller import MemberController
from ..models.member import Member
from ..schemas.member import AvatarColorsOut, MemberListOut, MemberOut

router = APIRouter()
ctrl = MemberController()


@router.get("/me", response_model=MemberOut)
def me(member: Member = Depends(get_current_member)):
    return MemberOut(**ctrl.view(member, member))


@router.get("", response_model=MemberListOut)
def list_members(
    viewer: Member = Depends(get_current_member),
    db: Session = Depends(get_db),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    search: str | None = None,
):
    # Les membres inactifs ne sont visibles que par un administrateur
    items, total = ctrl.list(
        db, page, page_size, search=search, include_inactive=viewer.is_admin
    )
    return MemberListOut(
        items=[MemberOut(**ctrl.view(m, viewer)) for m in items],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/{member_id}", response_model=MemberOut)
def get_member(
    member_id: int,
    viewer: Member = Depends(get_current_member),
    db: Session = Depends(get_db),
):
    m = ctrl.get(db, member_id)
    if not m or (not m.is_active and not viewer.is_admin):
        raise HTTPException(status_code=404, detail="Member not found")
    return MemberOut(**ctrl.view(m, viewer))


@router.get("/{member_id}/avatar", response_model=AvatarColorsOut)
def member_avatar(
    member_id: int,
    viewer: Member = Depends(get_current_member),
    db: Session = Depends(get_db),
):
    m = ctrl.get(db, member_id)
    if not m or (not m.is_active and not viewer.is_admin):
        raise HTTPException(status_code=404, detail="Member not found")
    return AvatarColorsOut(**get_avatar_colors(m.account_id))
