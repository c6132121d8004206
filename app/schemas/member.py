from datetime import datetime
from pydantic import BaseModel, Field


class AvatarColorsOut(BaseModel):
    background_color: str = Field(pattern="^#[0-9a-f]{6}$")
    text_color: str = Field(pattern="^#(ffffff|000000)$")


class MemberOut(BaseModel):
    member_id: int
    account_id: str
    name: str
    email: str
    mobile: str | None = None
    dept_path: str | None = None
    role: str | None = None
    is_active: bool
    created_at: datetime
    # Vrai si email/mobile/nom/account_id ont été masqués pour ce lecteur
    masked: bool = False
    avatar: AvatarColorsOut

    class Config:
        from_attributes = True


class MemberListOut(BaseModel):
    items: list[MemberOut]
    total: int
    page: int
    page_size: int
