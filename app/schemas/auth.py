from pydantic import BaseModel, Field


class LoginIn(BaseModel):
    account_id: str = Field(min_length=1, max_length=15)
    password: str = Field(min_length=1, max_length=128)


class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
    member_id: int
    is_admin: bool = False


class AuthErrorOut(BaseModel):
    detail: str
    suggestion: str | None = None
