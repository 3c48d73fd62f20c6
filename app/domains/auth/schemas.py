from typing import Optional

from pydantic import BaseModel, Field


### 로그인 요청 (slug 만으로 로그인)
class LoginRequest(BaseModel):
    slug: str = Field(min_length=1)


class SessionCompany(BaseModel):
    slug: str
    name: Optional[str] = None


class LoginResponse(BaseModel):
    success: bool = True
    company: SessionCompany
    redirect: str  # 로그인 후 이동할 경로


class AuthCheckResponse(BaseModel):
    authenticated: bool
    slug: Optional[str] = None
