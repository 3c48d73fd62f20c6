import logging
from datetime import timedelta
from typing import Optional

import jwt
from fastapi import Request, Response

from app.core import config
from app.core.datetime_utils import expires_in_days

logger = logging.getLogger(__name__)

SESSION_TOKEN_TYPE = "session"


class SessionStore:
    """
    브라우저 쿠키 <-> 회사 slug 매핑.

    쿠키 값은 SECRET_KEY로 서명된 JWT 이며 `sub` 클레임에 slug 를 담습니다.
    서명이 깨졌거나 만료된 토큰은 "세션 없음"으로 취급합니다.
    slug 만 알면 로그인되는 구조라 비밀번호 등 별도 자격 증명은 없습니다.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        cookie_name: str = "company_slug",
        max_age_days: int = 7,
        secure: bool = False,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.cookie_name = cookie_name
        self.max_age_days = max_age_days
        self.secure = secure

    @property
    def max_age_seconds(self) -> int:
        return int(timedelta(days=self.max_age_days).total_seconds())

    def issue_token(self, slug: str) -> str:
        payload = {
            "sub": slug,
            "exp": expires_in_days(self.max_age_days),
            "token_type": SESSION_TOKEN_TYPE,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def read_token(self, token: Optional[str]) -> Optional[str]:
        """토큰에서 slug 를 꺼냅니다. 유효하지 않으면 None"""
        if not token:
            return None
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            logger.info("만료된 세션 토큰")
            return None
        except jwt.PyJWTError:
            logger.warning("세션 토큰 검증 실패")
            return None

        if payload.get("token_type") != SESSION_TOKEN_TYPE:
            return None
        slug = payload.get("sub")
        return slug if isinstance(slug, str) and slug else None

    def create_session(self, response: Response, slug: str) -> str:
        token = self.issue_token(slug)
        response.set_cookie(
            key=self.cookie_name,
            value=token,
            max_age=self.max_age_seconds,
            httponly=True,
            secure=self.secure,
            samesite="lax",
        )
        return token

    def get_session(self, request: Request) -> Optional[str]:
        return self.read_token(request.cookies.get(self.cookie_name))

    def destroy_session(self, response: Response) -> None:
        response.delete_cookie(
            key=self.cookie_name,
            httponly=True,
            secure=self.secure,
            samesite="lax",
        )


session_store = SessionStore(
    secret_key=config.SECRET_KEY,
    algorithm=config.ALGORITHM,
    cookie_name=config.SESSION_COOKIE_NAME,
    max_age_days=config.SESSION_MAX_AGE_DAYS,
    secure=config.IS_PRODUCTION,
)


def get_session_store() -> SessionStore:
    """SessionStore 의존성 주입 (테스트에서 override 가능)"""
    return session_store
