import logging
import re
from typing import Optional

from fastapi import Depends, Request

from app.core.exceptions import LoginRequired, UnauthorizedError
from app.core.session import SessionStore, get_session_store

logger = logging.getLogger(__name__)

YOUTUBE_WATCH_PATTERN = re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([^&\n?#]+)")
VIMEO_PATTERN = re.compile(r"vimeo\.com/(\d+)")


def convert_to_embed_url(url: Optional[str]) -> str:
    """
    동영상 URL 을 iframe 에 넣을 수 있는 embed URL 로 변환합니다.

    - YouTube watch / youtu.be 단축 URL -> https://www.youtube.com/embed/<id>
    - Vimeo URL -> https://player.vimeo.com/video/<id>
    - 이미 embed 형태이거나 알 수 없는 형식은 그대로 반환
    네트워크 검증은 하지 않습니다.
    """
    if not url:
        return ""

    youtube_match = YOUTUBE_WATCH_PATTERN.search(url)
    if youtube_match:
        return f"https://www.youtube.com/embed/{youtube_match.group(1)}"

    if "youtube.com/embed/" in url:
        return url

    vimeo_match = VIMEO_PATTERN.search(url)
    if vimeo_match:
        return f"https://player.vimeo.com/video/{vimeo_match.group(1)}"

    if "player.vimeo.com" in url:
        return url

    return url


# 로그인 후 이동할 경로 검증 (외부 URL 로의 리다이렉트 방지)
def safe_redirect_target(redirect: Optional[str], slug: str) -> str:
    if redirect and redirect.startswith("/") and not redirect.startswith("//"):
        return redirect
    return f"/{slug}/edit"


# API 라우트용: 세션 slug 가 경로의 slug 와 같아야 함
async def require_company_session(
    slug: str,
    request: Request,
    store: SessionStore = Depends(get_session_store),
) -> str:
    session_slug = store.get_session(request)
    if session_slug is None or session_slug != slug:
        logger.warning(f"API 권한 없음: session={session_slug!r}, target={slug!r}")
        raise UnauthorizedError("Unauthorized")
    return session_slug


# 페이지 라우트용: 실패 시 원래 경로를 들고 로그인 페이지로 이동
async def require_page_session(
    company_slug: str,
    request: Request,
    store: SessionStore = Depends(get_session_store),
) -> str:
    session_slug = store.get_session(request)
    if session_slug is None or session_slug != company_slug:
        logger.warning(f"페이지 권한 없음: session={session_slug!r}, target={company_slug!r}")
        raise LoginRequired(redirect_to=request.url.path)
    return session_slug
