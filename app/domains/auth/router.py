import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from app.core.session import SessionStore, get_session_store
from app.core.utils import safe_redirect_target
from app.domains.auth.schemas import AuthCheckResponse, LoginRequest, LoginResponse
from app.domains.auth.service import authenticate_company
from app.domains.companies.repository import CompanyRepository
from app.domains.companies.schemas import ErrorResponse, SuccessResponse
from app.domains.companies.service import get_company_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["인증"])


# 로그인 (세션 쿠키 발급)
@router.post(
    "",
    summary="회사 slug 로그인",
    response_model=LoginResponse,
    responses={
        400: {"model": ErrorResponse, "description": "slug 누락/문자열 아님"},
        404: {"model": ErrorResponse, "description": "존재하지 않는 회사"},
    },
)
async def login(
    payload: LoginRequest,
    response: Response,
    redirect: Optional[str] = Query(None, description="로그인 후 이동할 경로"),
    repository: CompanyRepository = Depends(get_company_repository),
    store: SessionStore = Depends(get_session_store),
):
    company = await authenticate_company(repository, payload.slug)
    store.create_session(response, company.slug)
    return LoginResponse(
        company=company,
        redirect=safe_redirect_target(redirect, company.slug),
    )


# 로그아웃 (세션 즉시 삭제)
@router.delete(
    "",
    summary="로그아웃",
    response_model=SuccessResponse,
)
async def logout(
    response: Response,
    store: SessionStore = Depends(get_session_store),
):
    store.destroy_session(response)
    logger.info("로그아웃")
    return SuccessResponse()


# 세션 확인
@router.get(
    "/check",
    summary="세션 확인",
    response_model=AuthCheckResponse,
    responses={401: {"model": AuthCheckResponse, "description": "세션 없음"}},
)
async def check_session(
    request: Request,
    store: SessionStore = Depends(get_session_store),
):
    slug = store.get_session(request)
    if slug is None:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"authenticated": False},
        )
    return AuthCheckResponse(authenticated=True, slug=slug)
