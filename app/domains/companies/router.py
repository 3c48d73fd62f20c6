from fastapi import APIRouter, Depends, Response, status

from app.core.session import SessionStore, get_session_store
from app.core.utils import require_company_session
from app.domains.companies import service
from app.domains.companies.repository import CompanyRepository
from app.domains.companies.schemas import (
    CompanyCreate,
    CompanyEnvelope,
    CompanyListResponse,
    CompanyUpdate,
    ErrorResponse,
    SuccessResponse,
)
from app.domains.companies.service import get_company_repository

router = APIRouter(prefix="/companies", tags=["회사"])


# 회사 목록 (최신 생성순)
@router.get(
    "",
    summary="회사 목록 조회",
    response_model=CompanyListResponse,
)
async def list_companies(
    repository: CompanyRepository = Depends(get_company_repository),
):
    companies = await service.list_companies(repository)
    return CompanyListResponse(companies=companies)


# 회사 생성
@router.post(
    "",
    summary="회사 생성",
    status_code=status.HTTP_201_CREATED,
    response_model=CompanyEnvelope,
    responses={
        400: {"model": ErrorResponse, "description": "slug 누락/형식 오류"},
        409: {"model": ErrorResponse, "description": "이미 존재하는 slug"},
    },
)
async def create_company(
    payload: CompanyCreate,
    repository: CompanyRepository = Depends(get_company_repository),
):
    company = await service.create_company(repository, payload)
    return CompanyEnvelope(company=company)


# 회사 단건 조회
@router.get(
    "/{slug}",
    summary="회사 조회",
    response_model=CompanyEnvelope,
    responses={404: {"model": ErrorResponse, "description": "회사를 찾을 수 없음"}},
)
async def get_company(
    slug: str,
    repository: CompanyRepository = Depends(get_company_repository),
):
    company = await service.get_company(repository, slug)
    return CompanyEnvelope(company=company)


# 회사 수정 (본인 세션만)
@router.put(
    "/{slug}",
    summary="회사 수정",
    response_model=CompanyEnvelope,
    responses={
        401: {"model": ErrorResponse, "description": "세션 없음/다른 회사"},
        404: {"model": ErrorResponse, "description": "회사를 찾을 수 없음"},
    },
)
async def update_company(
    slug: str,
    payload: CompanyUpdate,
    repository: CompanyRepository = Depends(get_company_repository),
    _session_slug: str = Depends(require_company_session),
):
    company = await service.update_company(repository, slug, payload)
    return CompanyEnvelope(company=company)


# 회사 삭제 (본인 세션만, 멱등). 삭제한 회사의 세션도 함께 종료
@router.delete(
    "/{slug}",
    summary="회사 삭제",
    response_model=SuccessResponse,
    responses={401: {"model": ErrorResponse, "description": "세션 없음/다른 회사"}},
)
async def delete_company(
    slug: str,
    response: Response,
    repository: CompanyRepository = Depends(get_company_repository),
    store: SessionStore = Depends(get_session_store),
    _session_slug: str = Depends(require_company_session),
):
    await service.delete_company(repository, slug)
    store.destroy_session(response)
    return SuccessResponse()
