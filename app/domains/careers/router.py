from fastapi import APIRouter, Depends, Query

from app.core.utils import require_page_session
from app.domains.careers import service
from app.domains.careers.filters import ALL, JobFilter
from app.domains.careers.schemas import (
    CareersPageResponse,
    EditorBootstrapResponse,
    PreviewResponse,
)
from app.domains.companies.repository import CompanyRepository
from app.domains.companies.schemas import ErrorResponse
from app.domains.companies.service import get_company_repository

router = APIRouter(tags=["채용 페이지"])


def get_job_filter(
    q: str = Query("", description="제목/설명/위치 검색어"),
    location: str = Query(ALL),
    job_type: str = Query(ALL),
    department: str = Query(ALL),
) -> JobFilter:
    return JobFilter(query=q, location=location, job_type=job_type, department=department)


# 공개 채용 페이지 (누구나 조회)
@router.get(
    "/{company_slug}/careers",
    summary="공개 채용 페이지",
    response_model=CareersPageResponse,
    responses={404: {"model": ErrorResponse, "description": "회사를 찾을 수 없음"}},
)
async def careers_page(
    company_slug: str,
    job_filter: JobFilter = Depends(get_job_filter),
    repository: CompanyRepository = Depends(get_company_repository),
):
    return await service.get_careers_page(repository, company_slug, job_filter)


# 미리보기 (본인 세션만, 실패 시 로그인 페이지로)
@router.get(
    "/{company_slug}/preview",
    summary="채용 페이지 미리보기",
    response_model=PreviewResponse,
    responses={307: {"description": "로그인 페이지로 이동"}},
)
async def preview_page(
    company_slug: str,
    repository: CompanyRepository = Depends(get_company_repository),
    _session_slug: str = Depends(require_page_session),
):
    return await service.get_preview_page(repository, company_slug)


# 편집 페이지 초기 데이터 (본인 세션만)
@router.get(
    "/{company_slug}/edit",
    summary="편집 페이지 데이터",
    response_model=EditorBootstrapResponse,
    responses={307: {"description": "로그인 페이지로 이동"}},
)
async def edit_page(
    company_slug: str,
    repository: CompanyRepository = Depends(get_company_repository),
    _session_slug: str = Depends(require_page_session),
):
    return await service.get_editor_bootstrap(repository, company_slug)
