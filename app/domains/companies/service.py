import logging
from typing import List

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db_session
from app.core.exceptions import ConflictError, NotFoundError
from app.domains.companies.repository import CompanyRepository
from app.domains.companies.schemas import (
    CompanyCreate,
    CompanyResponse,
    CompanyUpdate,
)

# 로거 설정
logger = logging.getLogger(__name__)


# --- 레포지토리 의존성 주입 프로바이더 ---

def get_company_repository(session: AsyncSession = Depends(get_db_session)) -> CompanyRepository:
    """CompanyRepository 인스턴스를 생성하여 의존성 주입"""
    return CompanyRepository(session)


# --- 서비스 함수 ---

async def list_companies(repository: CompanyRepository) -> List[CompanyResponse]:
    companies = await repository.list_all()
    return [CompanyResponse.model_validate(c) for c in companies]


async def get_company(repository: CompanyRepository, slug: str) -> CompanyResponse:
    """slug 로 회사 조회, 없으면 NotFoundError"""
    company = await repository.get_by_slug(slug)
    if not company:
        raise NotFoundError("Company not found")
    return CompanyResponse.model_validate(company)


async def create_company(repository: CompanyRepository, payload: CompanyCreate) -> CompanyResponse:
    """회사 생성 (slug 중복 시 ConflictError)"""
    # 1. 중복 확인
    if await repository.exists(payload.slug):
        raise ConflictError("Company slug already exists")

    # 2. 저장 (동시 생성 경합은 유니크 제약으로 한 번 더 걸러짐)
    company = await repository.create(payload.to_storage())
    logger.info(f"회사 생성: {company.slug}")
    return CompanyResponse.model_validate(company)


async def update_company(
    repository: CompanyRepository, slug: str, payload: CompanyUpdate
) -> CompanyResponse:
    """전달된 최상위 필드만 교체합니다. 마지막 저장이 이깁니다."""
    update_data = payload.to_storage()
    company = await repository.update(slug, update_data)
    if not company:
        raise NotFoundError("Company not found")
    logger.info(f"회사 수정: {slug} fields={sorted(update_data)}")
    return CompanyResponse.model_validate(company)


async def delete_company(repository: CompanyRepository, slug: str) -> bool:
    """삭제는 멱등: 대상이 없어도 성공으로 처리하고 False 를 반환"""
    deleted = await repository.delete(slug)
    if deleted:
        logger.info(f"회사 삭제: {slug}")
    else:
        logger.info(f"삭제 대상 없음: {slug}")
    return deleted
