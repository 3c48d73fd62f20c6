import logging
from typing import Any, Dict, List

from sqlalchemy import desc, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.datetime_utils import get_now_utc
from app.core.exceptions import ConflictError, InternalError
from app.models.companies import Company

logger = logging.getLogger(__name__)

# update 로 교체 가능한 최상위 필드
UPDATABLE_FIELDS = ("name", "theme", "sections", "jobs")


class CompanyRepository:
    """companies 테이블 상호작용을 담당하는 레포지토리 (slug 기준)"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise ConflictError("Company slug already exists")
        except SQLAlchemyError:
            await self.session.rollback()
            logger.exception("companies 커밋 실패")
            raise InternalError("Failed to save company")

    async def get_by_slug(self, slug: str) -> Company | None:
        """slug 로 회사를 조회합니다."""
        result = await self.session.execute(select(Company).where(Company.slug == slug))
        return result.scalar_one_or_none()

    async def exists(self, slug: str) -> bool:
        result = await self.session.execute(select(Company.id).where(Company.slug == slug))
        return result.first() is not None

    async def list_all(self) -> List[Company]:
        """모든 회사를 생성일 내림차순(최신순)으로 조회합니다."""
        result = await self.session.execute(
            select(Company).order_by(desc(Company.created_at))
        )
        return list(result.scalars().all())

    async def create(self, company_data: Dict[str, Any]) -> Company:
        """새 회사를 생성합니다. slug 중복 시 ConflictError"""
        company = Company(**company_data)
        self.session.add(company)
        await self._commit()
        await self.session.refresh(company)
        return company

    async def update(self, slug: str, update_data: Dict[str, Any]) -> Company | None:
        """
        전달된 최상위 필드만 통째로 교체합니다 (theme/sections/jobs 내부 병합 없음).
        대상이 없으면 None
        """
        company = await self.get_by_slug(slug)
        if not company:
            return None

        for key, value in update_data.items():
            if key not in UPDATABLE_FIELDS:
                continue  # slug, id 등은 변경 불가
            setattr(company, key, value)
        company.updated_at = get_now_utc()

        await self._commit()
        await self.session.refresh(company)
        return company

    async def delete(self, slug: str) -> bool:
        """slug 로 회사를 삭제합니다. 성공 시 True, 대상 없음 시 False"""
        company = await self.get_by_slug(slug)
        if not company:
            return False

        await self.session.delete(company)
        await self._commit()
        return True
