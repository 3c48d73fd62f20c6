import logging
from typing import Any, Dict, Iterable

from pydantic import ValidationError as SchemaValidationError

from app.core.exceptions import CareersError
from app.domains.companies.repository import CompanyRepository
from app.domains.companies.schemas import CompanyCreate, CompanyUpdate
from app.domains.seed.schemas import SeedResult

logger = logging.getLogger(__name__)


async def seed_companies(
    repository: CompanyRepository, companies: Iterable[Dict[str, Any]]
) -> SeedResult:
    """
    slug 기준 upsert. 이미 있으면 name/theme/sections/jobs 를 교체하고 없으면 생성합니다.
    한 건이 실패해도 나머지는 계속 진행하며 실패 건수만 집계합니다.
    """
    created = updated = errors = 0

    for record in companies:
        try:
            payload = CompanyCreate.model_validate(record)
        except SchemaValidationError as e:
            errors += 1
            slug = record.get("slug") if isinstance(record, dict) else None
            logger.warning(f"시드 데이터 형식 오류 (slug={slug!r}): {e.error_count()}건")
            continue

        try:
            if await repository.exists(payload.slug):
                update = CompanyUpdate(
                    name=payload.name,
                    theme=payload.theme,
                    sections=payload.sections,
                    jobs=payload.jobs,
                )
                await repository.update(payload.slug, update.to_storage())
                updated += 1
            else:
                await repository.create(payload.to_storage())
                created += 1
        except CareersError as e:
            errors += 1
            logger.warning(f"시드 실패 (slug={payload.slug}): {e.message}")

    logger.info(f"시드 완료: created={created}, updated={updated}, errors={errors}")
    return SeedResult(success=errors == 0, created=created, updated=updated, errors=errors)
