import logging

from app.core.exceptions import NotFoundError
from app.domains.auth.schemas import SessionCompany
from app.domains.companies.repository import CompanyRepository

logger = logging.getLogger(__name__)


def normalize_login_slug(slug: str) -> str:
    return slug.strip().lower()


# slug 존재 여부만 확인하는 로그인 (비밀번호 없음)
async def authenticate_company(repository: CompanyRepository, slug: str) -> SessionCompany:
    normalized = normalize_login_slug(slug)
    company = await repository.get_by_slug(normalized)
    if not company:
        logger.info(f"로그인 실패 (존재하지 않는 slug): {normalized!r}")
        raise NotFoundError("Company not found")

    logger.info(f"로그인 성공: {company.slug}")
    return SessionCompany(slug=company.slug, name=company.name)
