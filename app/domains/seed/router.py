from fastapi import APIRouter, Depends

from app.core import config
from app.core.exceptions import ForbiddenError, ValidationError
from app.domains.companies.repository import CompanyRepository
from app.domains.companies.schemas import ErrorResponse
from app.domains.companies.service import get_company_repository
from app.domains.seed.samples import SAMPLE_COMPANIES
from app.domains.seed.schemas import SeedRequest, SeedResult
from app.domains.seed.service import seed_companies

router = APIRouter(prefix="/seed", tags=["개발용"])


# 샘플/전달받은 회사 데이터 시드 (development 환경에서만)
@router.post(
    "",
    summary="회사 데이터 시드",
    response_model=SeedResult,
    responses={
        400: {"model": ErrorResponse, "description": "companies 배열 또는 useSample 필요"},
        403: {"model": ErrorResponse, "description": "development 환경이 아님"},
    },
)
async def seed(
    payload: SeedRequest,
    repository: CompanyRepository = Depends(get_company_repository),
):
    if not config.IS_DEVELOPMENT:
        raise ForbiddenError("Seeding is only allowed in development mode")

    if payload.use_sample:
        companies = SAMPLE_COMPANIES
    elif payload.companies is not None:
        companies = payload.companies
    else:
        raise ValidationError("Invalid request. Provide companies array or useSample: true")

    return await seed_companies(repository, companies)
