import asyncio
import json
import sys

from app.core.db import AsyncSessionFactory
from app.domains.companies.repository import CompanyRepository
from app.domains.seed.samples import SAMPLE_COMPANIES
from app.domains.seed.service import seed_companies


def load_companies(path: str | None) -> list:
    # 경로가 없으면 내장 샘플 사용
    if not path:
        return SAMPLE_COMPANIES
    with open(path, encoding="utf-8") as f:
        return json.load(f)


async def seed(path: str | None = None) -> bool:
    companies = load_companies(path)
    print(f"📦 {len(companies)}개 회사 시드 시작")

    async with AsyncSessionFactory() as session:  # db 세션 시작
        result = await seed_companies(CompanyRepository(session), companies)

    print(f"✅ 시드 완료! created={result.created}, updated={result.updated}, errors={result.errors}")
    return result.success


if __name__ == "__main__":
    ok = asyncio.run(seed(sys.argv[1] if len(sys.argv) > 1 else None))
    sys.exit(0 if ok else 1)


'''
docker compose exec app bash
# 컨테이너 내부에서
PYTHONPATH=/app python app/scripts/seed_companies.py data/sample-companies.json
'''
