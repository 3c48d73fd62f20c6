import pytest

from app.core.config import CORS_ORIGINS
from app.domains.companies.service import get_company_repository
from app.main import app


class BrokenRepository:
    async def list_all(self):
        raise RuntimeError("connection reset")


@pytest.mark.asyncio
async def test_unexpected_error_is_500_with_cors_headers(async_client):
    app.dependency_overrides[get_company_repository] = lambda: BrokenRepository()
    origin = CORS_ORIGINS[0]

    resp = await async_client.get("/companies", headers={"Origin": origin})

    assert resp.status_code == 500
    # 내부 오류 메시지는 노출하지 않음
    assert resp.json() == {"error": "Internal server error"}
    assert resp.headers["access-control-allow-origin"] == origin
