import pytest

from tests.conftest import login


@pytest.mark.asyncio
async def test_login_check_logout_flow(async_client, make_company):
    await make_company("acme-corp", name="Acme Corporation")

    # 1. 로그인 전 세션 확인
    resp = await async_client.get("/auth/check")
    assert resp.status_code == 401
    assert resp.json() == {"authenticated": False}

    # 2. 로그인
    resp = await login(async_client, "acme-corp")
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    assert data["company"] == {"slug": "acme-corp", "name": "Acme Corporation"}
    assert data["redirect"] == "/acme-corp/edit"
    assert "company_slug" in resp.cookies

    # 3. 세션 확인
    resp = await async_client.get("/auth/check")
    assert resp.status_code == 200
    assert resp.json() == {"authenticated": True, "slug": "acme-corp"}

    # 4. 로그아웃 후에는 세션 없음
    resp = await async_client.delete("/auth")
    assert resp.status_code == 200
    assert resp.json() == {"success": True}

    resp = await async_client.get("/auth/check")
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_login_normalizes_slug(async_client, make_company):
    await make_company("acme-corp")

    resp = await async_client.post("/auth", json={"slug": "  ACME-Corp "})
    assert resp.status_code == 200
    assert resp.json()["company"]["slug"] == "acme-corp"


@pytest.mark.asyncio
async def test_login_unknown_slug(async_client):
    resp = await login(async_client, "nobody")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Company not found"}


@pytest.mark.asyncio
async def test_login_requires_string_slug(async_client):
    resp = await async_client.post("/auth", json={})
    assert resp.status_code == 400

    resp = await async_client.post("/auth", json={"slug": ["acme"]})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_login_forwards_to_requested_page(async_client, make_company):
    await make_company("acme-corp")

    resp = await async_client.post(
        "/auth", params={"redirect": "/acme-corp/preview"}, json={"slug": "acme-corp"}
    )
    assert resp.json()["redirect"] == "/acme-corp/preview"

    # 외부 주소로는 보내지 않음
    resp = await async_client.post(
        "/auth", params={"redirect": "https://evil.example.com"}, json={"slug": "acme-corp"}
    )
    assert resp.json()["redirect"] == "/acme-corp/edit"
