import pytest

from tests.conftest import login

JOBS = [
    {"id": "1", "title": "Engineer", "location": "Remote", "job_type": "full-time", "department": "Engineering"},
    {"id": "2", "title": "Designer", "location": "New York, NY", "job_type": "contract", "department": "Design"},
    {"id": "3", "title": "Old Role", "location": "Remote", "job_type": "full-time", "is_active": False},
]


@pytest.mark.asyncio
async def test_public_careers_page(async_client, make_company):
    await make_company("acme-corp", name="Acme", jobs=JOBS)

    resp = await async_client.get("/acme-corp/careers")
    assert resp.status_code == 200
    data = resp.json()

    assert data["page"]["hero"]["name"] == "Acme"
    assert data["page"]["jobs"]["total"] == 2
    assert data["search"]["result_count"] == 2
    assert data["search"]["has_active_filters"] is False
    assert data["search"]["facets"]["locations"] == ["New York, NY", "Remote"]
    assert [o["value"] for o in data["search"]["options"]["department"]] == ["all", "Design", "Engineering"]


@pytest.mark.asyncio
async def test_public_careers_page_filters(async_client, make_company):
    await make_company("acme-corp", jobs=JOBS)

    resp = await async_client.get("/acme-corp/careers", params={"location": "Remote"})
    search = resp.json()["search"]
    assert search["has_active_filters"] is True
    assert [job["id"] for job in search["jobs"]] == ["1"]
    # 선택지는 필터와 무관
    assert search["facets"]["locations"] == ["New York, NY", "Remote"]

    resp = await async_client.get("/acme-corp/careers", params={"location": "Berlin"})
    assert resp.json()["search"]["result_count"] == 0

    resp = await async_client.get("/acme-corp/careers", params={"q": "design"})
    assert [job["id"] for job in resp.json()["search"]["jobs"]] == ["2"]


@pytest.mark.asyncio
async def test_unknown_company_page_is_404(async_client):
    resp = await async_client.get("/nobody/careers")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Company not found"}


@pytest.mark.asyncio
async def test_preview_and_edit_redirect_to_login(async_client, make_company):
    await make_company("acme-corp")
    await make_company("other-co")

    resp = await async_client.get("/acme-corp/preview")
    assert resp.status_code == 307
    assert resp.headers["location"] == "/login?redirect=/acme-corp/preview"

    # 다른 회사로 로그인해도 접근 불가
    await login(async_client, "other-co")
    resp = await async_client.get("/acme-corp/edit")
    assert resp.status_code == 307
    assert resp.headers["location"] == "/login?redirect=/acme-corp/edit"


@pytest.mark.asyncio
async def test_preview_and_edit_with_session(async_client, make_company):
    await make_company(
        "acme-corp",
        name="Acme",
        theme={"primary": "#ff0000"},
        sections=[{"id": "s1", "type": "about", "title": "About", "content": "Hi"}],
        jobs=JOBS,
    )
    await login(async_client, "acme-corp")

    resp = await async_client.get("/acme-corp/preview")
    assert resp.status_code == 200
    data = resp.json()
    assert data["preview"] is True
    assert data["links"] == {
        "edit": "/acme-corp/edit",
        "preview": "/acme-corp/preview",
        "public": "/acme-corp/careers",
    }
    assert data["page"]["hero"]["background_color"] == "#ff0000"

    resp = await async_client.get("/acme-corp/edit")
    assert resp.status_code == 200
    data = resp.json()
    assert data["name"] == "Acme"
    assert data["theme_editor"]["status"] == "clean"
    assert data["theme_editor"]["theme"]["primary"] == "#ff0000"
    assert data["section_builder"]["sections"][0]["id"] == "s1"
    assert {"value": "custom", "label": "Custom"} in data["section_builder"]["section_types"]
