import os

# app.core.db 는 임포트 시점에 DATABASE_URL 을 요구하므로 먼저 설정
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest_asyncio  # 명시적으로 import
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.db import get_db_session
from app.domains.companies.repository import CompanyRepository
from app.domains.companies.schemas import CompanyCreate, CompanyResponse
from app.main import app
from app.models.base import Base

# --- 테스트 DB URL 설정 (기본: 메모리 SQLite) ---
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


# --- 헬퍼 함수 정의 ---
def make_engine(url: str = TEST_DATABASE_URL):
    if url.startswith("sqlite"):
        # 메모리 DB 는 커넥션마다 새로 생기므로 하나의 커넥션을 공유
        return create_async_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(url, future=True)


async def login(client: AsyncClient, slug: str):
    """slug 로 로그인하고 응답을 반환 (쿠키는 client 에 저장됨)"""
    return await client.post("/auth", json={"slug": slug})


# --- FIXTURE 정의 ---

@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """테스트마다 테이블 생성 및 삭제"""
    engine = make_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(db_engine):
    """함수마다 DB 세션 제공"""
    TestingSessionLocal = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    async with TestingSessionLocal() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture(scope="function")
async def repository(db_session: AsyncSession) -> CompanyRepository:
    return CompanyRepository(db_session)


@pytest_asyncio.fixture(scope="function")
async def async_client(db_session: AsyncSession):
    """함수마다 테스트 클라이언트 제공 및 DB 세션 오버라이드"""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db_session] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def make_company(repository: CompanyRepository):
    """
    회사를 바로 저장하는 팩토리 fixture.
    사용: company = await make_company("acme-corp", name="Acme", jobs=[...])
    """

    async def _make(slug: str, **fields) -> CompanyResponse:
        payload = CompanyCreate(slug=slug, **fields)
        company = await repository.create(payload.to_storage())
        return CompanyResponse.model_validate(company)

    return _make
