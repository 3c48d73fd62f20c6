import logging # 로깅 모듈 임포트
from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (AsyncSession, async_sessionmaker,
                                    create_async_engine)

from app.core.config import DATABASE_URL

# DB URL 설정 확인
if not DATABASE_URL:
    raise ValueError(
        "DATABASE_URL 환경 변수가 설정되지 않았거나 .env 파일 로드에 실패했습니다."
    )

logger = logging.getLogger(__name__) # 로거 인스턴스 생성


def engine_options(url: str) -> Dict[str, Any]:
    # SQLite(로컬 실행/테스트)는 커넥션 재활용 대신 스레드 검사만 해제
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_recycle": 600, "pool_pre_ping": True}


# 비동기 DB 엔진
engine = create_async_engine(DATABASE_URL, echo=False, **engine_options(DATABASE_URL))

# 비동기 세션 메이커
AsyncSessionFactory = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI 의존성 주입용 비동기 DB 세션 생성기"""
    async with AsyncSessionFactory() as session:
        try:
            yield session
            # 커밋은 레포지토리에서 명시적으로 처리
        except Exception as e:
            logger.error(f"DB Session rollback due to exception: {e}", exc_info=True)
            await session.rollback()
            raise  # FastAPI 예외 핸들러로 전달


async def dispose_engine() -> None:
    """앱 종료 시 커넥션 풀 정리"""
    await engine.dispose()
    logger.info("DB 엔진 종료")
