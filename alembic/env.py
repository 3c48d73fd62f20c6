import os
import asyncio
from logging.config import fileConfig

# SQLAlchemy 비동기 엔진 및 풀 관련 임포트
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy import pool

# Alembic 컨텍스트 임포트
from alembic import context

# 프로젝트 루트 경로 추가 (app 모듈 임포트 위함)
import sys
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
# 환경 변수에서 데이터베이스 URL 로드
from app.core.config import DATABASE_URL
# 모든 모델이 등록된 Base 메타데이터 (autogenerate 지원)
from app.models import Base

config = context.config

# Python 로깅 설정 (alembic.ini 파일 참조)
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """'오프라인' 모드 마이그레이션 실행 로직.

    DB 연결 없이 SQL 스크립트만 생성합니다.
    """
    context.configure(
        url=DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True, # SQL문에 파라미터 값을 직접 포함 (오프라인 모드용)
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


# 실제 마이그레이션 실행 담당 동기 함수
def do_run_migrations(connection):
    context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """'온라인' 모드 마이그레이션 실행 로직 (비동기 엔진)."""
    configuration = config.get_section(config.config_ini_section) or {}
    # DB URL은 환경 변수 값으로 덮어쓰기
    configuration['sqlalchemy.url'] = DATABASE_URL

    connectable = create_async_engine(
        configuration['sqlalchemy.url'],
        poolclass=pool.NullPool, # Alembic 실행 시 NullPool 사용
    )

    async with connectable.connect() as connection:
        # 동기 함수(do_run_migrations)를 비동기 이벤트 루프에서 실행
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
