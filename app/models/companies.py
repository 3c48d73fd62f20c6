import uuid

from sqlalchemy import JSON, Column, DateTime, String
from sqlalchemy.dialects.postgresql import JSONB

# 유틸리티 함수 임포트
from app.core.datetime_utils import get_now_utc
from app.models.base import Base

# PostgreSQL 에서는 JSONB, 그 외(테스트용 SQLite 등)에서는 일반 JSON
JSONType = JSON().with_variant(JSONB(), "postgresql")


def generate_company_id() -> str:
    return str(uuid.uuid4())


# 채용 페이지를 가진 회사 (테마/섹션/공고는 JSON 컬럼에 통째로 저장)
class Company(Base):
    __tablename__ = "companies"

    id = Column(String(36), primary_key=True, default=generate_company_id)  # 불변 식별자
    slug = Column(String(50), unique=True, index=True, nullable=False)  # URL/로그인 키
    name = Column(String(255), nullable=True)  # 표시 이름 (선택)

    theme = Column(JSONType, nullable=False, default=dict)  # 색상, 로고, 배너, 영상
    sections = Column(JSONType, nullable=False, default=list)  # 순서 있는 콘텐츠 섹션
    jobs = Column(JSONType, nullable=False, default=list)  # 채용 공고 목록

    created_at = Column(
        DateTime(timezone=True),
        default=get_now_utc,
        nullable=False,
    )  # 생성일
    updated_at = Column(
        DateTime(timezone=True),
        default=get_now_utc,
        onupdate=get_now_utc,
        nullable=False,
    )  # 수정일 (모든 변경 시 갱신)

    def __str__(self):
        return self.slug
