from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

SLUG_PATTERN = r"^[a-z0-9-]+$"

# 최상위 라우트 경로와 겹치면 /{slug}/careers 등에 도달할 수 없음
RESERVED_SLUGS = frozenset({"companies", "auth", "seed", "login"})


class SectionType(str, Enum):
    about = "about"
    life = "life"
    benefits = "benefits"
    values = "values"
    culture = "culture"
    team = "team"
    custom = "custom"


class JobType(str, Enum):
    full_time = "full-time"
    part_time = "part-time"
    contract = "contract"
    internship = "internship"
    freelance = "freelance"


def _validate_media_url(v: Optional[str]) -> Optional[str]:
    # 빈 문자열은 "미설정"으로 허용
    if v is None or v == "":
        return v
    parsed = urlparse(v)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("http(s) 로 시작하는 URL 이어야 합니다.")
    return v


def _ensure_unique_ids(items: list, kind: str) -> list:
    seen = set()
    for item in items:
        if item.id in seen:
            raise ValueError(f"{kind} id '{item.id}' 가 중복되었습니다.")
        seen.add(item.id)
    return items


### 테마 (모든 필드 선택)
class Theme(BaseModel):
    primary: Optional[str] = None  # 메인 색상
    secondary: Optional[str] = None  # 보조 색상
    accent: Optional[str] = None  # 강조 색상
    logo: Optional[str] = None  # 로고 이미지 URL
    banner: Optional[str] = None  # 배너 이미지 URL
    video: Optional[str] = None  # 소개 영상 URL

    @field_validator("logo", "banner", "video")
    @classmethod
    def validate_media(cls, v):
        return _validate_media_url(v)

    def to_storage(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


### 페이지 섹션
class Section(BaseModel):
    id: str
    type: SectionType = SectionType.custom
    title: str = ""
    content: Union[str, Dict[str, Any]] = ""  # 텍스트 또는 구조화된 레코드
    order: int = 0
    is_visible: bool = True

    def to_storage(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


### 채용 공고
class Job(BaseModel):
    id: str
    title: str
    description: str = ""
    location: str
    job_type: JobType
    department: Optional[str] = None
    requirements: Optional[List[str]] = None
    benefits: Optional[List[str]] = None
    is_active: Optional[bool] = None  # 값이 없으면 활성으로 간주

    @property
    def is_listed(self) -> bool:
        return self.is_active is not False

    def to_storage(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


### 회사 생성 요청
class CompanyCreate(BaseModel):
    slug: str = Field(min_length=1, max_length=50, pattern=SLUG_PATTERN)
    name: Optional[str] = None
    theme: Theme = Field(default_factory=Theme)
    sections: List[Section] = Field(default_factory=list)
    jobs: List[Job] = Field(default_factory=list)

    @field_validator("slug")
    @classmethod
    def not_reserved(cls, v):
        if v in RESERVED_SLUGS:
            raise ValueError(f"'{v}' 은(는) 사용할 수 없는 slug 입니다.")
        return v

    @field_validator("sections")
    @classmethod
    def unique_section_ids(cls, v):
        return _ensure_unique_ids(v, "section")

    @field_validator("jobs")
    @classmethod
    def unique_job_ids(cls, v):
        return _ensure_unique_ids(v, "job")

    def to_storage(self) -> Dict[str, Any]:
        return {
            "slug": self.slug,
            "name": self.name or None,
            "theme": self.theme.to_storage(),
            "sections": [s.to_storage() for s in self.sections],
            "jobs": [j.to_storage() for j in self.jobs],
        }


### 회사 수정 요청 (최상위 필드 단위 교체, slug/id 는 수정 불가)
class CompanyUpdate(BaseModel):
    name: Optional[str] = None
    theme: Optional[Theme] = None
    sections: Optional[List[Section]] = None
    jobs: Optional[List[Job]] = None

    @field_validator("sections")
    @classmethod
    def unique_section_ids(cls, v):
        return v if v is None else _ensure_unique_ids(v, "section")

    @field_validator("jobs")
    @classmethod
    def unique_job_ids(cls, v):
        return v if v is None else _ensure_unique_ids(v, "job")

    def to_storage(self) -> Dict[str, Any]:
        """요청에 포함된 필드만 반환 (theme/sections/jobs 의 null 은 무시)"""
        data: Dict[str, Any] = {}
        if "name" in self.model_fields_set:
            data["name"] = self.name
        if self.theme is not None:
            data["theme"] = self.theme.to_storage()
        if self.sections is not None:
            data["sections"] = [s.to_storage() for s in self.sections]
        if self.jobs is not None:
            data["jobs"] = [j.to_storage() for j in self.jobs]
        return data


class CompanyResponse(BaseModel):
    id: str
    slug: str
    name: Optional[str] = None
    theme: Theme = Field(default_factory=Theme)
    sections: List[Section] = Field(default_factory=list)
    jobs: List[Job] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @property
    def display_name(self) -> str:
        return self.name or self.slug


class CompanyEnvelope(BaseModel):
    company: CompanyResponse


class CompanyListResponse(BaseModel):
    companies: List[CompanyResponse] = Field(default_factory=list)


class SuccessResponse(BaseModel):
    success: bool = True


### 에러 응답 (문서화용)
class ErrorResponse(BaseModel):
    error: str

