from typing import Any, Dict, List

from pydantic import BaseModel, Field

from app.domains.careers.filters import FacetOption, JobFacets, JobFilter
from app.domains.careers.renderer import CareersPage, JobCard


class JobSearchResult(BaseModel):
    filters: JobFilter
    has_active_filters: bool
    facets: JobFacets
    options: Dict[str, List[FacetOption]] = Field(default_factory=dict)
    result_count: int
    jobs: List[JobCard] = Field(default_factory=list)


### 공개 채용 페이지 응답
class CareersPageResponse(BaseModel):
    page: CareersPage
    search: JobSearchResult


class PageLinks(BaseModel):
    edit: str
    preview: str
    public: str


### 미리보기 응답 (편집/공개 페이지 링크 포함)
class PreviewResponse(CareersPageResponse):
    preview: bool = True
    links: PageLinks


### 편집 페이지 초기 데이터
class EditorBootstrapResponse(BaseModel):
    slug: str
    name: str
    theme_editor: Dict[str, Any]
    section_builder: Dict[str, Any]
    links: PageLinks
