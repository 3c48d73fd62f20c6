from typing import Iterable, List, Optional

from pydantic import BaseModel, Field

from app.domains.companies.schemas import Job

# "제약 없음"을 뜻하는 필터 값
ALL = "all"


class JobFilter(BaseModel):
    """검색어 + 위치 + 고용형태 + 부서 조건 (모두 AND)"""

    query: str = ""
    location: str = ALL
    job_type: str = ALL
    department: str = ALL

    @property
    def has_active_filters(self) -> bool:
        # 검색어는 필터 초기화 버튼 노출 조건에 포함하지 않음
        return self.location != ALL or self.job_type != ALL or self.department != ALL


class JobFacets(BaseModel):
    locations: List[str] = Field(default_factory=list)
    job_types: List[str] = Field(default_factory=list)
    departments: List[str] = Field(default_factory=list)


class FacetOption(BaseModel):
    value: str
    label: str


def active_jobs(jobs: Iterable[Job]) -> List[Job]:
    """is_active 가 명시적으로 False 인 공고만 제외"""
    return [job for job in jobs if job.is_listed]


def _matches_query(job: Job, query: str) -> bool:
    if query == "":
        return True
    needle = query.lower()
    return (
        needle in job.title.lower()
        or needle in job.description.lower()
        or needle in job.location.lower()
    )


def _matches_facet(selected: str, value: Optional[str]) -> bool:
    return selected == ALL or value == selected


def filter_jobs(
    jobs: Iterable[Job],
    query: str = "",
    location: str = ALL,
    job_type: str = ALL,
    department: str = ALL,
) -> List[Job]:
    """
    공고 목록을 필터링합니다. 입력 순서는 그대로 유지됩니다.

    - 비활성 공고(is_active=False)는 항상 제외
    - query: 제목/설명/위치 중 하나라도 포함하면 일치 (대소문자 무시, 빈 값은 전체)
    - location/job_type/department: "all" 이면 제약 없음, 아니면 정확히 일치
    """
    return [
        job
        for job in active_jobs(jobs)
        if _matches_query(job, query)
        and _matches_facet(location, job.location)
        and _matches_facet(job_type, job.job_type.value)
        and _matches_facet(department, job.department)
    ]


def apply_filter(jobs: Iterable[Job], job_filter: JobFilter) -> List[Job]:
    return filter_jobs(
        jobs,
        query=job_filter.query,
        location=job_filter.location,
        job_type=job_filter.job_type,
        department=job_filter.department,
    )


def derive_facets(jobs: Iterable[Job]) -> JobFacets:
    """활성 공고 전체에서 선택지를 뽑습니다 (현재 적용된 필터와 무관, 알파벳순)"""
    listed = active_jobs(jobs)
    return JobFacets(
        locations=sorted({job.location for job in listed}),
        job_types=sorted({job.job_type.value for job in listed}),
        departments=sorted({job.department for job in listed if job.department}),
    )


def job_type_label(job_type: str) -> str:
    """'full-time' -> 'Full Time'"""
    return job_type.replace("-", " ", 1).title()


def facet_options(facets: JobFacets) -> dict:
    """셀렉트 박스용 옵션 (맨 앞에 '전체' 항목)"""
    return {
        "location": [FacetOption(value=ALL, label="All Locations")]
        + [FacetOption(value=v, label=v) for v in facets.locations],
        "job_type": [FacetOption(value=ALL, label="All Job Types")]
        + [FacetOption(value=v, label=job_type_label(v)) for v in facets.job_types],
        "department": [FacetOption(value=ALL, label="All Departments")]
        + [FacetOption(value=v, label=v) for v in facets.departments],
    }
