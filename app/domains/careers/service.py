from app.core.config import APP_URL
from app.domains.careers.filters import (
    JobFilter,
    apply_filter,
    derive_facets,
    facet_options,
)
from app.domains.careers.renderer import build_job_card, careers_path, render_careers_page
from app.domains.careers.schemas import (
    CareersPageResponse,
    EditorBootstrapResponse,
    JobSearchResult,
    PageLinks,
    PreviewResponse,
)
from app.domains.companies.repository import CompanyRepository
from app.domains.companies.schemas import CompanyResponse
from app.domains.companies.service import get_company
from app.domains.editor.service import build_editors


def page_links(slug: str) -> PageLinks:
    return PageLinks(edit=f"/{slug}/edit", preview=f"/{slug}/preview", public=careers_path(slug))


def search_jobs(company: CompanyResponse, job_filter: JobFilter) -> JobSearchResult:
    """필터 결과 + 필터와 무관한 전체 선택지"""
    matched = apply_filter(company.jobs, job_filter)
    facets = derive_facets(company.jobs)
    return JobSearchResult(
        filters=job_filter,
        has_active_filters=job_filter.has_active_filters,
        facets=facets,
        options=facet_options(facets),
        result_count=len(matched),
        jobs=[build_job_card(job, company.theme) for job in matched],
    )


async def get_careers_page(
    repository: CompanyRepository, slug: str, job_filter: JobFilter
) -> CareersPageResponse:
    company = await get_company(repository, slug)
    return CareersPageResponse(
        page=render_careers_page(company, base_url=APP_URL),
        search=search_jobs(company, job_filter),
    )


async def get_preview_page(repository: CompanyRepository, slug: str) -> PreviewResponse:
    company = await get_company(repository, slug)
    return PreviewResponse(
        page=render_careers_page(company, base_url=APP_URL),
        search=search_jobs(company, JobFilter()),
        links=page_links(company.slug),
    )


async def get_editor_bootstrap(repository: CompanyRepository, slug: str) -> EditorBootstrapResponse:
    company = await get_company(repository, slug)
    theme_editor, section_builder = build_editors(repository, company)
    return EditorBootstrapResponse(
        slug=company.slug,
        name=company.display_name,
        theme_editor=theme_editor.snapshot(),
        section_builder=section_builder.snapshot(),
        links=page_links(company.slug),
    )
