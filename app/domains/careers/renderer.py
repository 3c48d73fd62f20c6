"""
공개 채용 페이지 프로젝션.

Company 레코드 하나를 받아 테마가 적용된 페이지 구조(히어로, 영상, 섹션, 공고 목록)와
SEO 메타데이터, schema.org 구조화 데이터를 만듭니다. 부수효과가 없고 같은 입력에는 항상
같은 결과를 냅니다.
"""
import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from app.core.utils import convert_to_embed_url
from app.domains.careers.filters import active_jobs, job_type_label
from app.domains.companies.schemas import CompanyResponse, Job, Section, Theme

# 테마 미설정 시 기본 색상
DEFAULT_PRIMARY = "#3b82f6"
DEFAULT_SECONDARY = "#8b5cf6"
DEFAULT_ACCENT = "#10b981"
COLOR_DEFAULTS = {
    "primary": DEFAULT_PRIMARY,
    "secondary": DEFAULT_SECONDARY,
    "accent": DEFAULT_ACCENT,
}
HERO_TEXT_COLOR = "#ffffff"
JOBS_BACKGROUND_DEFAULT = "#f9fafb"
HERO_TAGLINE = "Join Our Team"
SCHEMA_CONTEXT = "https://schema.org"


class HeroBlock(BaseModel):
    name: str
    tagline: str = HERO_TAGLINE
    background_color: str
    text_color: str = HERO_TEXT_COLOR
    logo: Optional[str] = None
    logo_alt: str
    banner: Optional[str] = None
    aria_label: str


class VideoBlock(BaseModel):
    source_url: str
    embed_url: str
    title: str = "Company video"


class RenderedSection(BaseModel):
    id: str
    type: str
    title: str
    content: str
    heading_color: str


class JobCard(BaseModel):
    id: str
    title: str
    description: str
    location: str
    job_type: str
    job_type_label: str
    department: Optional[str] = None
    requirements: List[str] = Field(default_factory=list)
    benefits: List[str] = Field(default_factory=list)
    badge_color: Optional[str] = None


class JobsBlock(BaseModel):
    heading: str = "Open Positions"
    heading_color: str
    background_color: str
    total: int
    jobs: List[JobCard] = Field(default_factory=list)


class PageMetadata(BaseModel):
    title: str
    description: str
    canonical_url: str = ""
    open_graph: Dict[str, str] = Field(default_factory=dict)
    twitter: Dict[str, str] = Field(default_factory=dict)


class CareersPage(BaseModel):
    slug: str
    hero: HeroBlock
    video: Optional[VideoBlock] = None
    sections: List[RenderedSection] = Field(default_factory=list)
    jobs: Optional[JobsBlock] = None  # 활성 공고가 없으면 블록 자체를 생략
    metadata: PageMetadata
    structured_data: List[Dict[str, Any]] = Field(default_factory=list)


def careers_path(slug: str) -> str:
    return f"/{slug}/careers"


def careers_url(slug: str, base_url: str = "") -> str:
    return f"{base_url}{careers_path(slug)}" if base_url else careers_path(slug)


def color_or_default(theme: Theme, field: str) -> str:
    return getattr(theme, field) or COLOR_DEFAULTS[field]


def render_section_content(content) -> str:
    # 구조화된 콘텐츠는 JSON 텍스트로 표시
    if isinstance(content, str):
        return content
    return json.dumps(content, ensure_ascii=False, separators=(",", ":"))


def visible_sections(sections: List[Section]) -> List[Section]:
    """숨김 섹션을 제외하고 order 오름차순 정렬"""
    return sorted((s for s in sections if s.is_visible), key=lambda s: s.order)


def build_hero(company: CompanyResponse) -> HeroBlock:
    theme = company.theme
    name = company.display_name
    return HeroBlock(
        name=name,
        background_color=color_or_default(theme, "primary"),
        logo=theme.logo or None,
        logo_alt=f"{name} logo",
        banner=theme.banner or None,
        aria_label=f"{name} careers page header",
    )


def build_video(theme: Theme) -> Optional[VideoBlock]:
    if not theme.video:
        return None
    return VideoBlock(source_url=theme.video, embed_url=convert_to_embed_url(theme.video))


def build_job_card(job: Job, theme: Theme) -> JobCard:
    return JobCard(
        id=job.id,
        title=job.title,
        description=job.description,
        location=job.location,
        job_type=job.job_type.value,
        job_type_label=job_type_label(job.job_type.value),
        department=job.department or None,
        requirements=job.requirements or [],
        benefits=job.benefits or [],
        badge_color=theme.primary or None,
    )


def build_jobs_block(jobs: List[Job], theme: Theme) -> Optional[JobsBlock]:
    if not jobs:
        return None
    return JobsBlock(
        heading_color=color_or_default(theme, "accent"),
        # accent 색상에 알파값 10 을 붙인 옅은 배경
        background_color=f"{theme.accent}10" if theme.accent else JOBS_BACKGROUND_DEFAULT,
        total=len(jobs),
        jobs=[build_job_card(job, theme) for job in jobs],
    )


def build_metadata(company: CompanyResponse, job_count: int, base_url: str = "") -> PageMetadata:
    name = company.display_name
    short_description = f"Explore {job_count} open positions at {name}."
    return PageMetadata(
        title=f"Careers at {name} | Join Our Team",
        description=f"{short_description} Join our team and help shape the future.",
        canonical_url=careers_url(company.slug, base_url),
        open_graph={
            "title": f"Careers at {name}",
            "description": short_description,
            "type": "website",
        },
        twitter={
            "card": "summary_large_image",
            "title": f"Careers at {name}",
            "description": short_description,
        },
    )


def _job_posting_schema(job: Job, company: CompanyResponse, base_url: str) -> Dict[str, Any]:
    name = company.display_name
    logo = company.theme.logo or ""
    posting: Dict[str, Any] = {
        "@type": "JobPosting",
        "title": job.title,
        "description": job.description,
        "identifier": {"@type": "PropertyValue", "name": name, "value": job.id},
        "datePosted": company.created_at.isoformat(),
        "employmentType": job.job_type.value.replace("-", " ", 1),
        "hiringOrganization": {
            "@type": "Organization",
            "name": name,
            "sameAs": base_url,
            "logo": logo,
        },
        "jobLocation": {
            "@type": "Place",
            "address": {
                "@type": "PostalAddress",
                "addressLocality": job.location,
                "addressCountry": "US",
            },
        },
    }
    if job.department:
        posting["department"] = {"@type": "Organization", "name": job.department}
    if job.requirements:
        posting["qualifications"] = ", ".join(job.requirements)
    if job.benefits:
        posting["benefits"] = ", ".join(job.benefits)
    return posting


def build_structured_data(
    company: CompanyResponse, jobs: List[Job], base_url: str = ""
) -> List[Dict[str, Any]]:
    """Organization, BreadcrumbList, CollectionPage JSON-LD 문서 3개"""
    name = company.display_name
    page_url = careers_url(company.slug, base_url)

    organization = {
        "@context": SCHEMA_CONTEXT,
        "@type": "Organization",
        "name": name,
        "url": base_url,
        "logo": company.theme.logo or "",
        "sameAs": [],
        "jobPostings": [_job_posting_schema(job, company, base_url) for job in jobs],
    }
    breadcrumb = {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {"@type": "ListItem", "position": 1, "name": "Home", "item": base_url},
            {"@type": "ListItem", "position": 2, "name": "Careers", "item": page_url},
        ],
    }
    collection_page = {
        "@context": SCHEMA_CONTEXT,
        "@type": "CollectionPage",
        "name": f"Careers at {name}",
        "description": f"Explore {len(jobs)} open positions at {name}",
        "url": page_url,
        "mainEntity": {
            "@type": "ItemList",
            "numberOfItems": len(jobs),
            "itemListElement": [
                {
                    "@type": "ListItem",
                    "position": index + 1,
                    "item": {
                        "@type": "JobPosting",
                        "title": job.title,
                        "description": job.description,
                        "identifier": job.id,
                    },
                }
                for index, job in enumerate(jobs)
            ],
        },
    }
    return [organization, breadcrumb, collection_page]


def render_careers_page(company: CompanyResponse, base_url: str = "") -> CareersPage:
    theme = company.theme
    listed = active_jobs(company.jobs)
    heading_color = color_or_default(theme, "secondary")

    return CareersPage(
        slug=company.slug,
        hero=build_hero(company),
        video=build_video(theme),
        sections=[
            RenderedSection(
                id=section.id,
                type=section.type.value,
                title=section.title,
                content=render_section_content(section.content),
                heading_color=heading_color,
            )
            for section in visible_sections(company.sections)
        ],
        jobs=build_jobs_block(listed, theme),
        metadata=build_metadata(company, len(listed), base_url),
        structured_data=build_structured_data(company, listed, base_url),
    )
