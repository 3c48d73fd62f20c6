from typing import Tuple

from app.domains.companies.repository import CompanyRepository
from app.domains.companies.schemas import CompanyResponse
from app.domains.editor.section_builder import SectionBuilder
from app.domains.editor.theme_editor import ThemeEditor


# 저장된 회사 값으로 편집기 두 개를 초기화 (둘 다 clean 상태)
def build_editors(
    repository: CompanyRepository, company: CompanyResponse
) -> Tuple[ThemeEditor, SectionBuilder]:
    theme_editor = ThemeEditor(repository, company.slug, company.theme)
    section_builder = SectionBuilder(repository, company.slug, list(company.sections))
    return theme_editor, section_builder
