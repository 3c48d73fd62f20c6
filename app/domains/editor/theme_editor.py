from typing import Any, Dict

from app.core.exceptions import ValidationError
from app.domains.careers.renderer import COLOR_DEFAULTS
from app.domains.companies.schemas import CompanyResponse, CompanyUpdate, Theme
from app.domains.editor.state import DraftEditor

THEME_FIELDS = ("primary", "secondary", "accent", "logo", "banner", "video")


class ThemeEditor(DraftEditor[Theme]):
    """테마(색상/로고/배너/영상) 편집기"""

    field_name = "theme"

    def set_field(self, field: str, value: str) -> None:
        if field not in THEME_FIELDS:
            raise ValidationError(f"Unknown theme field: {field}")
        # URL 형식 검증은 저장 시점에 수행 (입력 중간 상태 허용)
        self.draft = self.draft.model_copy(update={field: value})
        self._mark_dirty()

    def display_color(self, field: str) -> str:
        """색상 미리보기용: 미설정이면 기본 색상"""
        return getattr(self.draft, field) or COLOR_DEFAULTS[field]

    def _build_update(self, value: Theme) -> CompanyUpdate:
        return CompanyUpdate(theme=Theme.model_validate(value.model_dump()))

    def _extract(self, company: CompanyResponse) -> Theme:
        return company.theme

    def snapshot(self) -> Dict[str, Any]:
        data = super().snapshot()
        data["theme"] = self.draft.model_dump()
        data["color_defaults"] = dict(COLOR_DEFAULTS)
        return data
