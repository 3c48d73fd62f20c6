import uuid
from enum import Enum
from typing import Any, Dict, List

from app.core.exceptions import ValidationError
from app.domains.companies.schemas import (
    CompanyResponse,
    CompanyUpdate,
    Section,
    SectionType,
)
from app.domains.editor.state import DraftEditor

# 섹션 유형 선택지 (값, 표시 이름)
SECTION_TYPE_LABELS = {
    SectionType.about: "About",
    SectionType.life: "Life at Company",
    SectionType.benefits: "Benefits",
    SectionType.values: "Values",
    SectionType.culture: "Culture",
    SectionType.team: "Team",
    SectionType.custom: "Custom",
}
NEW_SECTION_TITLE = "New Section"
EDITABLE_SECTION_FIELDS = ("type", "title", "content", "is_visible")


class MoveDirection(str, Enum):
    up = "up"
    down = "down"


def section_type_options() -> List[Dict[str, str]]:
    return [{"value": t.value, "label": label} for t, label in SECTION_TYPE_LABELS.items()]


class SectionBuilder(DraftEditor[List[Section]]):
    """순서 있는 섹션 목록 편집기 (추가/삭제/이동/수정/표시 전환)"""

    field_name = "sections"

    def _index_of(self, section_id: str) -> int:
        for index, section in enumerate(self.draft):
            if section.id == section_id:
                return index
        return -1

    def add_section(self) -> Section:
        section = Section(
            id=uuid.uuid4().hex,
            type=SectionType.custom,
            title=NEW_SECTION_TITLE,
            content="",
            order=len(self.draft),
            is_visible=True,
        )
        self.draft = [*self.draft, section]
        self._mark_dirty()
        return section

    def remove_section(self, section_id: str) -> bool:
        index = self._index_of(section_id)
        if index < 0:
            return False
        self.draft = self.draft[:index] + self.draft[index + 1:]
        self._mark_dirty()
        return True

    def move(self, index: int, direction: MoveDirection) -> bool:
        """이웃 섹션과 자리를 바꿉니다. 처음/끝 경계에서는 아무 일도 하지 않음"""
        target = index - 1 if direction == MoveDirection.up else index + 1
        if not (0 <= index < len(self.draft)) or not (0 <= target < len(self.draft)):
            return False

        sections = list(self.draft)
        sections[index], sections[target] = sections[target], sections[index]
        sections[index] = sections[index].model_copy(update={"order": index})
        sections[target] = sections[target].model_copy(update={"order": target})
        self.draft = sections
        self._mark_dirty()
        return True

    def move_up(self, index: int) -> bool:
        return self.move(index, MoveDirection.up)

    def move_down(self, index: int) -> bool:
        return self.move(index, MoveDirection.down)

    def update_section(self, section_id: str, field: str, value: Any) -> bool:
        if field not in EDITABLE_SECTION_FIELDS:
            raise ValidationError(f"Unknown section field: {field}")
        if field == "type":
            try:
                value = SectionType(value)
            except ValueError:
                raise ValidationError(f"Unknown section type: {value}")

        index = self._index_of(section_id)
        if index < 0:
            return False
        sections = list(self.draft)
        sections[index] = sections[index].model_copy(update={field: value})
        self.draft = sections
        self._mark_dirty()
        return True

    def toggle_visibility(self, section_id: str) -> bool:
        index = self._index_of(section_id)
        if index < 0:
            return False
        return self.update_section(section_id, "is_visible", not self.draft[index].is_visible)

    def _prepare_for_save(self) -> None:
        # 배열 위치가 곧 표시 순서 (0부터 연속)
        self.draft = [
            section.model_copy(update={"order": index})
            for index, section in enumerate(self.draft)
        ]

    def _build_update(self, value: List[Section]) -> CompanyUpdate:
        return CompanyUpdate(sections=[Section.model_validate(s.model_dump()) for s in value])

    def _extract(self, company: CompanyResponse) -> List[Section]:
        return list(company.sections)

    def snapshot(self) -> Dict[str, Any]:
        data = super().snapshot()
        data["sections"] = [s.model_dump(mode="json") for s in self.draft]
        data["section_types"] = section_type_options()
        return data
