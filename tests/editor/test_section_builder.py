import asyncio

import pytest

from app.core.exceptions import ValidationError
from app.domains.companies.schemas import Section, SectionType
from app.domains.editor.section_builder import NEW_SECTION_TITLE, SectionBuilder
from app.domains.editor.service import build_editors
from app.domains.editor.state import EditorStatus


def make_sections(*ids):
    return [Section(id=section_id, title=section_id.upper(), order=index) for index, section_id in enumerate(ids)]


def order_of(builder):
    return [(s.id, s.order) for s in builder.draft]


def test_move_up_swaps_with_neighbor():
    builder = SectionBuilder(None, "acme-corp", make_sections("a", "b", "c"))

    assert builder.move_up(1) is True
    assert order_of(builder) == [("b", 0), ("a", 1), ("c", 2)]
    assert builder.status == EditorStatus.dirty


def test_move_at_boundaries_is_noop():
    builder = SectionBuilder(None, "acme-corp", make_sections("a", "b", "c"))

    assert builder.move_up(0) is False
    assert builder.move_down(2) is False
    assert builder.move_up(5) is False
    assert order_of(builder) == [("a", 0), ("b", 1), ("c", 2)]
    assert builder.status == EditorStatus.clean


def test_add_section_defaults():
    builder = SectionBuilder(None, "acme-corp", make_sections("a"))
    section = builder.add_section()

    assert section.type == SectionType.custom
    assert section.title == NEW_SECTION_TITLE
    assert section.content == ""
    assert section.is_visible is True
    assert section.order == 1
    assert builder.draft[-1].id == section.id
    assert builder.add_section().id != section.id


def test_remove_keeps_relative_order():
    builder = SectionBuilder(None, "acme-corp", make_sections("a", "b", "c"))

    assert builder.remove_section("b") is True
    assert [s.id for s in builder.draft] == ["a", "c"]
    assert builder.remove_section("missing") is False


def test_update_and_toggle():
    builder = SectionBuilder(None, "acme-corp", make_sections("a", "b"))

    assert builder.update_section("a", "title", "About Us") is True
    assert builder.update_section("b", "type", "benefits") is True
    assert builder.toggle_visibility("b") is True
    assert builder.draft[0].title == "About Us"
    assert builder.draft[1].type == SectionType.benefits
    assert builder.draft[1].is_visible is False
    assert builder.update_section("missing", "title", "x") is False

    with pytest.raises(ValidationError):
        builder.update_section("a", "order", 3)
    with pytest.raises(ValidationError):
        builder.update_section("a", "type", "blog")


@pytest.mark.asyncio
async def test_save_rewrites_order(repository, make_company):
    company = await make_company(
        "acme-corp",
        sections=[
            {"id": "a", "title": "A", "order": 5},
            {"id": "b", "title": "B", "order": 9},
            {"id": "c", "title": "C", "order": 9},
        ],
    )
    _, builder = build_editors(repository, company)

    builder.move_down(0)
    assert await builder.save() is True
    assert builder.status == EditorStatus.clean
    assert order_of(builder) == [("b", 0), ("a", 1), ("c", 2)]

    stored = await repository.get_by_slug("acme-corp")
    assert [(s["id"], s["order"]) for s in stored.sections] == [("b", 0), ("a", 1), ("c", 2)]


@pytest.mark.asyncio
async def test_failed_save_keeps_draft(repository, make_company):
    company = await make_company("acme-corp", sections=[{"id": "a", "title": "A"}])
    _, builder = build_editors(repository, company)
    await repository.delete("acme-corp")

    builder.add_section()
    assert await builder.save() is False
    assert builder.status == EditorStatus.dirty
    assert builder.error == "Company not found"
    assert len(builder.draft) == 2


@pytest.mark.asyncio
async def test_reentrant_save_is_ignored(repository, make_company, monkeypatch):
    company = await make_company("acme-corp", sections=[{"id": "a", "title": "A"}])
    _, builder = build_editors(repository, company)

    gate = asyncio.Event()
    original_update = repository.update
    calls = []

    async def slow_update(slug, data):
        calls.append(slug)
        await gate.wait()
        return await original_update(slug, data)

    monkeypatch.setattr(repository, "update", slow_update)

    # 1. 첫 저장이 진행 중인 상태 만들기
    builder.add_section()
    task = asyncio.create_task(builder.save())
    await asyncio.sleep(0)
    assert builder.status == EditorStatus.saving

    # 2. 진행 중 재저장은 무시, 수정은 초안에 남음
    assert await builder.save() is False
    builder.toggle_visibility("a")

    gate.set()
    assert await task is True
    assert calls == ["acme-corp"]
    # 저장 중 들어온 수정이 있으므로 여전히 dirty
    assert builder.status == EditorStatus.dirty
    assert builder.draft[0].is_visible is False
    assert builder.persisted[0].is_visible is True


def test_sync_ignored_while_dirty():
    builder = SectionBuilder(None, "acme-corp", make_sections("a"))
    builder.add_section()

    assert builder.sync(make_sections("x", "y", "z")) is False
    assert [s.id for s in builder.draft][0] == "a"

    clean = SectionBuilder(None, "acme-corp", make_sections("a"))
    assert clean.sync(make_sections("x", "y")) is True
    assert [s.id for s in clean.draft] == ["x", "y"]
