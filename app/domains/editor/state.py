import copy
import logging
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import CareersError
from app.domains.companies.repository import CompanyRepository
from app.domains.companies.schemas import CompanyResponse, CompanyUpdate
from app.domains.companies.service import update_company

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EditorStatus(str, Enum):
    clean = "clean"  # 초안 == 저장된 값
    dirty = "dirty"  # 저장되지 않은 수정 있음
    saving = "saving"  # 저장 요청 진행 중


class DraftEditor(Generic[T]):
    """
    저장된 값(persisted)과 로컬 초안(draft)을 따로 들고 있는 편집기 공통 상태 머신.

    clean -> (수정) -> dirty -> save() -> saving -> clean
                                              \\-> dirty (+ error)
    - save() 는 dirty 일 때만 동작하고, 진행 중인 저장이 있으면 무시됩니다.
    - 실패해도 초안은 그대로 두고 error 에 메시지를 남깁니다. 자동 재시도는 없습니다.
    - sync() 로 들어온 외부 변경은 clean 일 때만 초안에 반영됩니다.
    """

    field_name = ""

    def __init__(self, repository: CompanyRepository, slug: str, persisted: T):
        self.repository = repository
        self.slug = slug
        self.persisted: T = copy.deepcopy(persisted)
        self.draft: T = copy.deepcopy(persisted)
        self.status = EditorStatus.clean
        self.error: Optional[str] = None

    @property
    def is_dirty(self) -> bool:
        return self.status == EditorStatus.dirty

    @property
    def is_saving(self) -> bool:
        return self.status == EditorStatus.saving

    def _mark_dirty(self) -> None:
        # saving 중 수정은 저장 완료 시점에 비교해서 판단
        if self.status == EditorStatus.clean:
            self.status = EditorStatus.dirty

    def sync(self, upstream: T) -> bool:
        """외부에서 갱신된 값을 반영합니다. clean 이 아니면 초안을 덮어쓰지 않음"""
        if self.status != EditorStatus.clean:
            logger.info(f"[{self.slug}] {self.field_name} 편집 중이라 외부 변경 무시")
            return False
        self.persisted = copy.deepcopy(upstream)
        self.draft = copy.deepcopy(upstream)
        return True

    def _prepare_for_save(self) -> None:
        """저장 직전 초안 정리 (하위 클래스에서 필요 시 구현)"""

    def _build_update(self, value: T) -> CompanyUpdate:
        raise NotImplementedError

    def _extract(self, company: CompanyResponse) -> T:
        raise NotImplementedError

    async def save(self) -> bool:
        if self.status != EditorStatus.dirty:
            return False

        self._prepare_for_save()
        snapshot = copy.deepcopy(self.draft)
        self.status = EditorStatus.saving
        self.error = None

        try:
            payload = self._build_update(snapshot)
            company = await update_company(self.repository, self.slug, payload)
        except CareersError as e:
            self._fail(e.message)
            return False
        except SchemaValidationError as e:
            self._fail(f"Invalid {self.field_name}: {e.error_count()} error(s)")
            return False
        except SQLAlchemyError:
            logger.exception(f"[{self.slug}] {self.field_name} 저장 중 DB 오류")
            self._fail(f"Failed to save {self.field_name}")
            return False
        except Exception:
            # 연결 오류, 타임아웃 등 저장소 밖의 실패도 dirty 로 되돌림
            logger.exception(f"[{self.slug}] {self.field_name} 저장 중 예기치 않은 오류")
            self._fail(f"Failed to save {self.field_name}")
            return False
        else:
            self.persisted = self._extract(company)
            if self.draft == snapshot:
                self.draft = copy.deepcopy(self.persisted)
                self.status = EditorStatus.clean
            else:
                # 저장 중에 추가 수정이 들어옴
                self.status = EditorStatus.dirty
            return True
        finally:
            # 취소(CancelledError)로 빠져나간 경우 saving 에 머물지 않도록
            if self.status == EditorStatus.saving:
                self._fail(f"Save of {self.field_name} was interrupted")

    def _fail(self, message: str) -> None:
        logger.warning(f"[{self.slug}] {self.field_name} 저장 실패: {message}")
        self.status = EditorStatus.dirty
        self.error = message

    def snapshot(self) -> Dict[str, Any]:
        return {"status": self.status.value, "error": self.error}
