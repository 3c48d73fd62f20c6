from fastapi import status


class CareersError(Exception):
    """도메인 공통 예외. 핸들러에서 {"error": message} 형태로 변환됩니다."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# 잘못된 입력 (slug 누락, 형식 오류 등)
class ValidationError(CareersError):
    status_code = status.HTTP_400_BAD_REQUEST


# 존재하지 않는 slug
class NotFoundError(CareersError):
    status_code = status.HTTP_404_NOT_FOUND


# 중복 slug 생성
class ConflictError(CareersError):
    status_code = status.HTTP_409_CONFLICT


# 세션 없음 / 다른 회사 세션
class UnauthorizedError(CareersError):
    status_code = status.HTTP_401_UNAUTHORIZED


# 개발 환경 전용 기능 접근
class ForbiddenError(CareersError):
    status_code = status.HTTP_403_FORBIDDEN


# 저장소 오류 (내부 정보는 메시지 문자열 이상 노출하지 않음)
class InternalError(CareersError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class LoginRequired(Exception):
    """페이지 라우트용 인증 실패. 로그인 페이지로 리다이렉트됩니다."""

    def __init__(self, redirect_to: str):
        super().__init__(redirect_to)
        self.redirect_to = redirect_to
