from datetime import datetime, timedelta, timezone

UTC = timezone.utc


def get_now_utc() -> datetime:
    """현재 시각을 UTC로 반환합니다."""
    return datetime.now(UTC)


def expires_in_days(days: int) -> datetime:
    """현재 시각 기준 `days`일 뒤의 UTC 시각 (세션 만료 계산용)"""
    return get_now_utc() + timedelta(days=days)
