# 검증 & 정규화 레이어
# - 필수 필드, ObjectId 형식, enum, 날짜 파싱 검사
# - 실패 시 ValidationError(400)를 던지며, 메시지는 클라이언트에 그대로 노출됨

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional, Type, TypeVar

from ..core.exceptions import ValidationError
from ..models.base import is_valid_object_id

E = TypeVar("E", bound=Enum)


def require_fields(*values: Any, message: str) -> None:
    # 빈 문자열도 누락으로 취급합니다.
    if any(value is None or value == "" for value in values):
        raise ValidationError(message)


def require_object_id(value: Any, message: str) -> str:
    if not is_valid_object_id(value):
        raise ValidationError(message)
    return value


def optional_object_id(value: Optional[str], message: str) -> Optional[str]:
    if not value:
        return None
    return require_object_id(value, message)


def parse_enum(enum_cls: Type[E], value: Any, message: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(message)


# ISO-8601이 아닌 입력을 위한 보조 형식 (이전 JS 클라이언트가 보내던 형태)
FALLBACK_DATE_FORMATS = (
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M:%S",
    "%b %d %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%d %B %Y",
    "%a %b %d %Y",
    "%a, %d %b %Y %H:%M:%S GMT",
)


def _parse_date_string(text: str) -> Optional[datetime]:
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in FALLBACK_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def parse_datetime(value: Any, message: str) -> datetime:
    """날짜 문자열을 UTC naive datetime으로 변환합니다.

    ISO-8601("2024-01-01", "2024-01-01T09:00:00Z", "2024-01-01T09:00:00+09:00")을
    먼저 시도하고, 실패하면 FALLBACK_DATE_FORMATS("2024/01/15", "Jan 15 2024" 등)를
    순서대로 시도합니다. 오프셋이 있으면 UTC로 변환하고, 없으면 UTC로 간주합니다.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        parsed = _parse_date_string(value.strip())
        if parsed is None:
            raise ValidationError(message)
    else:
        raise ValidationError(message)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    # BSON date 정밀도(밀리초)에 맞춤
    return parsed.replace(microsecond=parsed.microsecond // 1000 * 1000)


def optional_datetime(value: Any, message: str) -> Optional[datetime]:
    if value is None or value == "":
        return None
    return parse_datetime(value, message)


def ensure_after(start: datetime, end: Optional[datetime], message: str) -> None:
    if end is not None and end <= start:
        raise ValidationError(message)


def check_password_length(password: str, min_length: int) -> None:
    if len(password) < min_length:
        raise ValidationError(f"Password must be at least {min_length} characters long")
