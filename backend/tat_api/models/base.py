# 문서 공통 유틸
# - MongoDB는 datetime을 밀리초 단위 UTC(naive)로 저장함
# - 응답 직렬화: ObjectId -> str, datetime -> ISO-8601 문자열(밀리초 + "Z")

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict

# 생성자 정보가 없으므로 고정값을 기록합니다.
SYSTEM_USER = "system"


def utcnow() -> datetime:
    # Mongo에 저장된 값과 응답 값이 일치하도록 마이크로초를 밀리초로 잘라냅니다.
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def is_valid_object_id(value: Any) -> bool:
    return isinstance(value, str) and ObjectId.is_valid(value)


def format_datetime(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds") + "Z"


def _serialize_value(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return format_datetime(value)
    return value


def serialize_doc(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not doc:
        return doc
    return {k: _serialize_value(v) for k, v in doc.items()}


def empty_string(value: Any) -> str:
    return value or ""


def none_if_falsy(value: Any) -> Any:
    return value or None


class StoredDocument(BaseModel):
    """컬렉션에 저장되는 문서 형태의 기본 클래스입니다.

    주니어 개발자님께: 선택 필드가 빠져도 기본값으로 채워서 저장하므로,
    모든 문서가 같은 키 구성을 가집니다. enum은 문자열 값으로 저장됩니다.
    """
    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    def to_mongo(self) -> Dict[str, Any]:
        return self.model_dump()
