# User 도메인 모델
# - 컬렉션: users
# - password 필드에는 해시만 저장, 응답에는 절대 포함하지 않음
# - 타임스탬프 필드는 camelCase (createdAt/updatedAt)

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field, field_validator

from .base import StoredDocument, none_if_falsy, utcnow

COLLECTION = "users"
DEFAULT_ROLE = "user"

# 응답으로 내보내는 필드 (password 제외)
PUBLIC_FIELDS = ("_id", "name", "email", "phone", "role", "createdAt", "updatedAt")


class UserDocument(StoredDocument):
    name: str
    email: str
    phone: Optional[str] = None
    role: str = DEFAULT_ROLE
    password: str = Field(repr=False)
    createdAt: datetime
    updatedAt: datetime

    @field_validator("phone", mode="before")
    @classmethod
    def blank_phone_is_null(cls, value: Any) -> Optional[str]:
        return none_if_falsy(value)

    @field_validator("role", mode="before")
    @classmethod
    def default_role(cls, value: Any) -> str:
        return value or DEFAULT_ROLE

    @classmethod
    def new(cls, **fields: Any) -> "UserDocument":
        now = utcnow()
        return cls(createdAt=now, updatedAt=now, **fields)


def public_view(doc: Dict[str, Any]) -> Dict[str, Any]:
    return {field: doc.get(field) for field in PUBLIC_FIELDS}
