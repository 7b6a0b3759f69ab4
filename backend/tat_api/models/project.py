# Project 도메인 모델
# - 컬렉션: projects
# - leader_id는 users._id를 가리키는 약한 참조 (형식만 검사, 존재 여부는 검사하지 않음)

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import field_validator

from .base import SYSTEM_USER, StoredDocument, empty_string, none_if_falsy, utcnow

COLLECTION = "projects"


class ProjectStatus(str, Enum):
    PLANNING = "PLANNING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    ON_HOLD = "ON_HOLD"


DEFAULT_STATUS = ProjectStatus.PLANNING


class ProjectDocument(StoredDocument):
    project_name: str
    description: str = ""
    leader_id: str = ""
    start_date: datetime
    end_date: Optional[datetime] = None
    budget: Optional[float] = None
    status: ProjectStatus = DEFAULT_STATUS
    created_at: datetime
    updated_at: datetime
    created_by: str = SYSTEM_USER

    @field_validator("description", "leader_id", mode="before")
    @classmethod
    def blank_to_empty_string(cls, value: Any) -> str:
        return empty_string(value)

    @field_validator("budget", mode="before")
    @classmethod
    def falsy_budget_is_null(cls, value: Any) -> Any:
        return none_if_falsy(value)

    @classmethod
    def new(cls, **fields: Any) -> "ProjectDocument":
        now = utcnow()
        return cls(created_at=now, updated_at=now, **fields)
