# Task 도메인 모델
# - 컬렉션: tasks
# - project_id, assigned_to는 약한 참조 (ObjectId 형식만 검사)

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import field_validator

from .base import SYSTEM_USER, StoredDocument, empty_string, none_if_falsy, utcnow

COLLECTION = "tasks"


class TaskStatus(str, Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    REVIEW = "REVIEW"
    DONE = "DONE"
    CANCELLED = "CANCELLED"


class TaskPriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


DEFAULT_STATUS = TaskStatus.TODO
DEFAULT_PRIORITY = TaskPriority.MEDIUM


class TaskDocument(StoredDocument):
    task_title: str
    task_description: str = ""
    project_id: str
    assigned_to: str = ""
    status: TaskStatus = DEFAULT_STATUS
    priority: TaskPriority = DEFAULT_PRIORITY
    due_date: Optional[datetime] = None
    estimated_hours: Optional[float] = None
    actual_hours: float = 0
    created_at: datetime
    updated_at: datetime
    created_by: str = SYSTEM_USER

    @field_validator("task_description", "assigned_to", mode="before")
    @classmethod
    def blank_to_empty_string(cls, value: Any) -> str:
        return empty_string(value)

    @field_validator("estimated_hours", mode="before")
    @classmethod
    def falsy_estimate_is_null(cls, value: Any) -> Any:
        return none_if_falsy(value)

    @classmethod
    def new(cls, **fields: Any) -> "TaskDocument":
        now = utcnow()
        return cls(created_at=now, updated_at=now, **fields)
