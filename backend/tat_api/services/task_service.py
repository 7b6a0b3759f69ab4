# 작업(Task) 서비스 레이어
# - 목록 조회 (project_id, assigned_to, status, priority 필터 + 페이지네이션)
# - 생성, 단건 조회, 부분 수정
# - 상태 전이 규칙은 없음: 허용된 enum 값이면 언제든 변경 가능

import logging
from typing import Any, Dict, Optional

from bson import ObjectId
from fastapi import Depends

from ..core.database import Database, get_database
from ..core.exceptions import InternalError, NotFoundError
from ..core.pagination import build_pagination, parse_page_params
from ..models.base import is_valid_object_id, serialize_doc, utcnow
from ..models.task import (
    DEFAULT_PRIORITY,
    DEFAULT_STATUS,
    TaskDocument,
    TaskPriority,
    TaskStatus,
)
from ..repositories.task_repository import TaskRepository
from ..schemas.task_schema import TaskCreate, TaskUpdate
from .validation import (
    optional_datetime,
    optional_object_id,
    parse_datetime,
    parse_enum,
    require_fields,
    require_object_id,
)

logger = logging.getLogger(__name__)

INVALID_TASK_ID = "Invalid task ID format"
INVALID_ASSIGNEE = "Invalid assigned user ID format"
INVALID_STATUS = "Invalid task status"
INVALID_PRIORITY = "Invalid task priority"
INVALID_DUE_DATE = "Invalid due date format"


class TaskService:
    def __init__(self, repo: TaskRepository):
        self.repo = repo

    async def list(
        self,
        project_id: Optional[str] = None,
        assigned_to: Optional[str] = None,
        status_filter: Optional[str] = None,
        priority: Optional[str] = None,
        page: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> Dict[str, Any]:
        filter_dict: Dict[str, Any] = {}
        if project_id and is_valid_object_id(project_id):
            filter_dict["project_id"] = project_id
        if assigned_to and is_valid_object_id(assigned_to):
            filter_dict["assigned_to"] = assigned_to
        if status_filter:
            filter_dict["status"] = status_filter
        if priority:
            filter_dict["priority"] = priority

        params = parse_page_params(page, limit)
        items, total = await self.repo.find_page(filter_dict, params.skip, params.limit)
        return {
            "tasks": [serialize_doc(t) for t in items],
            "pagination": build_pagination(params, total),
        }

    async def create(self, payload: TaskCreate) -> Dict[str, Any]:
        require_fields(
            payload.task_title, payload.project_id,
            message="Task title and project ID are required",
        )
        project_id = require_object_id(payload.project_id, "Invalid project ID format")
        assigned_to = optional_object_id(payload.assigned_to, INVALID_ASSIGNEE)
        task_status = parse_enum(TaskStatus, payload.status or DEFAULT_STATUS.value, INVALID_STATUS)
        priority = parse_enum(TaskPriority, payload.priority or DEFAULT_PRIORITY.value, INVALID_PRIORITY)
        due_date = optional_datetime(payload.due_date, INVALID_DUE_DATE)

        doc = TaskDocument.new(
            task_title=payload.task_title,
            project_id=project_id,
            task_description=payload.task_description,
            assigned_to=assigned_to,
            status=task_status,
            priority=priority,
            due_date=due_date,
            estimated_hours=payload.estimated_hours,
        ).to_mongo()
        result = await self.repo.insert(doc)
        if not result.acknowledged:
            raise InternalError("Failed to create task")

        created = await self.repo.get(result.inserted_id)
        logger.info(f"[TaskService] 작업 생성: {result.inserted_id} (project {project_id})")
        return serialize_doc(created)

    async def get(self, task_id: str) -> Dict[str, Any]:
        require_object_id(task_id, INVALID_TASK_ID)
        task = await self.repo.get(ObjectId(task_id))
        if not task:
            raise NotFoundError("Task not found")
        return serialize_doc(task)

    async def update(self, task_id: str, payload: Optional[TaskUpdate]) -> Dict[str, Any]:
        require_object_id(task_id, INVALID_TASK_ID)
        oid = ObjectId(task_id)
        if not await self.repo.get(oid):
            raise NotFoundError("Task not found")

        fields = payload.model_dump(exclude_unset=True) if payload else {}
        updates: Dict[str, Any] = {"updated_at": utcnow()}

        if fields.get("task_title"):
            updates["task_title"] = fields["task_title"]
        if "task_description" in fields:
            updates["task_description"] = fields["task_description"]
        if fields.get("assigned_to"):
            updates["assigned_to"] = require_object_id(fields["assigned_to"], INVALID_ASSIGNEE)
        if fields.get("status"):
            updates["status"] = parse_enum(TaskStatus, fields["status"], INVALID_STATUS).value
        if fields.get("priority"):
            updates["priority"] = parse_enum(TaskPriority, fields["priority"], INVALID_PRIORITY).value
        if fields.get("due_date"):
            updates["due_date"] = parse_datetime(fields["due_date"], INVALID_DUE_DATE)
        for key in ("estimated_hours", "actual_hours"):
            if key in fields:
                updates[key] = fields[key]

        result = await self.repo.update_fields(oid, updates)
        if result.matched_count == 0:
            raise NotFoundError("Task not found")
        return serialize_doc(await self.repo.get(oid))


def get_task_service(db: Database = Depends(get_database)) -> TaskService:
    return TaskService(TaskRepository(db))
