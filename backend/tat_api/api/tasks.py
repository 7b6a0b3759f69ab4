# 작업 라우터
# - GET  /api/tasks       : 목록 (project_id, assigned_to, status, priority, page, limit)
# - POST /api/tasks       : 생성
# - GET  /api/tasks/{id}  : 단건 조회
# - PUT  /api/tasks/{id}  : 부분 수정

from typing import Optional

from fastapi import APIRouter, Depends, status

from ..schemas.task_schema import TaskCreate, TaskUpdate
from ..services.task_service import TaskService, get_task_service
from .responses import api_error_body, api_success, handle_errors

router = APIRouter(prefix="/tasks", tags=["tasks"])

@router.get("", summary="작업 목록 (페이지네이션)")
@handle_errors(api_error_body, "Get all tasks")
async def list_tasks(
    project_id: Optional[str] = None,
    assigned_to: Optional[str] = None,
    status: Optional[str] = None,
    priority: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    service: TaskService = Depends(get_task_service),
):
    data = await service.list(project_id, assigned_to, status, priority, page, limit)
    return api_success("Tasks retrieved successfully", data)

@router.post("", status_code=status.HTTP_201_CREATED, summary="작업 생성")
@handle_errors(api_error_body, "Create task")
async def create_task(payload: TaskCreate, service: TaskService = Depends(get_task_service)):
    task = await service.create(payload)
    return api_success("Task created successfully", task)

@router.get("/{task_id}", summary="작업 단건 조회")
@handle_errors(api_error_body, "Get task by ID")
async def get_task(task_id: str, service: TaskService = Depends(get_task_service)):
    task = await service.get(task_id)
    return api_success("Task found", task)

@router.put("/{task_id}", summary="작업 부분 수정")
@handle_errors(api_error_body, "Update task")
async def update_task(
    task_id: str,
    payload: Optional[TaskUpdate] = None,
    service: TaskService = Depends(get_task_service),
):
    task = await service.update(task_id, payload)
    return api_success("Task updated successfully", task)
