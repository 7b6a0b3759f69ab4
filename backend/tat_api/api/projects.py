# 프로젝트 라우터
# - GET  /api/prjects        : 목록 (status, leader_id, page, limit)
# - POST /api/prjects        : 생성
# - GET  /api/prjects/{id}   : 단건 조회
#
# 주의: 기존 클라이언트가 오타 경로(/api/prjects)를 사용하므로 그대로 두고,
# main.py에서 /api/projects 별칭도 함께 등록합니다.

from typing import Optional

from fastapi import APIRouter, Depends, status

from ..schemas.project_schema import ProjectCreate
from ..services.project_service import ProjectService, get_project_service
from .responses import api_error_body, api_success, handle_errors

router = APIRouter(tags=["projects"])

@router.get("", summary="프로젝트 목록 (페이지네이션)")
@handle_errors(api_error_body, "Get all projects")
async def list_projects(
    status: Optional[str] = None,
    leader_id: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    service: ProjectService = Depends(get_project_service),
):
    data = await service.list(status, leader_id, page, limit)
    return api_success("Projects retrieved successfully", data)

@router.post("", status_code=status.HTTP_201_CREATED, summary="프로젝트 생성 (이름 중복 체크 포함)")
@handle_errors(api_error_body, "Create project")
async def create_project(payload: ProjectCreate, service: ProjectService = Depends(get_project_service)):
    project = await service.create(payload)
    return api_success("Project created successfully", project)

@router.get("/{project_id}", summary="프로젝트 단건 조회")
@handle_errors(api_error_body, "Get project by ID")
async def get_project(project_id: str, service: ProjectService = Depends(get_project_service)):
    project = await service.get(project_id)
    return api_success("Project found", project)
