# 프로젝트 서비스 레이어
# - 목록 조회 (status, leader_id 필터 + 페이지네이션)
# - 생성 (날짜 검증, 프로젝트명 중복 체크)
# - 단건 조회

import logging
from typing import Any, Dict, Optional

from bson import ObjectId
from fastapi import Depends, status

from ..core.database import Database, get_database
from ..core.exceptions import DuplicateKeyError, InternalError, NotFoundError
from ..core.pagination import build_pagination, parse_page_params
from ..models.base import is_valid_object_id, serialize_doc
from ..models.project import DEFAULT_STATUS, ProjectDocument, ProjectStatus
from ..repositories.project_repository import ProjectRepository
from ..schemas.project_schema import ProjectCreate
from .validation import (
    ensure_after,
    optional_datetime,
    optional_object_id,
    parse_datetime,
    parse_enum,
    require_fields,
    require_object_id,
)

logger = logging.getLogger(__name__)


class ProjectService:
    def __init__(self, repo: ProjectRepository):
        self.repo = repo

    async def list(
        self,
        status_filter: Optional[str] = None,
        leader_id: Optional[str] = None,
        page: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> Dict[str, Any]:
        filter_dict: Dict[str, Any] = {}
        if status_filter:
            filter_dict["status"] = status_filter
        # 형식이 잘못된 참조 필터는 에러 없이 무시
        if leader_id and is_valid_object_id(leader_id):
            filter_dict["leader_id"] = leader_id

        params = parse_page_params(page, limit)
        items, total = await self.repo.find_page(filter_dict, params.skip, params.limit)
        return {
            "projects": [serialize_doc(p) for p in items],
            "pagination": build_pagination(params, total),
        }

    async def create(self, payload: ProjectCreate) -> Dict[str, Any]:
        require_fields(
            payload.project_name, payload.start_date,
            message="Project name and start date are required",
        )
        start_date = parse_datetime(payload.start_date, "Invalid start date format")
        end_date = optional_datetime(payload.end_date, "Invalid end date format")
        ensure_after(start_date, end_date, "End date must be after start date")
        leader_id = optional_object_id(payload.leader_id, "Invalid leader ID format")
        project_status = parse_enum(
            ProjectStatus, payload.status or DEFAULT_STATUS.value, "Invalid project status"
        )

        if await self.repo.get_by_name(payload.project_name):
            raise DuplicateKeyError(
                "Project name already exists", status_code=status.HTTP_400_BAD_REQUEST
            )

        doc = ProjectDocument.new(
            project_name=payload.project_name,
            start_date=start_date,
            description=payload.description,
            leader_id=leader_id,
            end_date=end_date,
            budget=payload.budget,
            status=project_status,
        ).to_mongo()
        result = await self.repo.insert(doc)
        if not result.acknowledged:
            raise InternalError("Failed to create project")

        created = await self.repo.get(result.inserted_id)
        logger.info(f"[ProjectService] 프로젝트 생성: {result.inserted_id} ({payload.project_name})")
        return serialize_doc(created)

    async def get(self, project_id: str) -> Dict[str, Any]:
        require_object_id(project_id, "Invalid project ID format")
        project = await self.repo.get(ObjectId(project_id))
        if not project:
            raise NotFoundError("Project not found")
        return serialize_doc(project)


def get_project_service(db: Database = Depends(get_database)) -> ProjectService:
    return ProjectService(ProjectRepository(db))
