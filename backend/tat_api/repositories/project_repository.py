# 프로젝트 저장소 레이어

from typing import Any, Dict, Optional

from .base_repository import MongoRepository
from ..models import project as project_model

class ProjectRepository(MongoRepository):
    collection_name = project_model.COLLECTION

    async def get_by_name(self, project_name: str) -> Optional[Dict[str, Any]]:
        return await self.find_one_by("project_name", project_name)
