# 사용자 저장소 레이어

from typing import Any, Dict, Optional

from .base_repository import MongoRepository
from ..models import user as user_model

class UserRepository(MongoRepository):
    collection_name = user_model.COLLECTION

    async def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        return await self.find_one_by("email", email)
