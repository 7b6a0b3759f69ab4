# 공통 저장소 레이어
# - 컬렉션 단위 데이터 접근(조회/생성/수정)만 담당
# - 검증, 응답 가공은 서비스 레이어 책임

from typing import Any, Dict, List, Optional, Tuple

from bson import ObjectId
from pymongo.results import InsertOneResult, UpdateResult

from ..core.database import Database


class MongoRepository:
    collection_name: str = ""
    sort_field: str = "created_at"

    def __init__(self, db: Database):
        self.db = db

    @property
    def collection(self):
        return self.db.collection(self.collection_name)

    async def get(self, doc_id: ObjectId) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one({"_id": doc_id})

    async def find_one_by(self, field: str, value: Any) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one({field: value})

    async def insert(self, document: Dict[str, Any]) -> InsertOneResult:
        return await self.collection.insert_one(document)

    async def update_fields(self, doc_id: ObjectId, fields: Dict[str, Any]) -> UpdateResult:
        return await self.collection.update_one({"_id": doc_id}, {"$set": fields})

    async def find_page(
        self, filter_dict: Dict[str, Any], skip: int, limit: int
    ) -> Tuple[List[Dict[str, Any]], int]:
        # 생성 시각 내림차순 (최신 먼저)
        cursor = (
            self.collection.find(filter_dict)
            .sort(self.sort_field, -1)
            .skip(skip)
            .limit(limit)
        )
        items = await cursor.to_list(length=limit)
        total = await self.collection.count_documents(filter_dict)
        return items, total
