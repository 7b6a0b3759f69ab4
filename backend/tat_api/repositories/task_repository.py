# 작업 저장소 레이어

from .base_repository import MongoRepository
from ..models import task as task_model

class TaskRepository(MongoRepository):
    collection_name = task_model.COLLECTION
