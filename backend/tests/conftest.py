# 테스트 공통 픽스처
# - 실제 MongoDB 대신 메모리 컬렉션을 get_database 의존성에 주입
# - motor 컬렉션에서 사용하는 메서드만 흉내냄 (동등 비교 필터만 지원)

import copy

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.results import InsertOneResult, UpdateResult

from tat_api.core.database import get_database
from tat_api.main import app


def _matches(doc, filter_dict):
    return all(doc.get(k) == v for k, v in filter_dict.items())


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    def sort(self, key, direction):
        self._docs = sorted(self._docs, key=lambda d: d.get(key), reverse=direction < 0)
        return self

    def skip(self, n):
        self._docs = self._docs[n:]
        return self

    def limit(self, n):
        self._docs = self._docs[:n]
        return self

    async def to_list(self, length=None):
        return list(self._docs)


class FakeCollection:
    def __init__(self):
        self.docs = []
        self.acknowledge = True

    async def find_one(self, filter_dict):
        for doc in self.docs:
            if _matches(doc, filter_dict):
                return copy.deepcopy(doc)
        return None

    async def insert_one(self, document):
        document.setdefault("_id", ObjectId())
        if self.acknowledge:
            self.docs.append(copy.deepcopy(document))
        return InsertOneResult(document["_id"], acknowledged=self.acknowledge)

    async def update_one(self, filter_dict, update):
        changes = update["$set"]
        for doc in self.docs:
            if _matches(doc, filter_dict):
                modified = any(doc.get(k) != v for k, v in changes.items())
                doc.update(copy.deepcopy(changes))
                return UpdateResult({"n": 1, "nModified": int(modified)}, acknowledged=True)
        return UpdateResult({"n": 0, "nModified": 0}, acknowledged=True)

    def find(self, filter_dict):
        return FakeCursor([copy.deepcopy(d) for d in self.docs if _matches(d, filter_dict)])

    async def count_documents(self, filter_dict):
        return sum(1 for d in self.docs if _matches(d, filter_dict))


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def collection(self, name):
        return self.collections.setdefault(name, FakeCollection())


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def client(fake_db):
    # with 블록 없이 생성하면 startup 이벤트(실제 DB 연결)가 실행되지 않음
    app.dependency_overrides[get_database] = lambda: fake_db
    yield TestClient(app)
    app.dependency_overrides.clear()
