# 영속성 게이트웨이
# - MongoDB 클라이언트 1개를 명시적으로 생성/연결/종료
# - 컬렉션 핸들 제공
# - 라우터는 전역 변수 대신 FastAPI 의존성(get_database)으로 주입받음

import logging
from typing import Optional

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from .config import settings
from .retry import create_db_retry_decorator

logger = logging.getLogger(__name__)


class Database:
    """motor 클라이언트를 감싸는 앱 단위 리소스입니다.

    main.py에서 한 번 만들어 app.state에 올려두고, startup에서 connect(),
    shutdown에서 close()를 호출합니다.
    """

    def __init__(self, uri: str, name: str, timeout_ms: int = 5000):
        self.uri = uri
        self.name = name
        self.timeout_ms = timeout_ms
        self._client: Optional[AsyncIOMotorClient] = None
        self._db: Optional[AsyncIOMotorDatabase] = None
        self._verified = False

    @property
    def is_connected(self) -> bool:
        # startup ping에 성공했는지 여부 (헬스체크용)
        return self._verified

    def _ensure_client(self) -> AsyncIOMotorDatabase:
        # 주니어 개발자님께: AsyncIOMotorClient는 생성 시점에 연결하지 않고,
        # 첫 쿼리에서 서버를 찾습니다. 그래서 클라이언트는 한 번만 만들고,
        # 실제 연결 실패는 각 쿼리에서 serverSelectionTimeoutMS 후 에러로 드러납니다.
        if self._db is None:
            self._client = AsyncIOMotorClient(self.uri, serverSelectionTimeoutMS=self.timeout_ms)
            self._db = self._client[self.name]
        return self._db

    async def connect(self, max_attempts: int = 3) -> None:
        if self._verified:
            return
        self._ensure_client()
        client = self._client

        @create_db_retry_decorator(max_attempts=max_attempts)
        async def _ping():
            await client.admin.command("ping")

        # 실패해도 클라이언트는 유지합니다. 이후 요청에서 motor가 다시 서버를 찾습니다.
        await _ping()
        self._verified = True
        logger.info(f"[Database] MongoDB 연결 성공: {self.name}")

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            logger.info("[Database] MongoDB 연결 종료")
        self._client = None
        self._db = None
        self._verified = False

    def collection(self, name: str) -> AsyncIOMotorCollection:
        return self._ensure_client()[name]


def create_database() -> Database:
    return Database(settings.MONGODB_URI, settings.DATABASE_NAME, settings.MONGODB_TIMEOUT_MS)


def get_database(request: Request) -> Database:
    # FastAPI 의존성: 테스트에서는 app.dependency_overrides로 교체합니다.
    return request.app.state.database
