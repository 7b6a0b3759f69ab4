# 사용자 서비스 레이어
# - 회원가입 (이메일 중복 체크, 비밀번호 해시)
# - 단건 조회, 부분 수정
# - 로그인 (비밀번호 검증, 토큰 없이 사용자 정보 반환)

import logging
from typing import Any, Dict, Optional

from bson import ObjectId
from fastapi import Depends

from ..core.config import settings
from ..core.database import Database, get_database
from ..core.exceptions import AuthError, DuplicateKeyError, InternalError, NotFoundError
from ..core.security import hash_password_async, verify_password_async
from ..models.base import serialize_doc, utcnow
from ..models.user import UserDocument, public_view
from ..repositories.user_repository import UserRepository
from ..schemas.user_schema import UserCreate, UserLogin, UserUpdate
from .validation import check_password_length, require_fields

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class UserService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def create(self, payload: UserCreate) -> Dict[str, Any]:
        require_fields(
            payload.name, payload.email, payload.password,
            message="Name, email, and password are required",
        )
        existing = await self.repo.get_by_email(payload.email)
        if existing:
            raise DuplicateKeyError("Email already exists")

        hashed = await hash_password_async(payload.password)
        doc = UserDocument.new(
            name=payload.name,
            email=payload.email,
            password=hashed,
            phone=payload.phone,
            role=payload.role,
        ).to_mongo()
        result = await self.repo.insert(doc)
        if not result.acknowledged:
            raise InternalError("Failed to create user")

        doc["_id"] = result.inserted_id
        logger.info(f"[UserService] 사용자 생성: {result.inserted_id}")
        return {
            "insertedId": str(result.inserted_id),
            "user": serialize_doc(public_view(doc)),
        }

    async def get(self, user_id: str) -> Dict[str, Any]:
        # 주니어 개발자님께: 사용자 라우트는 기존 클라이언트 호환을 위해
        # 잘못된 형식의 ID를 400으로 바꾸지 않습니다. ObjectId()가 던지는 InvalidId가
        # 그대로 올라가서 500이 됩니다.
        user = await self.repo.get(ObjectId(user_id))
        if not user:
            raise NotFoundError("User not found")
        return serialize_doc(public_view(user))

    async def update(self, user_id: str, payload: Optional[UserUpdate]) -> int:
        oid = ObjectId(user_id)
        if not await self.repo.get(oid):
            raise NotFoundError("User not found")

        fields = payload.model_dump(exclude_unset=True) if payload else {}
        # 변경 필드가 없어도 updatedAt은 항상 갱신
        updates: Dict[str, Any] = {"updatedAt": utcnow()}
        for key in ("name", "email", "role"):
            if fields.get(key):
                updates[key] = fields[key]
        if "phone" in fields:
            updates["phone"] = fields["phone"]

        password = fields.get("password")
        if password:
            check_password_length(password, settings.PASSWORD_MIN_LENGTH)
            updates["password"] = await hash_password_async(password)

        result = await self.repo.update_fields(oid, updates)
        if result.matched_count == 0:
            raise NotFoundError("User not found")
        return result.modified_count

    async def login(self, payload: UserLogin) -> Dict[str, Any]:
        require_fields(payload.email, payload.password, message="Email and password are required")
        user = await self.repo.get_by_email(payload.email)
        # 이메일 없음 / 비밀번호 불일치를 같은 응답으로 처리 (사용자 열거 방지)
        if not user:
            raise AuthError(INVALID_CREDENTIALS)
        if not await verify_password_async(payload.password, user.get("password") or ""):
            raise AuthError(INVALID_CREDENTIALS)
        return serialize_doc(public_view(user))


def get_user_service(db: Database = Depends(get_database)) -> UserService:
    return UserService(UserRepository(db))
