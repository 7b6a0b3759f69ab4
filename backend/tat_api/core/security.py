# 보안 유틸리티
# - 비밀번호 해싱/검증 (새 해시는 bcrypt, 기존 argon2id 해시도 검증 가능)
# - 해시 계산은 CPU를 오래 쓰므로 이벤트 루프를 막지 않도록 스레드풀에서 실행

import logging

from fastapi.concurrency import run_in_threadpool
from passlib.context import CryptContext

logger = logging.getLogger(__name__)

# 주니어 개발자님께: schemes의 첫 번째 항목(bcrypt)으로 새 해시를 만들고,
# 이전 서버가 저장한 argon2id 해시는 식별해서 검증만 합니다.
pwd_context = CryptContext(schemes=["bcrypt", "argon2"], deprecated="auto")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    # 식별할 수 없거나 비어 있는 해시는 검증 실패로 처리 (UnknownHashError는 ValueError 하위 클래스)
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError) as e:
        logger.warning(f"[Security] 저장된 비밀번호 해시를 검증할 수 없습니다: {e}")
        return False

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

async def hash_password_async(password: str) -> str:
    return await run_in_threadpool(get_password_hash, password)

async def verify_password_async(plain_password: str, hashed_password: str) -> bool:
    return await run_in_threadpool(verify_password, plain_password, hashed_password)
