# 요청 스키마 정의 (Pydantic 모델)
# 주니어 개발자님께: 필수 필드도 Optional로 선언합니다.
# 누락 시 FastAPI 기본 422 대신, 서비스 레이어에서 정해진 400 메시지를 내려주기 위함입니다.

from typing import Optional
from pydantic import BaseModel

class UserCreate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[str] = None

class UserUpdate(BaseModel):
    # 요청 본문에 실제로 들어온 필드만 반영 (model_dump(exclude_unset=True))
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[str] = None
    password: Optional[str] = None

class UserLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
