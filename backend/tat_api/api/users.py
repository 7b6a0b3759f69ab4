# 사용자 라우터
# - 회원가입: POST /api/users/create-user
# - 단건 조회: GET /api/users/user/{user_id}
# - 수정: PUT /api/users/update/{user_id}
# - 로그인: POST /api/users/login

from typing import Optional

from fastapi import APIRouter, Depends, status

from ..schemas.user_schema import UserCreate, UserLogin, UserUpdate
from ..services.user_service import UserService, get_user_service
from .responses import handle_errors, user_error_body

router = APIRouter(prefix="/users", tags=["users"])

@router.post("/create-user", status_code=status.HTTP_201_CREATED, summary="회원가입 (이메일 중복 체크 포함)")
@handle_errors(user_error_body, "Create user")
async def create_user(payload: UserCreate, service: UserService = Depends(get_user_service)):
    data = await service.create(payload)
    return {"message": "User created successfully", "data": data}

@router.get("/user/{user_id}", summary="사용자 단건 조회 (비밀번호 제외)")
@handle_errors(user_error_body, "Get user")
async def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    user = await service.get(user_id)
    return {"message": "User found", "data": user}

@router.put("/update/{user_id}", summary="사용자 부분 수정")
@handle_errors(user_error_body, "Update user")
async def update_user(
    user_id: str,
    payload: Optional[UserUpdate] = None,
    service: UserService = Depends(get_user_service),
):
    modified = await service.update(user_id, payload)
    return {"message": "User updated successfully", "modifiedCount": modified}

@router.post("/login", summary="로그인 (토큰 없이 사용자 정보 반환)")
@handle_errors(user_error_body, "Login")
async def login(payload: UserLogin, service: UserService = Depends(get_user_service)):
    user = await service.login(payload)
    return {"message": "Login successful", "data": user}
