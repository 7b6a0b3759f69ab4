# 응답 envelope & 에러 처리
# - 사용자 라우터: {message, data} / 에러 {error}
# - 프로젝트/작업 라우터: {success, message, data} / 에러 {success: false, message}
# - 예상하지 못한 예외는 500 + 고정 메시지로 변환, 상세 내용은 서버 로그에만 남김

import functools
import logging
from typing import Any, Callable, Dict

from fastapi import status
from fastapi.responses import JSONResponse

from ..core.exceptions import AppError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def user_error_body(message: str) -> Dict[str, Any]:
    return {"error": message}


def api_error_body(message: str) -> Dict[str, Any]:
    return {"success": False, "message": message}


def api_success(message: str, data: Any = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": True, "message": message}
    if data is not None:
        body["data"] = data
    return body


def handle_errors(render: Callable[[str], Dict[str, Any]], action: str):
    """엔드포인트를 감싸 도메인 예외를 라우터별 envelope로 변환하는 데코레이터입니다.

    주니어 개발자님께: functools.wraps 덕분에 FastAPI는 원래 함수의 시그니처를 보고
    파라미터/의존성을 그대로 해석합니다.

    Args:
        render: 에러 메시지를 응답 본문 dict로 만드는 함수
        action: 로그에 남길 작업 이름 (예: "Create user")
    """
    def decorator(endpoint):
        @functools.wraps(endpoint)
        async def wrapper(*args, **kwargs):
            try:
                return await endpoint(*args, **kwargs)
            except AppError as e:
                if e.status_code >= 500:
                    logger.error(f"[{action}] {e.message}")
                return JSONResponse(status_code=e.status_code, content=render(e.message))
            except Exception:
                logger.exception(f"[{action}] error")
                return JSONResponse(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    content=render(INTERNAL_ERROR_MESSAGE),
                )
        return wrapper
    return decorator
