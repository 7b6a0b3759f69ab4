# 커스텀 예외 클래스 정의
# 주니어 개발자님께: 서비스 레이어는 HTTP를 모르는 도메인 예외를 던지고,
# 라우터가 이 예외를 응답 envelope로 변환합니다.
# 각 예외는 대응하는 HTTP 상태 코드를 함께 가지고 있습니다.

from fastapi import status


class AppError(Exception):
    """애플리케이션 기본 예외 클래스

    Attributes:
        message: 클라이언트에 그대로 노출되는 메시지
        status_code: HTTP 상태 코드
    """
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(AppError):
    """필수 필드 누락, 잘못된 ID/날짜/enum 값"""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class DuplicateKeyError(AppError):
    """고유 필드(email, project_name) 중복

    주니어 개발자님께: 사용자는 409, 프로젝트는 400을 사용합니다.
    기존 클라이언트 호환을 위해 호출하는 쪽에서 status_code를 지정합니다.
    """
    status_code = status.HTTP_409_CONFLICT


class AuthError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class InternalError(AppError):
    """DB가 insert를 승인하지 않은 경우 등 서버 측 실패"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
